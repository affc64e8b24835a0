"""Runtime loader for category keyword files."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from shoplist.domain.shopping import Category
from shoplist.parsing.categories import CategoryKeywordTable, build_category_keyword_table
from shoplist.runtime.logging import get_logger
from shoplist.runtime.paths import get_paths
from shoplist.runtime.settings import load_toml

logger = get_logger(__name__)

_KNOWN_KEYS = {category.key for category in Category if category is not Category.OTHER}


@lru_cache(maxsize=8)
def load_category_keyword_table(keyword_paths: tuple[str, ...] | None = None) -> CategoryKeywordTable:
    """Load keyword additions from TOML files into an in-memory table.

    File format:

        [keywords]
        dairy = ["skyr", "ricotta"]
        fruits = ["papaya"]

    Args:
        keyword_paths: Files to merge in order; defaults to the user's
                       category_keywords.toml. Missing files are skipped.
    """
    if keyword_paths is None:
        files = [get_paths().category_keywords]
    else:
        files = [Path(path) for path in keyword_paths]

    configs = []
    for path in files:
        config = load_toml(path)
        keywords = config.get("keywords", {})
        if isinstance(keywords, dict):
            for key in keywords:
                if str(key).strip().lower() not in _KNOWN_KEYS:
                    logger.warning("Ignoring unknown category %r in %s", key, path)
        configs.append(config)

    table = build_category_keyword_table(configs=tuple(configs))
    logger.debug("Loaded keyword table from %d file(s)", len(files))
    return table
