"""Runtime infrastructure for shoplist.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Settings via load_settings()
- Keyword file loading via load_category_keyword_table()
- The parsing service client, ParsingServiceClient

Usage:
    from shoplist.runtime import get_logger, load_settings

    logger = get_logger(__name__)
    settings = load_settings()
"""

from shoplist.runtime.category_rules import load_category_keyword_table
from shoplist.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from shoplist.runtime.parsing_service import ParsingServiceClient
from shoplist.runtime.paths import ProjectPaths, get_paths, reset_paths
from shoplist.runtime.settings import ServiceSettings, Settings, load_settings

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Rules
    "load_category_keyword_table",
    # Settings
    "Settings",
    "ServiceSettings",
    "load_settings",
    # Service
    "ParsingServiceClient",
    # Paths
    "get_paths",
    "reset_paths",
    "ProjectPaths",
]
