"""Category classification for shopping list items.

This module maps free-form item names to grocery categories.
Matching is plain case-insensitive substring containment: a keyword
found anywhere inside the item name counts as a hit, so "buttermilk"
matches "milk" and "breadcrumbs" matches "bread".

Categories are tested in a fixed order (bakery, meat, dairy, vegetables,
fruits, cosmetics). When an item contains keywords from two categories,
the one tested first wins, e.g. "chicken with cheese" is meat.

To add keywords:
1. Extend DEFAULT_CATEGORY_KEYWORDS below, or
2. Add a [keywords] table to the user's category_keywords.toml
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from shoplist.domain.shopping import Category

KeywordEntry = tuple[Category, tuple[str, ...]]

# Iteration order is part of the contract: the first matching category wins.
DEFAULT_CATEGORY_KEYWORDS: tuple[KeywordEntry, ...] = (
    (
        Category.BAKERY,
        (
            "bread",
            "roll",
            "baguette",
            "bagel",
            "croissant",
            "buns",
            "muffin",
            "cake",
            "pastry",
            "toast",
            "pita",
            "tortilla",
            "donut",
            "doughnut",
        ),
    ),
    (
        Category.MEAT,
        (
            "meat",
            "chicken",
            "beef",
            "pork",
            "bacon",
            "sausage",
            "salami",
            "pepperoni",
            "turkey",
            "steak",
            "mince",
            "lamb",
            "veal",
            "prosciutto",
            "chorizo",
            "hot dog",
        ),
    ),
    (
        Category.DAIRY,
        (
            "milk",
            "cheese",
            "butter",
            "yogurt",
            "yoghurt",
            "sour cream",
            "whipping cream",
            "kefir",
            "mozzarella",
            "parmesan",
            "cheddar",
            "feta",
            "quark",
        ),
    ),
    (
        Category.VEGETABLES,
        (
            "carrot",
            "tomato",
            "cucumber",
            "pepper",
            "onion",
            "garlic",
            "potato",
            "cabbage",
            "lettuce",
            "salad",
            "parsley",
            "leek",
            "zucchini",
            "eggplant",
            "broccoli",
            "spinach",
            "celery",
            "cauliflower",
            "mushroom",
        ),
    ),
    (
        Category.FRUITS,
        (
            "apple",
            "banana",
            "orange",
            "tangerine",
            "mandarin",
            "grape",
            "strawberr",
            "blueberr",
            "raspberr",
            "pear",
            "lemon",
            "lime",
            "kiwi",
            "melon",
            "peach",
            "plum",
            "cherr",
            "mango",
        ),
    ),
    (
        Category.COSMETICS,
        (
            "shampoo",
            "soap",
            "toothpaste",
            "toothbrush",
            "deodorant",
            "lotion",
            "shower gel",
            "toilet paper",
            "tissues",
            "napkins",
            "conditioner",
            "razor",
            "cosmetics",
        ),
    ),
)


@dataclass(frozen=True)
class CategoryKeywordTable:
    """Ordered (category, keywords) pairs used by the classifier."""

    entries: tuple[KeywordEntry, ...]

    def keywords_for(self, category: Category) -> tuple[str, ...]:
        for entry_category, keywords in self.entries:
            if entry_category is category:
                return keywords
        return tuple()


def _normalize_keywords(raw: Any) -> tuple[str, ...]:
    """Normalize a keywords value from TOML into a tuple of lower-case strings."""
    if isinstance(raw, str):
        value = raw.strip().lower()
        return (value,) if value else tuple()
    if isinstance(raw, list):
        return tuple(str(v).strip().lower() for v in raw if str(v).strip())
    return tuple()


def _dedupe(keywords: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    result: list[str] = []
    for keyword in keywords:
        if keyword in seen:
            continue
        seen.add(keyword)
        result.append(keyword)
    return tuple(result)


def build_category_keyword_table(
    configs: Sequence[Mapping[str, Any]] | None = None,
    base: Sequence[KeywordEntry] = DEFAULT_CATEGORY_KEYWORDS,
) -> CategoryKeywordTable:
    """Merge keyword layers from in-memory configs on top of the base table.

    Each config may carry a ``keywords`` mapping of category key to a keyword
    list. Extra keywords are appended to their category; the category order
    of ``base`` is kept. Unknown category keys and ``other`` are skipped.
    """
    merged: dict[Category, list[str]] = {category: list(keywords) for category, keywords in base}

    for config in configs or ():
        keywords_table = config.get("keywords", {})
        if not isinstance(keywords_table, Mapping):
            continue
        for raw_key, raw_keywords in keywords_table.items():
            try:
                category = Category.from_key(str(raw_key))
            except ValueError:
                continue
            if category is Category.OTHER:
                continue
            merged.setdefault(category, []).extend(_normalize_keywords(raw_keywords))

    # Categories new to this table go after the base ones, in enum order.
    ordered = [category for category, _ in base]
    ordered.extend(c for c in Category if c in merged and c not in ordered)

    return CategoryKeywordTable(
        entries=tuple((category, _dedupe(kw.lower() for kw in merged[category])) for category in ordered)
    )


@lru_cache(maxsize=1)
def _get_default_table() -> CategoryKeywordTable:
    """Built-in-only table (no file I/O, no runtime deps)."""
    return build_category_keyword_table()


def classify_item(name: str, table: CategoryKeywordTable | None = None) -> Category:
    """
    Return the category for an item name.

    Args:
        name: Item name as typed or dictated (e.g., "2x whole milk")
        table: Keyword table to use; built-in defaults when omitted

    Returns:
        First category (in table order) with a keyword contained in the name,
        or Category.OTHER if none matches.
    """
    table = table or _get_default_table()
    lowered = name.strip().lower()
    if not lowered:
        return Category.OTHER

    for category, keywords in table.entries:
        for keyword in keywords:
            if keyword in lowered:
                return category

    return Category.OTHER


def matching_categories(name: str, table: CategoryKeywordTable | None = None) -> list[tuple[Category, str]]:
    """Debug version that returns every matching category with its first hit.

    Useful for understanding why an item landed in a particular category.
    The first entry is what classify_item() returns.
    """
    table = table or _get_default_table()
    lowered = name.strip().lower()
    matches: list[tuple[Category, str]] = []
    if not lowered:
        return matches

    for category, keywords in table.entries:
        for keyword in keywords:
            if keyword in lowered:
                matches.append((category, keyword))
                break  # Only need one keyword match per category

    return matches
