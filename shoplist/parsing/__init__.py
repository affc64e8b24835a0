"""Pure list-parsing algorithms.

Nothing in this package performs I/O:
- categories: keyword-substring classifier
- segmenter: delimiter-based manual splitting
- sort_order: category-major sort keys
- completion: JSON extraction from model completions
- prompts, image_helpers, formatter: request and output helpers
"""

from shoplist.parsing.categories import (
    DEFAULT_CATEGORY_KEYWORDS,
    CategoryKeywordTable,
    build_category_keyword_table,
    classify_item,
    matching_categories,
)
from shoplist.parsing.segmenter import ITEM_DELIMITERS, split_items
from shoplist.parsing.sort_order import (
    CATEGORY_STRIDE,
    MAX_ITEMS_PER_CATEGORY,
    append_items,
    assign_sort_order,
    build_items,
    categorize_names,
)

__all__ = [
    "DEFAULT_CATEGORY_KEYWORDS",
    "CategoryKeywordTable",
    "build_category_keyword_table",
    "classify_item",
    "matching_categories",
    "ITEM_DELIMITERS",
    "split_items",
    "CATEGORY_STRIDE",
    "MAX_ITEMS_PER_CATEGORY",
    "append_items",
    "assign_sort_order",
    "build_items",
    "categorize_names",
]
