"""Sort-order assignment for categorized shopping items.

Keys are ``category.order * CATEGORY_STRIDE + position`` where position
counts items of that category in arrival order, starting at 0. Sorting by
the key groups categories in display order and keeps arrival order inside
each category.

Known limit: a category holding more than MAX_ITEMS_PER_CATEGORY items
produces keys that collide with the next category's range.
"""

from collections.abc import Iterable, Sequence

from shoplist.domain.shopping import Category, ShoppingItem
from shoplist.parsing.categories import CategoryKeywordTable, classify_item

CATEGORY_STRIDE = 1000
MAX_ITEMS_PER_CATEGORY = CATEGORY_STRIDE - 1


def categorize_names(
    names: Iterable[str],
    table: CategoryKeywordTable | None = None,
) -> list[tuple[str, Category]]:
    """Trim names, drop empty ones and pair each with its category."""
    pairs: list[tuple[str, Category]] = []
    for raw_name in names:
        name = raw_name.strip()
        if not name:
            continue
        pairs.append((name, classify_item(name, table)))
    return pairs


def assign_sort_order(
    pairs: Iterable[tuple[str, Category]],
    warning_sink: list[str] | None = None,
) -> list[ShoppingItem]:
    """
    Build items with category-major sort keys and return them sorted.

    Counters are local to this call, so concurrent calls never share state.

    Args:
        pairs: (name, category) tuples in arrival order
        warning_sink: Collects a message when a category overflows its key range

    Returns:
        Items sorted ascending by sort_order
    """
    counts: dict[Category, int] = {}
    items: list[ShoppingItem] = []

    for name, category in pairs:
        count = counts.get(category, 0)
        counts[category] = count + 1
        if count == CATEGORY_STRIDE and warning_sink is not None:
            warning_sink.append(
                f"More than {MAX_ITEMS_PER_CATEGORY} items in category {category.key}; sort keys overlap"
            )
        items.append(ShoppingItem(name=name, category=category, sort_order=category.order * CATEGORY_STRIDE + count))

    # sorted() is stable; keys within a category already increase with arrival order
    return sorted(items, key=lambda item: item.sort_order)


def build_items(
    names: Iterable[str],
    table: CategoryKeywordTable | None = None,
    warning_sink: list[str] | None = None,
) -> list[ShoppingItem]:
    """Categorize names and assign sort order in one step."""
    return assign_sort_order(categorize_names(names, table), warning_sink=warning_sink)


def append_items(
    existing: Sequence[ShoppingItem],
    names: Iterable[str],
    table: CategoryKeywordTable | None = None,
) -> list[ShoppingItem]:
    """
    Append extra names (e.g. fridge photo suggestions) to an existing list.

    New items get consecutive sort keys starting at len(existing), without
    per-category counters, and are placed after the existing items without
    re-sorting.
    """
    start = len(existing)
    appended = [
        ShoppingItem(name=name, category=category, sort_order=start + offset)
        for offset, (name, category) in enumerate(categorize_names(names, table))
    ]
    return [*existing, *appended]
