"""Format parsed shopping items for terminal and JSON output."""

from collections.abc import Sequence
from typing import Any

from shoplist.domain.shopping import ShoppingItem, group_by_category


def format_shopping_list(items: Sequence[ShoppingItem], title: str | None = None) -> str:
    """
    Render items as category sections.

    Example:
        Bakery
          - Bread
        Dairy
          - milk
    """
    lines: list[str] = []
    if title:
        lines.append(title)
        lines.append("=" * len(title))

    for category, group in group_by_category(items):
        lines.append(category.label)
        lines.extend(f"  - {item.name}" for item in group)

    return "\n".join(lines)


def item_to_dict(item: ShoppingItem) -> dict[str, Any]:
    return {
        "name": item.name,
        "category": item.category.key,
        "label": item.category.label,
        "sort_order": item.sort_order,
    }


def items_to_json(items: Sequence[ShoppingItem]) -> list[dict[str, Any]]:
    """Serialize items in sort order."""
    return [item_to_dict(item) for item in sorted(items, key=lambda i: i.sort_order)]
