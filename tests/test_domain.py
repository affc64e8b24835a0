"""Tests for shopping list data models and text output."""

from datetime import datetime

import pytest
from shoplist.domain import Category, ShoppingItem, ShoppingList
from shoplist.parsing.formatter import format_shopping_list, items_to_json
from shoplist.parsing.sort_order import build_items


def test_category_orders_are_fixed() -> None:
    assert [c.order for c in Category] == list(range(7))
    assert [c.key for c in Category] == ["bakery", "meat", "dairy", "vegetables", "fruits", "cosmetics", "other"]


def test_category_from_key() -> None:
    assert Category.from_key(" Dairy ") is Category.DAIRY
    with pytest.raises(ValueError):
        Category.from_key("snacks")


@pytest.mark.parametrize("name", ["", "   ", " milk", "milk\n"])
def test_item_name_must_be_trimmed_and_non_empty(name: str) -> None:
    with pytest.raises(ValueError):
        ShoppingItem(name=name, category=Category.OTHER, sort_order=0)


def test_item_is_immutable() -> None:
    item = ShoppingItem("milk", Category.DAIRY, 2000)
    with pytest.raises(AttributeError):
        item.name = "bread"  # type: ignore[misc]


def test_list_from_items_named_after_creation_time() -> None:
    created = datetime(2026, 1, 4, 9, 5)
    shopping_list = ShoppingList.from_items(build_items(["milk", "Bread"]), created_at=created)

    assert shopping_list.name == "04.01.2026 09:05"
    assert [i.name for i in shopping_list.sorted_items()] == ["Bread", "milk"]
    assert [(c, [i.name for i in items]) for c, items in shopping_list.grouped()] == [
        (Category.BAKERY, ["Bread"]),
        (Category.DAIRY, ["milk"]),
    ]


def test_format_shopping_list() -> None:
    items = build_items(["Bread", "milk", "chicken", "cheese"])

    assert format_shopping_list(items) == "\n".join(
        [
            "Bakery",
            "  - Bread",
            "Meat",
            "  - chicken",
            "Dairy",
            "  - milk",
            "  - cheese",
        ]
    )


def test_format_with_title_and_empty_list() -> None:
    assert format_shopping_list([], title="Friday") == "Friday\n======"


def test_items_to_json() -> None:
    assert items_to_json(build_items(["soap", "Bread"])) == [
        {"name": "Bread", "category": "bakery", "label": "Bakery", "sort_order": 0},
        {"name": "soap", "category": "cosmetics", "label": "Cosmetics", "sort_order": 5000},
    ]
