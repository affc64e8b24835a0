"""Tests for category-major sort key assignment."""

from shoplist.domain import Category, ShoppingItem
from shoplist.parsing.sort_order import (
    CATEGORY_STRIDE,
    append_items,
    assign_sort_order,
    build_items,
    categorize_names,
)


def test_bread_milk_chicken_sorted_by_category() -> None:
    items = build_items(["Bread", "milk", "chicken"])

    assert [(i.name, i.category, i.sort_order) for i in items] == [
        ("Bread", Category.BAKERY, 0),
        ("chicken", Category.MEAT, 1000),
        ("milk", Category.DAIRY, 2000),
    ]


def test_arrival_order_kept_within_category() -> None:
    items = assign_sort_order(
        [
            ("soap", Category.COSMETICS),
            ("milk", Category.DAIRY),
            ("rice", Category.OTHER),
            ("cheese", Category.DAIRY),
            ("yogurt", Category.DAIRY),
        ]
    )

    assert [(i.name, i.sort_order) for i in items] == [
        ("milk", 2000),
        ("cheese", 2001),
        ("yogurt", 2002),
        ("soap", 5000),
        ("rice", 6000),
    ]


def test_categories_are_contiguous_and_in_fixed_order() -> None:
    names = ["apples", "rice", "bread", "milk", "carrots", "soap", "chicken", "pears", "rolls", "cheese", "beer"]
    items = sorted(build_items(names), key=lambda i: i.sort_order)

    seen: list[Category] = []
    for item in items:
        if not seen or seen[-1] is not item.category:
            assert item.category not in seen
            seen.append(item.category)

    assert seen == [c for c in Category if c in seen]
    assert len({i.sort_order for i in items}) == len(items)


def test_each_call_starts_fresh_counters() -> None:
    first = build_items(["milk", "cheese"])
    second = build_items(["milk", "cheese"])

    assert first == second
    assert [i.sort_order for i in second] == [2000, 2001]


def test_categorize_names_trims_and_drops_blanks() -> None:
    assert categorize_names([" milk ", "", "   ", "rice"]) == [
        ("milk", Category.DAIRY),
        ("rice", Category.OTHER),
    ]


def test_overflowing_category_reports_warning() -> None:
    sink: list[str] = []
    items = assign_sort_order([(f"thing {n}", Category.BAKERY) for n in range(CATEGORY_STRIDE + 1)], sink)

    assert len(sink) == 1
    assert "bakery" in sink[0]
    assert items[-1].sort_order == CATEGORY_STRIDE


def test_no_warning_below_ceiling() -> None:
    sink: list[str] = []
    assign_sort_order([(f"thing {n}", Category.OTHER) for n in range(CATEGORY_STRIDE)], sink)

    assert sink == []


def test_append_items_continues_from_list_length() -> None:
    existing = [
        ShoppingItem("Bread", Category.BAKERY, 0),
        ShoppingItem("chicken", Category.MEAT, 1000),
        ShoppingItem("milk", Category.DAIRY, 2000),
    ]

    combined = append_items(existing, ["butter", "soap", " "])

    assert combined[:3] == existing
    assert [(i.name, i.category, i.sort_order) for i in combined[3:]] == [
        ("butter", Category.DAIRY, 3),
        ("soap", Category.COSMETICS, 4),
    ]
