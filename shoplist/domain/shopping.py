"""Data models for parsed shopping lists."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

LIST_NAME_FORMAT = "%d.%m.%Y %H:%M"


class Category(Enum):
    """Grocery category; member order is the display order."""

    BAKERY = "Bakery"
    MEAT = "Meat"
    DAIRY = "Dairy"
    VEGETABLES = "Vegetables"
    FRUITS = "Fruits"
    COSMETICS = "Cosmetics"
    OTHER = "Other"

    @property
    def label(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        return self.name.lower()

    @property
    def order(self) -> int:
        # 0..6, fixed by declaration order
        return _CATEGORY_ORDER[self]

    @classmethod
    def from_key(cls, key: str) -> "Category":
        """Look up a category by its lower-case key (e.g. "dairy")."""
        try:
            return cls[key.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown category: {key!r}") from None


_CATEGORY_ORDER: dict[Category, int] = {category: index for index, category in enumerate(Category)}


@dataclass(frozen=True)
class ShoppingItem:
    """A single line of a shopping list."""

    name: str
    category: Category
    sort_order: int

    def __post_init__(self) -> None:
        if not self.name or self.name != self.name.strip():
            raise ValueError(f"Item name must be non-empty and trimmed: {self.name!r}")


@dataclass(frozen=True)
class FridgeAnalysis:
    """Items seen on a fridge photo plus suggested purchases."""

    items_found: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()


@dataclass
class ShoppingList:
    """A named, timestamped group of items."""

    name: str
    created_at: datetime
    items: list[ShoppingItem] = field(default_factory=list)

    @classmethod
    def from_items(
        cls,
        items: list[ShoppingItem],
        name: str | None = None,
        created_at: datetime | None = None,
    ) -> "ShoppingList":
        """Build a list named after its creation time unless a name is given."""
        created_at = created_at or datetime.now()
        return cls(
            name=name or created_at.strftime(LIST_NAME_FORMAT),
            created_at=created_at,
            items=list(items),
        )

    def sorted_items(self) -> list[ShoppingItem]:
        return sorted(self.items, key=lambda item: item.sort_order)

    def grouped(self) -> list[tuple[Category, list[ShoppingItem]]]:
        return group_by_category(self.items)


def group_by_category(items: Iterable[ShoppingItem]) -> list[tuple[Category, list[ShoppingItem]]]:
    """Return (category, items) pairs in display order, skipping empty categories."""
    groups: dict[Category, list[ShoppingItem]] = {}
    for item in sorted(items, key=lambda i: i.sort_order):
        groups.setdefault(item.category, []).append(item)
    return [(category, groups[category]) for category in Category if category in groups]
