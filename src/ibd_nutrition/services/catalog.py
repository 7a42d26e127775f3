"""Read-only reference food catalog."""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from ibd_nutrition.domain.catalog import FoodItem


class FoodCatalog:
    """Food items in a fixed order with case-insensitive name lookup.

    Order is the order of the source file. Matching takes the first hit in this
    order, so reordering the file can change which food a token resolves to.
    """

    def __init__(self, items: Iterable[FoodItem]) -> None:
        ordered: list[FoodItem] = []
        index: dict[str, FoodItem] = {}
        for item in items:
            if item.key in index:
                continue
            index[item.key] = item
            ordered.append(item)
        self._items = tuple(ordered)
        self._index: Mapping[str, FoodItem] = MappingProxyType(index)

    @property
    def foods(self) -> tuple[FoodItem, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[FoodItem]:
        return iter(self._items)

    def get(self, name: str) -> FoodItem | None:
        """Return the food with this name, ignoring case."""
        return self._index.get(name.strip().lower())

    def search(self, query: str) -> list[FoodItem]:
        """Return foods whose name, category or region contains query."""
        needle = query.strip().lower()
        if not needle:
            return list(self._items)
        return [
            item
            for item in self._items
            if needle in item.name.lower()
            or needle in item.category.lower()
            or needle in item.region.lower()
        ]
