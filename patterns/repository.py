"""In-memory repository pattern.

Provides a generic keyed store with the same add/get/list surface a
database-backed repository would expose, so callers never touch the
underlying dict. Verticals subclass this and set `key_attr`.

Example: CustomerRepository keyed by customer id.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

# ---------------------------------------------------------------------------
# Type variable for stored items
# ---------------------------------------------------------------------------

ItemT = TypeVar("ItemT")


# ---------------------------------------------------------------------------
# Base repository
# ---------------------------------------------------------------------------

class InMemoryRepository(Generic[ItemT]):
    """Generic in-process repository keyed by one attribute of the item.

    Subclass and set `key_attr`::

        class CustomerRepository(InMemoryRepository[Customer]):
            key_attr = "id"

            def big_spenders(self, floor):
                return [c for c in self.list() if c.total_purchases > floor]
    """

    key_attr: str = "id"

    def __init__(self):
        self._items: dict[Any, ItemT] = {}

    def key_of(self, item: ItemT) -> Any:
        return getattr(item, self.key_attr)

    # -- Add / replace --

    def add(self, item: ItemT) -> ItemT:
        """Store an item, replacing any existing item with the same key."""
        self._items[self.key_of(item)] = item
        return item

    # -- Get by key --

    def get(self, key: Any) -> ItemT | None:
        """Return the item for `key`, or None if not found."""
        return self._items.get(key)

    # -- List --

    def list(self, limit: int | None = None) -> list[ItemT]:
        """Items in insertion order."""
        items = list(self._items.values())
        return items if limit is None else items[:limit]

