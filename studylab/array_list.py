"""A bounded list that refuses items once it reaches its capacity."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 20


class ArrayList(Generic[T]):
    """A list with a fixed capacity, holding items in insertion order."""

    def __init__(self, size: int = DEFAULT_CAPACITY) -> None:
        if size < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = size
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        """The largest number of items the list can hold."""
        return self._capacity

    def make_empty(self) -> None:
        """Drop every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} is out of range")

    def append(self, item: T) -> None:
        """Add an item at the end; raise OverflowError when the list is full."""
        if self.is_full():
            raise OverflowError("the list is full")
        self._items.append(item)

    def insert(self, item: T, index: int) -> None:
        """Put an item before the one currently at ``index``."""
        if self.is_full():
            raise OverflowError("the list is full")
        self._check_index(index)
        self._items.insert(index, item)

    def index(self, item: T) -> int:
        """Return the position of the first item equal to ``item``."""
        try:
            return self._items.index(item)
        except ValueError:
            raise ValueError(f"{item!r} is not in the list") from None

    def remove(self, item: T) -> T:
        """Remove the first item equal to ``item`` and return the stored item."""
        position = self.index(item)
        removed = self._items.pop(position)
        return removed

    def delete(self, index: int) -> None:
        """Remove the item at ``index``."""
        self._check_index(index)
        del self._items[index]

    def set_item(self, index: int, item: T) -> None:
        """Replace the item at ``index``."""
        self._check_index(index)
        self._items[index] = item

    def reverse(self) -> None:
        """Reverse the items in place."""
        self._items.reverse()

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return "[" + "".join(f"{item}, " for item in self._items) + "]"