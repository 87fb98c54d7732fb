"""A bounded binary min-heap and the index arithmetic it rests on."""

from __future__ import annotations

import heapq
from typing import Generic, Iterable, TypeVar

from studylab.stack_queue import EmptyContainerError

T = TypeVar("T")

DEFAULT_MAX_SIZE = 20


def _check_index(index: int) -> None:
    if index < 0:
        raise ValueError("a heap index must not be negative")


def parent(index: int) -> int:
    """Return the index of the parent slot; the root is its own parent."""
    _check_index(index)
    return (index - 1) // 2 if index > 0 else 0


def left(index: int) -> int:
    """Return the index of the left child slot."""
    _check_index(index)
    return 2 * index + 1


def right(index: int) -> int:
    """Return the index of the right child slot."""
    _check_index(index)
    return 2 * index + 2


class HeapFullError(OverflowError):
    """Raised when an item is pushed onto a heap that is already full."""


class MinHeap(Generic[T]):
    """A min-heap that holds at most ``max_size`` items."""

    def __init__(self, items: Iterable[T] = (), max_size: int = DEFAULT_MAX_SIZE) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        values = sorted(items)
        if len(values) > max_size:
            raise HeapFullError(
                f"{len(values)} items do not fit in a heap of size {max_size}"
            )
        self._max_size = max_size
        # A sorted list already satisfies the heap property.
        self._items: list[T] = values

    @property
    def max_size(self) -> int:
        return self._max_size

    def push(self, item: T) -> None:
        """Add an item; raise HeapFullError when the heap is full."""
        if len(self._items) >= self._max_size:
            raise HeapFullError("the heap is full")
        heapq.heappush(self._items, item)

    def pop(self) -> T:
        """Remove and return the smallest item."""
        if not self._items:
            raise EmptyContainerError("the heap is already empty")
        return heapq.heappop(self._items)

    def peek(self) -> T:
        """Return the smallest item without removing it."""
        if not self._items:
            raise EmptyContainerError("the heap is empty")
        return self._items[0]

    def copy(self) -> "MinHeap[T]":
        duplicate: MinHeap[T] = type(self)(max_size=self._max_size)
        duplicate._items = list(self._items)
        return duplicate

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        drained = self.copy()
        values = [drained.pop() for _ in range(len(drained))]
        return "[" + "".join(f"{value}," for value in values) + "]"