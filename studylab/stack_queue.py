"""A stack and a queue built on a doubly linked list, and a bracket checker."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

from studylab.linked_list import DoublyLinkedList

T = TypeVar("T")


class EmptyContainerError(IndexError):
    """Raised when an item is asked of, or taken from, an empty container."""


class Stack(Generic[T]):
    """A last-in, first-out stack; the top is the front of the backing list."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._line: DoublyLinkedList[T] = DoublyLinkedList()
        for item in items:
            self.push(item)

    def push(self, data: T) -> None:
        """Put an item on top."""
        self._line.push_front(data)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._line:
            raise EmptyContainerError("the stack is already empty")
        return self._line.pop_front()

    def top(self) -> T:
        """Return the top item without removing it."""
        if not self._line:
            raise EmptyContainerError("the stack is empty")
        return self._line.front()

    def is_empty(self) -> bool:
        return len(self._line) == 0

    def copy(self) -> "Stack[T]":
        """Return an independent stack with the same items in the same order."""
        duplicate: Stack[T] = type(self)()
        duplicate._line = self._line.copy()
        return duplicate

    def __len__(self) -> int:
        return len(self._line)

    def __iter__(self) -> Iterator[T]:
        """Yield the items from the top down."""
        return iter(self._line)

    def __str__(self) -> str:
        return "[" + "".join(f"{item}," for item in self) + "]"


class Queue(Generic[T]):
    """A first-in, first-out queue.

    New items enter at the front; ``back`` is the oldest item, the one
    ``dequeue`` takes next.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._line: DoublyLinkedList[T] = DoublyLinkedList()
        for item in items:
            self.enqueue(item)

    def enqueue(self, data: T) -> None:
        """Add an item to the queue."""
        self._line.push_front(data)

    def dequeue(self) -> T:
        """Remove and return the oldest item."""
        if not self._line:
            raise EmptyContainerError("the queue is already empty")
        return self._line.pop_back()

    def front(self) -> T:
        """Return the most recently added item."""
        if not self._line:
            raise EmptyContainerError("the queue is empty")
        return self._line.front()

    def back(self) -> T:
        """Return the oldest item, the next one to leave."""
        if not self._line:
            raise EmptyContainerError("the queue is empty")
        return self._line.back()

    def is_empty(self) -> bool:
        return len(self._line) == 0

    def copy(self) -> "Queue[T]":
        """Return an independent queue with the same items in the same order."""
        duplicate: Queue[T] = type(self)()
        duplicate._line = self._line.copy()
        return duplicate

    def __len__(self) -> int:
        return len(self._line)

    def __iter__(self) -> Iterator[T]:
        """Yield the items in the order they will leave the queue."""
        return reversed(self._line)

    def __str__(self) -> str:
        return "[" + "".join(f"{item}," for item in self) + "]"


def is_balanced(text: str) -> bool:
    """Tell whether the round brackets in ``text`` are properly matched.

    Characters other than ``(`` and ``)`` are ignored.
    """
    pending: Stack[str] = Stack(text)
    depth = 0
    while not pending.is_empty():
        char = pending.pop()
        if char == ")":
            depth += 1
        elif char == "(":
            depth -= 1
        if depth < 0:
            return False
    return depth == 0