"""Singly and doubly linked lists, with positions into the doubly linked one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None
    prev: Optional["_Node[T]"] = None


class SinglyLinkedList(Generic[T]):
    """A list of nodes linked in one direction."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._length = 0
        for item in items:
            self.push_back(item)

    def push_front(self, data: T) -> None:
        self._head = _Node(data, next=self._head)
        if self._tail is None:
            self._tail = self._head
        self._length += 1

    def pop_front(self) -> T:
        """Remove and return the first item."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._length -= 1
        return node.data

    def push_back(self, data: T) -> None:
        node = _Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def pop_back(self) -> T:
        """Remove and return the last item."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        prev: Optional[_Node[T]] = None
        node = self._head
        while node.next is not None:
            prev, node = node, node.next
        if prev is None:
            self._head = None
        else:
            prev.next = None
        self._tail = prev
        self._length -= 1
        return node.data

    def remove(self, data: T) -> None:
        """Remove every item equal to ``data``; raise ValueError if there is none."""
        removed = 0
        prev: Optional[_Node[T]] = None
        node = self._head
        while node is not None:
            following = node.next
            if node.data == data:
                if prev is None:
                    self._head = following
                else:
                    prev.next = following
                if node is self._tail:
                    self._tail = prev
                removed += 1
            else:
                prev = node
            node = following
        if not removed:
            raise ValueError(f"{data!r} is not in the list")
        self._length -= removed

    def front(self) -> T:
        if self._head is None:
            raise IndexError("the list is empty")
        return self._head.data

    def back(self) -> T:
        if self._tail is None:
            raise IndexError("the list is empty")
        return self._tail.data

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next


@dataclass(eq=False)
class Position(Generic[T]):
    """A place in a doubly linked list: on an item, or just past the last one."""

    _owner: "DoublyLinkedList[T]"
    _node: Optional[_Node[T]] = None

    @property
    def value(self) -> T:
        if self._node is None:
            raise IndexError("the end position holds no value")
        return self._node.data

    @value.setter
    def value(self, data: T) -> None:
        if self._node is None:
            raise IndexError("the end position holds no value")
        self._node.data = data

    def advance(self) -> "Position[T]":
        """Step to the next item and return this position."""
        if self._node is None:
            raise IndexError("cannot advance past the end")
        self._node = self._node.next
        return self

    def retreat(self) -> "Position[T]":
        """Step to the previous item and return this position."""
        if self._node is None:
            if self._owner._tail is None:
                raise IndexError("cannot retreat in an empty list")
            self._node = self._owner._tail
        elif self._node.prev is None:
            raise IndexError("cannot retreat before the first item")
        else:
            self._node = self._node.prev
        return self

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._owner is other._owner and self._node is other._node


class DoublyLinkedList(Generic[T]):
    """A list of nodes linked in both directions."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._length = 0
        for item in items:
            self.push_back(item)

    def push_front(self, data: T) -> None:
        node = _Node(data, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._length += 1

    def push_back(self, data: T) -> None:
        node = _Node(data, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def _unlink(self, node: _Node[T]) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._length -= 1

    def pop_front(self) -> T:
        """Remove and return the first item."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._unlink(node)
        return node.data

    def pop_back(self) -> T:
        """Remove and return the last item."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        node = self._tail
        self._unlink(node)
        return node.data

    def remove(self, data: T) -> None:
        """Remove every item equal to ``data``; raise ValueError if there is none."""
        removed = False
        node = self._head
        while node is not None:
            following = node.next
            if node.data == data:
                self._unlink(node)
                removed = True
            node = following
        if not removed:
            raise ValueError(f"{data!r} is not in the list")

    def front(self) -> T:
        if self._head is None:
            raise IndexError("the list is empty")
        return self._head.data

    def back(self) -> T:
        if self._tail is None:
            raise IndexError("the list is empty")
        return self._tail.data

    def begin(self) -> Position[T]:
        """Return a position on the first item, or the end if the list is empty."""
        return Position(self, self._head)

    def find(self, item: T) -> Position[T]:
        """Return a position on the first item equal to ``item``."""
        node = self._head
        while node is not None:
            if node.data == item:
                return Position(self, node)
            node = node.next
        raise ValueError(f"{item!r} is not in the list")

    def _check_owner(self, position: Position[T]) -> None:
        if position._owner is not self:
            raise ValueError("the position belongs to another list")

    def insert(self, position: Position[T], value: T) -> Position[T]:
        """Insert ``value`` before ``position`` and return a position on it."""
        self._check_owner(position)
        target = position._node
        if target is None:
            self.push_back(value)
            return Position(self, self._tail)
        if target.prev is None:
            self.push_front(value)
            return Position(self, self._head)
        node = _Node(value, next=target, prev=target.prev)
        target.prev.next = node
        target.prev = node
        self._length += 1
        return Position(self, node)

    def erase(self, position: Position[T]) -> Position[T]:
        """Remove the item at ``position`` and return a position on the one after it."""
        self._check_owner(position)
        target = position._node
        if target is None:
            raise IndexError("cannot erase the end position")
        following = target.next
        self._unlink(target)
        return Position(self, following)

    def copy(self) -> "DoublyLinkedList[T]":
        return type(self)(self)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev