"""A binary search tree holding distinct, ordered values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    val: T
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None


class BinarySearchTree(Generic[T]):
    """An unbalanced binary search tree; equal values are stored once."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._root: Optional[_Node[T]] = None
        self._length = 0
        for item in items:
            self.insert(item)

    def insert(self, val: T) -> bool:
        """Add ``val``; return False if it was already in the tree."""
        if self._root is None:
            self._root = _Node(val)
            self._length += 1
            return True
        node = self._root
        while True:
            if val > node.val:
                if node.right is None:
                    node.right = _Node(val)
                    break
                node = node.right
            elif val < node.val:
                if node.left is None:
                    node.left = _Node(val)
                    break
                node = node.left
            else:
                return False
        self._length += 1
        return True

    def remove(self, val: T) -> None:
        """Remove ``val``; raise ValueError if it is not in the tree.

        A node with a right subtree is replaced by the smallest value in it,
        otherwise by its left child.
        """
        parent: Optional[_Node[T]] = None
        node = self._root
        while node is not None and node.val != val:
            parent = node
            node = node.left if val < node.val else node.right
        if node is None:
            raise ValueError(f"{val!r} is not in the tree")

        if node.right is None:
            replacement = node.left
        else:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            if successor_parent is not node:
                successor_parent.left = successor.right
                successor.right = node.right
            successor.left = node.left
            replacement = successor

        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        self._length -= 1

    def is_empty(self) -> bool:
        return self._root is None

    def __contains__(self, val: Any) -> bool:
        node = self._root
        while node is not None:
            if val == node.val:
                return True
            node = node.left if val < node.val else node.right
        return False

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        """Yield the values in ascending order."""
        pending: list[_Node[T]] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.val
            node = node.right