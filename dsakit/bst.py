"""A binary search tree of unique values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class BSTNode:
    """A tree node."""

    value: Any
    left: BSTNode | None = None
    right: BSTNode | None = None


def _insert(node: BSTNode | None, value: Any) -> BSTNode:
    if node is None:
        return BSTNode(value)
    if value > node.value:
        node.right = _insert(node.right, value)
    elif value < node.value:
        node.left = _insert(node.left, value)
    return node


def _splice(node: BSTNode) -> BSTNode | None:
    """Replace ``node`` by its subtrees; a left subtree hangs off the right's leftmost node."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    leftmost = node.right
    while leftmost.left is not None:
        leftmost = leftmost.left
    leftmost.left = node.left
    return node.right


def _remove(node: BSTNode | None, value: Any) -> BSTNode | None:
    if node is None:
        return None
    if value > node.value:
        node.right = _remove(node.right, value)
        return node
    if value < node.value:
        node.left = _remove(node.left, value)
        return node
    return _splice(node)


class BinarySearchTree:
    """Unbalanced BST; inserting a value already present does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: BSTNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> BinarySearchTree:
        """Insert iteratively."""
        if self._root is None:
            self._root = BSTNode(value)
            return self
        current = self._root
        while True:
            if value > current.value:
                if current.right is None:
                    current.right = BSTNode(value)
                    return self
                current = current.right
            elif value < current.value:
                if current.left is None:
                    current.left = BSTNode(value)
                    return self
                current = current.left
            else:
                return self

    def insert_recursive(self, value: Any) -> BinarySearchTree:
        self._root = _insert(self._root, value)
        return self

    def remove(self, value: Any) -> BinarySearchTree:
        """Remove ``value`` if present."""
        self._root = _remove(self._root, value)
        return self

    def search(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value > node.value:
                node = node.right
            elif value < node.value:
                node = node.left
            else:
                return True
        return False

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    def inorder(self) -> list[Any]:
        """Values in ascending order."""

        def walk(node: BSTNode | None) -> Iterator[Any]:
            if node is not None:
                yield from walk(node.left)
                yield node.value
                yield from walk(node.right)

        return list(walk(self._root))