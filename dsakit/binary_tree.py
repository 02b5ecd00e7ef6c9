"""A plain binary tree built from a level-order list or a preorder stream."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from dsakit.queues import LinkedQueue

EMPTY_MARKER = -1
"""Value that stands for a missing child in preorder input."""


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _from_level_order(items: list[Any], index: int) -> TreeNode:
    node = TreeNode(items[index])
    left, right = 2 * index + 1, 2 * index + 2
    if left < len(items):
        node.left = _from_level_order(items, left)
    if right < len(items):
        node.right = _from_level_order(items, right)
    return node


class BinaryTree:
    """Binary tree whose children of position ``i`` sit at ``2i+1`` and ``2i+2``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        items = list(values)
        self.root: TreeNode | None = _from_level_order(items, 0) if items else None

    @classmethod
    def from_preorder(cls, values: Iterable[Any]) -> BinaryTree:
        """Build a tree from preorder values where ``-1`` marks a missing child."""
        stream = iter(values)

        def build() -> TreeNode | None:
            try:
                value = next(stream)
            except StopIteration:
                raise ValueError("preorder input ended before the tree was complete") from None
            if value == EMPTY_MARKER:
                return None
            node = TreeNode(value)
            node.left = build()
            node.right = build()
            return node

        tree = cls()
        tree.root = build()
        return tree

    def levels(self) -> list[list[Any]]:
        """Breadth-first traversal, one list per level."""
        if self.root is None:
            return []
        queue = LinkedQueue().enqueue(self.root).enqueue(None)
        result: list[list[Any]] = []
        current: list[Any] = []
        while not queue.is_empty():
            node = queue.dequeue()
            if node is None:
                result.append(current)
                current = []
                if not queue.is_empty():
                    queue.enqueue(None)
                continue
            current.append(node.data)
            if node.left is not None:
                queue.enqueue(node.left)
            if node.right is not None:
                queue.enqueue(node.right)
        return result

    def preorder(self) -> list[Any]:
        def walk(node: TreeNode | None) -> Iterator[Any]:
            if node is not None:
                yield node.data
                yield from walk(node.left)
                yield from walk(node.right)

        return list(walk(self.root))

    def postorder(self) -> list[Any]:
        def walk(node: TreeNode | None) -> Iterator[Any]:
            if node is not None:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.data

        return list(walk(self.root))

    def inorder(self) -> list[Any]:
        def walk(node: TreeNode | None) -> Iterator[Any]:
            if node is not None:
                yield from walk(node.left)
                yield node.data
                yield from walk(node.right)

        return list(walk(self.root))