"""A self-balancing AVL tree of values; duplicates go to the right."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class AVLNode:
    """A tree node; ``height`` counts nodes on the longest downward path."""

    value: Any
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _update(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(p: AVLNode) -> AVLNode:
    pivot = p.left
    assert pivot is not None
    p.left = pivot.right
    pivot.right = p
    _update(p)
    _update(pivot)
    return pivot


def _rotate_left(p: AVLNode) -> AVLNode:
    pivot = p.right
    assert pivot is not None
    p.right = pivot.left
    pivot.left = p
    _update(p)
    _update(pivot)
    return pivot


def _insert(node: AVLNode | None, value: Any) -> AVLNode:
    if node is None:
        return AVLNode(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    else:
        node.right = _insert(node.right, value)
    _update(node)

    balance = _balance(node)
    if balance == 2:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        return _rotate_right(node)
    if balance == -2:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        return _rotate_left(node)
    return node


class AVLTree:
    """AVL tree rebalanced with LL, LR, RR and RL rotations on insert."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: AVLNode | None = None
        self.insert_all(values)

    @property
    def root(self) -> AVLNode | None:
        return self._root

    def insert(self, value: Any) -> AVLTree:
        self._root = _insert(self._root, value)
        return self

    def insert_all(self, values: Iterable[Any]) -> AVLTree:
        for value in values:
            self.insert(value)
        return self

    def reset(self) -> None:
        self._root = None

    def inorder(self) -> list[Any]:
        """Values in ascending order."""

        def walk(node: AVLNode | None) -> Iterator[Any]:
            if node is not None:
                yield from walk(node.left)
                yield node.value
                yield from walk(node.right)

        return list(walk(self._root))