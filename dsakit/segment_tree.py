"""A segment tree for range sums with point updates."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    start: int
    end: int
    total: int = 0
    left: _Node | None = None
    right: _Node | None = None


def _build(values: list[int], start: int, end: int) -> _Node:
    if start == end:
        return _Node(start, end, values[start])
    mid = (start + end) // 2
    node = _Node(start, end)
    node.left = _build(values, start, mid)
    node.right = _build(values, mid + 1, end)
    node.total = node.left.total + node.right.total
    return node


def _query(node: _Node | None, start: int, end: int) -> int:
    if node is None:
        return 0
    if node.start >= start and node.end <= end:
        return node.total
    if node.start > end or node.end < start:
        return 0
    return _query(node.left, start, end) + _query(node.right, start, end)


def _update(node: _Node | None, index: int, value: int) -> int:
    if node is None:
        return 0
    if not node.start <= index <= node.end:
        return node.total
    if node.start == node.end:
        node.total = value
        return value
    node.total = _update(node.left, index, value) + _update(node.right, index, value)
    return node.total


class SegmentTree:
    """Sum segment tree over a fixed-length sequence of integers."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("a segment tree needs at least one value")
        self._root = _build(items, 0, len(items) - 1)

    def query(self, start: int, end: int) -> int:
        """Sum of the values at positions ``start`` to ``end`` inclusive."""
        return _query(self._root, start, end)

    def update(self, index: int, value: int) -> None:
        """Set position ``index`` to ``value``; an index outside the range changes nothing."""
        _update(self._root, index, value)

    def intervals(self) -> list[tuple[int, int, int]]:
        """Every node as ``(start, end, sum)`` in preorder."""

        def walk(node: _Node | None) -> Iterator[tuple[int, int, int]]:
            if node is not None:
                yield node.start, node.end, node.total
                yield from walk(node.left)
                yield from walk(node.right)

        return list(walk(self._root))

    def __str__(self) -> str:
        return "\n".join(f"[{start}, {end}]: {total}" for start, end, total in self.intervals())