"""A max-heap stored in a flat list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class MaxHeap:
    """Max-heap; an inserted value rises past the entry at index ``i // 2``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._data: list[Any] = []
        self.insert_all(values)

    def insert(self, value: Any) -> MaxHeap:
        data = self._data
        data.append(value)
        i = len(data) - 1
        while i >= 1 and data[i] > data[i // 2]:
            data[i], data[i // 2] = data[i // 2], data[i]
            i //= 2
        return self

    def insert_all(self, values: Iterable[Any]) -> MaxHeap:
        for value in values:
            self.insert(value)
        return self

    def is_empty(self) -> bool:
        return not self._data

    def remove(self) -> Any:
        """Take the top value out and restore the heap below it."""
        data = self._data
        if not data:
            raise IndexError("Heap is empty")
        top = data[0]
        last = data.pop()
        if not data:
            return top
        data[0] = last
        i = 0
        while True:
            left, right = 2 * i + 1, 2 * i + 2
            if left >= len(data):
                break
            greater = left
            if right < len(data) and not data[left] > data[right]:
                greater = right
            if data[i] < data[greater]:
                data[i], data[greater] = data[greater], data[i]
                i = greater
            else:
                break
        return top

    def heap_sort(self) -> list[Any]:
        """Values from largest to smallest; the heap itself is left unchanged."""
        copy = MaxHeap()
        copy._data = list(self._data)
        return [copy.remove() for _ in range(len(copy))]

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self._data) + "]"