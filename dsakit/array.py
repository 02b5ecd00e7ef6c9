"""A growable array that doubles when full and halves when half empty."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class DynamicArray:
    """Array backed by a fixed-size slot list that is resized on demand."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._length = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _resize(self, capacity: int) -> None:
        capacity = max(capacity, 1)
        slots: list[Any] = [None] * capacity
        slots[: self._length] = self._slots[: self._length]
        self._slots = slots

    def _grow_if_full(self) -> None:
        if self._length >= self.capacity:
            self._resize(self.capacity * 2)

    def _shrink_if_sparse(self) -> None:
        if self.capacity > 1 and self._length <= self.capacity // 2:
            self._resize(self.capacity // 2)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._length:
            raise IndexError("Index out of bounds")

    def push(self, item: Any) -> DynamicArray:
        self._grow_if_full()
        self._slots[self._length] = item
        self._length += 1
        return self

    def insert(self, index: int, item: Any) -> DynamicArray:
        if not 0 <= index <= self._length:
            raise IndexError("Index out of bounds")
        self._grow_if_full()
        self._slots[index + 1 : self._length + 1] = self._slots[index : self._length]
        self._slots[index] = item
        self._length += 1
        return self

    def pop(self) -> Any:
        if self._length == 0:
            raise IndexError("Array is empty")
        self._length -= 1
        item = self._slots[self._length]
        self._slots[self._length] = None
        self._shrink_if_sparse()
        return item

    def remove(self, index: int) -> Any:
        if self._length == 0:
            raise IndexError("Array is empty")
        self._check_index(index)
        item = self._slots[index]
        self._slots[index : self._length - 1] = self._slots[index + 1 : self._length]
        self._length -= 1
        self._slots[self._length] = None
        self._shrink_if_sparse()
        return item

    def sort(self) -> DynamicArray:
        """Selection sort in place; items must support ``<``."""
        for i in range(self._length):
            smallest = i
            for j in range(i + 1, self._length):
                if self._slots[j] < self._slots[smallest]:
                    smallest = j
            self._slots[i], self._slots[smallest] = self._slots[smallest], self._slots[i]
        return self

    def fill(self, item: Any) -> DynamicArray:
        """Set every slot of the current capacity to ``item``."""
        self._slots = [item] * self.capacity
        self._length = self.capacity
        return self

    def reverse(self) -> DynamicArray:
        self._slots[: self._length] = self._slots[self._length - 1 :: -1] if self._length else []
        return self

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._slots[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._slots[index] = value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[: self._length])

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self) + "]"