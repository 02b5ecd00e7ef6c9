"""A growable stack that doubles when full and halves when half empty."""

from __future__ import annotations

from typing import Any


class Stack:
    """LIFO stack backed by a fixed-size slot list resized on demand."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._length = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _resize(self, capacity: int) -> None:
        slots: list[Any] = [None] * max(capacity, 1)
        slots[: self._length] = self._slots[: self._length]
        self._slots = slots

    def push(self, item: Any) -> Stack:
        if self._length >= self.capacity:
            self._resize(self.capacity * 2)
        self._slots[self._length] = item
        self._length += 1
        return self

    def pop(self) -> Any:
        if self._length == 0:
            raise IndexError("Stack is empty")
        self._length -= 1
        item = self._slots[self._length]
        self._slots[self._length] = None
        if self.capacity > 1 and self._length <= self.capacity // 2:
            self._resize(self.capacity // 2)
        return item

    def peek(self) -> Any:
        if self._length == 0:
            raise IndexError("Stack is empty")
        return self._slots[self._length - 1]

    def is_empty(self) -> bool:
        return self._length == 0

    def is_full(self) -> bool:
        return self._length == self.capacity

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._slots[: self._length]) + "]"