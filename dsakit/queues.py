"""FIFO queues: a linked queue and a queue built from two stacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

from dsakit.stack import Stack


class LinkedQueue:
    """FIFO queue; items leave in the order they were enqueued."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, data: Any) -> LinkedQueue:
        self._items.append(data)
        return self

    def dequeue(self) -> Any:
        if not self._items:
            raise IndexError("Queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("Queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __str__(self) -> str:
        return "{ " + " <- ".join(str(item) for item in self._items) + " }"


class StackQueue:
    """FIFO queue made of an inbox stack and an outbox stack."""

    def __init__(self) -> None:
        self._inbox = Stack()
        self._outbox = Stack()

    def _refill(self) -> None:
        if self._outbox.is_empty():
            while not self._inbox.is_empty():
                self._outbox.push(self._inbox.pop())
        if self._outbox.is_empty():
            raise IndexError("Queue is empty")

    def enqueue(self, data: Any) -> StackQueue:
        self._inbox.push(data)
        return self

    def dequeue(self) -> Any:
        self._refill()
        return self._outbox.pop()

    def peek(self) -> Any:
        self._refill()
        return self._outbox.peek()

    def is_empty(self) -> bool:
        return self._inbox.is_empty() and self._outbox.is_empty()