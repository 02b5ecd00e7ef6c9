"""Singly and doubly linked lists with index-based editing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: Any
    next: ListNode | None = None


@dataclass(eq=False)
class DoublyListNode:
    """A node of a doubly linked list."""

    data: Any
    next: DoublyListNode | None = None
    prev: DoublyListNode | None = None


class LinkedList:
    """Singly linked list; nodes are printed joined by ``-->``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> ListNode | None:
        return next(islice(self._nodes(), index, None), None)

    def append(self, data: Any) -> LinkedList:
        node = ListNode(data)
        if self.head is None:
            self.head = node
            return self
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node
        return self

    def prepend(self, data: Any) -> LinkedList:
        self.head = ListNode(data, self.head)
        return self

    def remove(self, index: int) -> Any:
        """Unlink the node at ``index`` and return its data."""
        if self.head is None:
            raise IndexError("List is empty")
        if index < 0:
            raise IndexError("Index out of bounds")
        if index == 0:
            node = self.head
            self.head = node.next
            return node.data
        previous = self._node_at(index - 1)
        if previous is None or previous.next is None:
            raise IndexError("Index out of bounds")
        removed = previous.next
        previous.next = removed.next
        return removed.data

    def insert(self, index: int, data: Any) -> LinkedList:
        """Insert before position ``index``; past the end, append."""
        if index < 0:
            raise IndexError("Index out of bounds")
        if index == 0 or self.head is None:
            return self.prepend(data)
        previous = self._node_at(index - 1)
        if previous is None:
            return self.append(data)
        previous.next = ListNode(data, previous.next)
        return self

    def reverse(self) -> LinkedList:
        previous = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous
        return self

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return "[" + " --> ".join(str(item) for item in self) + "]"


class DoublyLinkedList:
    """Doubly linked list; nodes are printed joined by ``<->``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: DoublyListNode | None = None
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[DoublyListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> DoublyListNode | None:
        return next(islice(self._nodes(), index, None), None)

    def append(self, data: Any) -> DoublyLinkedList:
        if self.head is None:
            self.head = DoublyListNode(data)
            return self
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = DoublyListNode(data, prev=last)
        return self

    def prepend(self, data: Any) -> DoublyLinkedList:
        node = DoublyListNode(data, next=self.head)
        if self.head is not None:
            self.head.prev = node
        self.head = node
        return self

    def remove(self, index: int) -> Any:
        """Unlink the node at ``index`` and return its data."""
        if self.head is None:
            raise IndexError("List is empty")
        if index < 0:
            raise IndexError("Index out of bounds")
        node = self._node_at(index)
        if node is None:
            raise IndexError("Index out of bounds")
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        return node.data

    def insert(self, index: int, data: Any) -> DoublyLinkedList:
        """Insert before position ``index``; past the end, append."""
        if index < 0:
            raise IndexError("Index out of bounds")
        if index == 0 or self.head is None:
            return self.prepend(data)
        previous = self._node_at(index - 1)
        if previous is None:
            return self.append(data)
        node = DoublyListNode(data, next=previous.next, prev=previous)
        if previous.next is not None:
            previous.next.prev = node
        previous.next = node
        return self

    def reverse(self) -> DoublyLinkedList:
        current = self.head
        last = None
        while current is not None:
            current.next, current.prev = current.prev, current.next
            last = current
            current = current.prev
        if last is not None:
            self.head = last
        return self

    def backwards(self) -> Iterator[Any]:
        """Yield the items from the last to the first, following ``prev`` links."""
        last = None
        for last in self._nodes():
            pass
        while last is not None:
            yield last.data
            last = last.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return "[" + " <-> ".join(str(item) for item in self) + "]"