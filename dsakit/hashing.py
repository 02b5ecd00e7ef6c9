"""Hash tables keyed by ``x % 10``: separate chaining and open addressing."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator

BUCKETS = 10


class ChainingHash:
    """Open hashing: ten buckets, each kept as a sorted chain."""

    def __init__(self) -> None:
        self._buckets: list[list[int]] = [[] for _ in range(BUCKETS)]

    def insert(self, data: int) -> ChainingHash:
        bisect.insort_left(self._buckets[data % BUCKETS], data)
        return self

    def insert_all(self, nums: Iterable[int]) -> ChainingHash:
        for num in nums:
            self.insert(num)
        return self

    def has(self, data: int) -> bool:
        chain = self._buckets[data % BUCKETS]
        position = bisect.bisect_left(chain, data)
        return position < len(chain) and chain[position] == data

    def __contains__(self, data: int) -> bool:
        return self.has(data)

    def __str__(self) -> str:
        return "\n".join(
            f"{index}: [{' --> '.join(map(str, chain))}]"
            for index, chain in enumerate(self._buckets)
        )


class _ProbingHash:
    """Closed hashing with probe positions ``(x % 10 + f(i)) % 10``.

    The table doubles whenever it would become more than half full, but the
    hash function only ever addresses the first ten slots.
    """

    def __init__(self) -> None:
        self._slots: list[int | None] = [None] * BUCKETS
        self._size = 0

    @staticmethod
    def _offset(attempt: int) -> int:
        raise NotImplementedError

    def _probe(self, data: int) -> Iterator[int]:
        home = data % BUCKETS
        for attempt in range(BUCKETS):
            yield (home + self._offset(attempt)) % BUCKETS

    def insert(self, data: int):
        if self._size + 1 > len(self._slots) // 2:
            self._slots.extend([None] * len(self._slots))
        for slot in self._probe(data):
            if self._slots[slot] is None:
                self._slots[slot] = data
                self._size += 1
                return self
        raise OverflowError(f"no free slot left for {data}")

    def insert_all(self, nums: Iterable[int]):
        for num in nums:
            self.insert(num)
        return self

    def has(self, data: int) -> bool:
        for slot in self._probe(data):
            value = self._slots[slot]
            if value is None:
                return False
            if value == data:
                return True
        return False

    def __contains__(self, data: int) -> bool:
        return self.has(data)

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join("#" if value is None else str(value) for value in self._slots)


class LinearProbingHash(_ProbingHash):
    """Open addressing with f(i) = i."""

    @staticmethod
    def _offset(attempt: int) -> int:
        return attempt

    def insert(self, data: int) -> LinearProbingHash:
        return super().insert(data)

    def insert_all(self, nums: Iterable[int]) -> LinearProbingHash:
        return super().insert_all(nums)

    def has(self, data: int) -> bool:
        return super().has(data)

    def __contains__(self, data: int) -> bool:
        return super().__contains__(data)

    def __len__(self) -> int:
        return super().__len__()

    def __str__(self) -> str:
        return super().__str__()


class QuadraticProbingHash(_ProbingHash):
    """Open addressing with f(i) = i * i."""

    @staticmethod
    def _offset(attempt: int) -> int:
        return attempt * attempt

    def insert(self, data: int) -> QuadraticProbingHash:
        return super().insert(data)

    def insert_all(self, nums: Iterable[int]) -> QuadraticProbingHash:
        return super().insert_all(nums)

    def has(self, data: int) -> bool:
        return super().has(data)

    def __contains__(self, data: int) -> bool:
        return super().__contains__(data)

    def __len__(self) -> int:
        return super().__len__()

    def __str__(self) -> str:
        return super().__str__()