"""Classic comparison and distribution sorts.

Every function takes an iterable of integers and returns a new sorted list;
the input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

RADIX = 10


def _require_non_negative(items: list[int], algorithm: str) -> None:
    negatives = [value for value in items if value < 0]
    if negatives:
        raise ValueError(f"{algorithm} only handles non-negative integers, got {negatives[0]}")


def bubble_sort(nums: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(nums)
    n = len(items)
    for i in range(n - 1):
        for j in range(n - 1 - i):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def bucket_sort(nums: Iterable[int]) -> list[int]:
    """Sort non-negative integers by dropping each into a bucket per value."""
    items = list(nums)
    if not items:
        return []
    _require_non_negative(items, "bucket_sort")
    buckets: list[list[int]] = [[] for _ in range(max(items) + 1)]
    for value in items:
        buckets[value].append(value)
    return [value for bucket in buckets for value in bucket]


def count_sort(nums: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting the occurrences of each value."""
    items = list(nums)
    if not items:
        return []
    _require_non_negative(items, "count_sort")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def insertion_sort(nums: Iterable[int]) -> list[int]:
    """Sort by sinking each element left until its neighbour is not larger."""
    items = list(nums)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1
    return items


def _merge(left: list[int], right: list[int]) -> Iterator[int]:
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            yield left[i]
            i += 1
        else:
            yield right[j]
            j += 1
    yield from left[i:]
    yield from right[j:]


def merge_sort(nums: Iterable[int]) -> list[int]:
    """Stable top-down merge sort."""
    items = list(nums)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return list(_merge(merge_sort(items[:mid]), merge_sort(items[mid:])))


def _partition(items: list[int], start: int, end: int) -> int:
    """Place the last element of the range at its final position and return it."""
    pivot = items[end]
    i, j = start, end - 1
    while i <= j:
        while i <= j and items[i] < pivot:
            i += 1
        while i <= j and items[j] >= pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    items[i], items[end] = items[end], items[i]
    return i


def _quick_sort(items: list[int], start: int, end: int) -> None:
    if start >= end:
        return
    pivot = _partition(items, start, end)
    _quick_sort(items, start, pivot - 1)
    _quick_sort(items, pivot + 1, end)


def quick_sort(nums: Iterable[int]) -> list[int]:
    """Quick sort using the last element of each range as the pivot."""
    items = list(nums)
    _quick_sort(items, 0, len(items) - 1)
    return items


def radix_sort(nums: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort for non-negative integers."""
    items = list(nums)
    if not items:
        return []
    _require_non_negative(items, "radix_sort")
    digits = len(str(max(items))) if max(items) else 0
    for position in range(digits):
        divisor = RADIX**position
        buckets: list[list[int]] = [[] for _ in range(RADIX)]
        for value in items:
            buckets[(value // divisor) % RADIX].append(value)
        items = [value for bucket in buckets for value in bucket]
    return items


def selection_sort(nums: Iterable[int]) -> list[int]:
    """Sort by swapping the smallest remaining element into place."""
    items = list(nums)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def shell_sort(nums: Iterable[int]) -> list[int]:
    """Shell sort with gaps halving from n // 2 down to 1."""
    items = list(nums)
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(n - gap):
            j = i + gap
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
                k = i
                while k - gap >= 0 and items[k] < items[k - gap]:
                    items[k], items[k - gap] = items[k - gap], items[k]
                    k -= gap
        gap //= 2
    return items