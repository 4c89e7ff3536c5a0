"""Heap sort, bucket sort, counting sort and quicksort on integer lists."""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterable, MutableSequence
from itertools import accumulate


def _sift_down(a: list[int], i: int, size: int) -> None:
    while True:
        left, right = 2 * i + 1, 2 * i + 2
        largest = left if left < size and a[i] < a[left] else i
        if right < size and a[largest] < a[right]:
            largest = right
        if largest == i:
            return
        a[i], a[largest] = a[largest], a[i]
        i = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted with a max-heap."""
    a = list(values)
    n = len(a)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(a, i, n)
    for end in range(n - 1, 0, -1):
        a[0], a[end] = a[end], a[0]
        _sift_down(a, 0, end)
    return a


def bucket_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted; with n values each must lie in [0, n*n)."""
    a = list(values)
    n = len(a)
    buckets: list[list[int]] = [[] for _ in range(n)]
    for x in a:
        if not 0 <= x < n * n:
            raise ValueError(f"value {x} out of range [0, {n * n})")
        insort(buckets[x // n], x)
    return [x for bucket in buckets for x in bucket]


def counting_sort(values: Iterable[int], k: int) -> list[int]:
    """Return the values sorted stably; each must lie in [0, k)."""
    a = list(values)
    counts = [0] * k
    for x in a:
        if not 0 <= x < k:
            raise ValueError(f"value {x} out of range [0, {k})")
        counts[x] += 1
    positions = list(accumulate(counts))
    out = [0] * len(a)
    for x in reversed(a):
        positions[x] -= 1
        out[positions[x]] = x
    return out


def partition(values: MutableSequence[int], p: int, r: int) -> int:
    """Partition values[p..r] around values[r]; return the pivot's final index."""
    pivot = values[r]
    i = p - 1
    for j in range(p, r):
        if values[j] <= pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[r] = values[r], values[i + 1]
    return i + 1


def quick_sort(values: MutableSequence[int]) -> None:
    """Sort values in place with quicksort, using an explicit stack."""
    stack = [(0, len(values) - 1)]
    while stack:
        p, r = stack.pop()
        if p >= r:
            continue
        q = partition(values, p, r)
        stack.append((p, q - 1))
        stack.append((q + 1, r))