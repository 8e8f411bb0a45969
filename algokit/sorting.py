"""Comparison sorts and linear-time integer sorts."""

from __future__ import annotations

import bisect
import random
from collections.abc import Iterable, Iterator
from itertools import pairwise

MAX_VALUE = 100


def random_values(size: int, max_value: int = MAX_VALUE, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random integers in ``range(max_value)``."""
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if max_value < 1:
        raise ValueError(f"max_value must be positive, got {max_value}")
    rng = rng or random.Random()
    return [rng.randrange(max_value) for _ in range(size)]


def is_sorted(values: Iterable) -> bool:
    """Return True if ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))


def insertion_sort(values: Iterable) -> list:
    """Return a sorted copy of ``values`` built by repeated insertion."""
    result: list = []
    for value in values:
        bisect.insort_right(result, value)
    return result


def _merge(left: list, right: list) -> Iterator:
    left_iter, right_iter = iter(left), iter(right)
    left_head = next(left_iter, None)
    right_head = next(right_iter, None)
    left_done, right_done = not left, not right
    while not left_done and not right_done:
        if left_head <= right_head:
            yield left_head
            try:
                left_head = next(left_iter)
            except StopIteration:
                left_done = True
        else:
            yield right_head
            try:
                right_head = next(right_iter)
            except StopIteration:
                right_done = True
    if not left_done:
        yield left_head
        yield from left_iter
    if not right_done:
        yield right_head
        yield from right_iter


def merge_sort(values: Iterable) -> list:
    """Return a sorted copy of ``values`` using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return list(_merge(merge_sort(items[:mid]), merge_sort(items[mid:])))


def _partition(items: list, left: int, right: int) -> int:
    pivot = items[right]
    i, j = left, right - 1
    while i <= j:
        while i <= right and items[i] < pivot:
            i += 1
        while j >= left and items[j] >= pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[right], items[i] = items[i], items[right]
    return i


def quick_sort(values: Iterable) -> list:
    """Return a sorted copy of ``values`` using quicksort with the last element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        pivot = _partition(items, left, right)
        pending.append((left, pivot - 1))
        pending.append((pivot + 1, right))
    return items


def counting_sort(values: Iterable[int], max_value: int = MAX_VALUE) -> list[int]:
    """Return a sorted copy of integers drawn from ``range(max_value)``."""
    counts = [0] * max_value
    for value in values:
        if not 0 <= value < max_value:
            raise ValueError(f"value {value} outside range 0..{max_value - 1}")
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def radix_sort(values: Iterable[int], base: int = 10) -> list[int]:
    """Return a sorted copy of non-negative integers, least significant digit first."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    result = list(values)
    if any(value < 0 for value in result):
        raise ValueError("radix sort needs non-negative integers")
    if not result:
        return result
    largest = max(result)
    place = 1
    while largest // place > 0:
        buckets: list[list[int]] = [[] for _ in range(base)]
        for value in result:
            buckets[(value // place) % base].append(value)
        result = [value for bucket in buckets for value in bucket]
        place *= base
    return result