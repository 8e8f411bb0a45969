"""Bounded binary max-heap and min-heap."""

from __future__ import annotations

import operator
import random
from typing import Callable

RANDOM_KEY_LIMIT = 1000

_Before = Callable[[int, int], bool]


def _sift_down(keys: list[int], index: int, size: int, before: _Before) -> None:
    while True:
        chosen = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and before(keys[child], keys[chosen]):
                chosen = child
        if chosen == index:
            return
        keys[index], keys[chosen] = keys[chosen], keys[index]
        index = chosen


def _sift_up(keys: list[int], index: int, before: _Before) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if not before(keys[index], keys[parent]):
            return
        keys[index], keys[parent] = keys[parent], keys[index]
        index = parent


def _heapify(keys: list[int], before: _Before) -> None:
    for index in reversed(range(len(keys) // 2)):
        _sift_down(keys, index, len(keys), before)


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    return capacity


def _pop_top(keys: list[int], before: _Before) -> int:
    if not keys:
        raise IndexError("extract from an empty heap")
    top = keys[0]
    last = keys.pop()
    if keys:
        keys[0] = last
        _sift_down(keys, 0, len(keys), before)
    return top


def _random_keys(count: int, capacity: int, rng: random.Random | None) -> list[int]:
    if not 0 <= count <= capacity:
        raise ValueError(f"count must be in 0..{capacity}, got {count}")
    rng = rng or random.Random()
    return [rng.randrange(RANDOM_KEY_LIMIT) for _ in range(count)]


class MaxHeap:
    """Max-priority queue: the largest key comes out first."""

    _before = staticmethod(operator.gt)

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._keys: list[int] = []

    def __len__(self) -> int:
        return len(self._keys)

    def peek(self) -> int:
        """Return the largest key without removing it."""
        if not self._keys:
            raise IndexError("peek at an empty heap")
        return self._keys[0]

    def extract(self) -> int:
        """Remove and return the largest key."""
        return _pop_top(self._keys, self._before)

    def insert(self, key: int) -> None:
        """Add a key, keeping the heap property."""
        if len(self._keys) >= self._capacity:
            raise OverflowError(f"heap is full ({self._capacity} keys)")
        self._keys.append(key)
        _sift_up(self._keys, len(self._keys) - 1, self._before)

    def fill_random(self, count: int, rng: random.Random | None = None) -> None:
        """Replace the contents with ``count`` random keys below 1000."""
        self._keys = _random_keys(count, self._capacity, rng)
        _heapify(self._keys, self._before)

    def heap_sort(self) -> list[int]:
        """Return the keys in ascending order; the heap itself is unchanged."""
        keys = list(self._keys)
        for end in range(len(keys) - 1, 0, -1):
            keys[0], keys[end] = keys[end], keys[0]
            _sift_down(keys, 0, end, self._before)
        return keys


class MinHeap:
    """Min-priority queue: the smallest key comes out first."""

    _before = staticmethod(operator.lt)

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._keys: list[int] = []

    def __len__(self) -> int:
        return len(self._keys)

    def peek(self) -> int:
        """Return the smallest key without removing it."""
        if not self._keys:
            raise IndexError("peek at an empty heap")
        return self._keys[0]

    def extract(self) -> int:
        """Remove and return the smallest key."""
        return _pop_top(self._keys, self._before)

    def insert(self, key: int) -> None:
        """Add a key, keeping the heap property."""
        if len(self._keys) >= self._capacity:
            raise OverflowError(f"heap is full ({self._capacity} keys)")
        self._keys.append(key)
        _sift_up(self._keys, len(self._keys) - 1, self._before)

    def fill_random(self, count: int, rng: random.Random | None = None) -> None:
        """Replace the contents with ``count`` random keys below 1000."""
        self._keys = _random_keys(count, self._capacity, rng)
        _heapify(self._keys, self._before)

    def decrease_key(self, index: int, key: int) -> None:
        """Lower the key stored at position ``index`` (0-based) to ``key``."""
        if not 0 <= index < len(self._keys):
            raise IndexError(f"heap index {index} out of range")
        if key > self._keys[index]:
            raise ValueError(f"new key {key} is larger than current key {self._keys[index]}")
        self._keys[index] = key
        _sift_up(self._keys, index, self._before)