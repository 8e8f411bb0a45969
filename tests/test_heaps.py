import random

import pytest

from algokit.heaps import RANDOM_KEY_LIMIT, MaxHeap, MinHeap

KEYS = [15, 3, 99, 42, 7, 7, 0, 58]


def drain(heap):
    return [heap.extract() for _ in range(len(heap))]


def test_max_heap_extracts_descending():
    heap = MaxHeap(20)
    for key in KEYS:
        heap.insert(key)
    assert len(heap) == len(KEYS)
    assert drain(heap) == sorted(KEYS, reverse=True)
    assert len(heap) == 0


def test_min_heap_extracts_ascending():
    heap = MinHeap(20)
    for key in KEYS:
        heap.insert(key)
    assert drain(heap) == sorted(KEYS)


def test_peek_matches_extract():
    heap = MaxHeap(10)
    for key in KEYS:
        heap.insert(key)
    top = heap.peek()
    assert top == max(KEYS)
    assert heap.extract() == top
    assert len(heap) == len(KEYS) - 1


def test_max_heap_scenario_from_random_fill():
    heap = MaxHeap(1000)
    heap.fill_random(500, random.Random(5))
    heap.insert(10)
    heap.insert(999)
    assert len(heap) == 502
    assert heap.extract() == 999
    result = heap.heap_sort()
    assert result == sorted(result)
    assert len(result) == 501


def test_heap_sort_keeps_heap_intact():
    heap = MaxHeap(20)
    for key in KEYS:
        heap.insert(key)
    assert heap.heap_sort() == sorted(KEYS)
    assert drain(heap) == sorted(KEYS, reverse=True)


def test_fill_random_range():
    heap = MinHeap(100)
    heap.fill_random(100, random.Random(2))
    values = drain(heap)
    assert values == sorted(values)
    assert all(0 <= v < RANDOM_KEY_LIMIT for v in values)


def test_fill_random_replaces_contents():
    heap = MaxHeap(10)
    heap.insert(5000)
    heap.fill_random(3, random.Random(0))
    assert len(heap) == 3
    assert heap.peek() < RANDOM_KEY_LIMIT


def test_fill_random_too_many():
    with pytest.raises(ValueError):
        MaxHeap(5).fill_random(6)


def test_capacity_enforced():
    heap = MinHeap(2)
    heap.insert(1)
    heap.insert(2)
    with pytest.raises(OverflowError):
        heap.insert(3)


@pytest.mark.parametrize("cls", [MaxHeap, MinHeap])
def test_empty_heap_errors(cls):
    heap = cls(4)
    with pytest.raises(IndexError):
        heap.peek()
    with pytest.raises(IndexError):
        heap.extract()


def test_min_heap_scenario_with_decrease_key():
    heap = MinHeap(200)
    heap.fill_random(10, random.Random(8))
    heap.insert(1)
    heap.insert(2)
    heap.decrease_key(4, -1)
    values = drain(heap)
    assert len(values) == 12
    assert values[0] == -1
    assert values == sorted(values)


def test_decrease_key_rejects_increase():
    heap = MinHeap(5)
    heap.insert(10)
    with pytest.raises(ValueError):
        heap.decrease_key(0, 11)


def test_decrease_key_bad_index():
    heap = MinHeap(5)
    heap.insert(10)
    with pytest.raises(IndexError):
        heap.decrease_key(3, 1)