"""Hash tables with separate chaining and with open addressing."""

from __future__ import annotations

import enum
import random
from collections.abc import Iterator
from typing import Any

PRIME_NUMBER = 113
HASH_VAR_LIMIT = 10000
_WORD_MASK = (1 << 64) - 1


class HashMethod(enum.Enum):
    DIVISION = 1
    MULTIPLICATION = 2
    UNIVERSAL = 3


class ChainedHashTable:
    """Hash table with one chain per bucket; keys are integers."""

    def __init__(
        self,
        size: int,
        method: HashMethod = HashMethod.DIVISION,
        rng: random.Random | None = None,
    ) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        rng = rng or random.Random()
        self.method = method
        self._buckets: list[list[tuple[int, Any]]] = [[] for _ in range(size)]
        self._a = rng.randrange(HASH_VAR_LIMIT)
        self._b = rng.randrange(HASH_VAR_LIMIT)
        self._multiplier = rng.getrandbits(64)
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _bucket_index(self, key: int) -> int:
        size = len(self._buckets)
        if self.method is HashMethod.DIVISION:
            return key % size
        if self.method is HashMethod.UNIVERSAL:
            return ((self._a * key + self._b) % PRIME_NUMBER) % size
        product = (self._multiplier * key) & _WORD_MASK
        return (product >> 32) % size

    def insert(self, key: int, item: Any) -> None:
        """Append ``item`` under ``key`` to the end of its chain."""
        self._buckets[self._bucket_index(key)].append((key, item))
        self._count += 1

    def delete(self, key: int) -> Any:
        """Remove the first entry with ``key`` and return its item."""
        bucket = self._buckets[self._bucket_index(key)]
        for position, (stored, item) in enumerate(bucket):
            if stored == key:
                del bucket[position]
                self._count -= 1
                return item
        raise KeyError(key)

    def search(self, key: int) -> Any:
        """Return the item of the first entry with ``key``."""
        for stored, item in self._buckets[self._bucket_index(key)]:
            if stored == key:
                return item
        raise KeyError(key)

    def __contains__(self, key: int) -> bool:
        return any(stored == key for stored, _ in self._buckets[self._bucket_index(key)])

    def cluster_sizes(self) -> list[int]:
        """Return the length of every chain, bucket by bucket."""
        return [len(bucket) for bucket in self._buckets]


class _Slot(enum.Enum):
    EMPTY = "empty"
    DELETED = "deleted"


class OpenAddressHashTable:
    """Fixed-size hash table of integers using linear probing."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self._slots: list[Any] = [_Slot.EMPTY] * size
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _probe(self, item: int) -> Iterator[int]:
        size = len(self._slots)
        start = int(item) % size
        for step in range(size):
            yield (start + step) % size

    def search(self, item: int) -> int:
        """Return the slot holding ``item``."""
        for slot in self._probe(item):
            stored = self._slots[slot]
            if stored is _Slot.EMPTY:
                break
            if stored is not _Slot.DELETED and stored == item:
                return slot
        raise KeyError(item)

    def __contains__(self, item: int) -> bool:
        try:
            self.search(item)
        except KeyError:
            return False
        return True

    def insert(self, item: int) -> bool:
        """Store ``item``; return False if it is already present."""
        if item in self:
            return False
        for slot in self._probe(item):
            if isinstance(self._slots[slot], _Slot):
                self._slots[slot] = item
                self._count += 1
                return True
        raise OverflowError(f"hash table is full ({len(self._slots)} slots)")

    def delete(self, item: int) -> None:
        """Remove ``item``, leaving a marker so later probes still pass the slot."""
        slot = self.search(item)
        self._slots[slot] = _Slot.DELETED
        self._count -= 1

    def __iter__(self) -> Iterator[int]:
        return (stored for stored in self._slots if not isinstance(stored, _Slot))