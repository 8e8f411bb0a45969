"""Greedy knapsack that takes the most valuable items that still fit."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

DIVISION = 15


@dataclass(frozen=True)
class Item:
    size: int
    value: int


def random_items(count: int = 10, rng: random.Random | None = None) -> list[Item]:
    """Return ``count`` items with sizes in 15..29 and values in 0..14."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = rng or random.Random()
    return [
        Item(rng.randrange(DIVISION) + DIVISION, rng.randrange(DIVISION)) for _ in range(count)
    ]


def greedy_knapsack(items: Iterable[Item], capacity: int) -> tuple[int, list[Item]]:
    """Pick items by decreasing value while they fit.

    Returns the total value and the chosen items in the order they were taken.
    """
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    chosen: list[Item] = []
    used = 0
    for item in sorted(items, key=lambda it: it.value, reverse=True):
        if used + item.size <= capacity:
            used += item.size
            chosen.append(item)
    return sum(item.value for item in chosen), chosen