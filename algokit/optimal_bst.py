"""Optimal binary search tree for keys with known search probabilities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import accumulate
from typing import Any


@dataclass
class BSTNode:
    """A node of the optimal search tree."""

    key: Any
    left: BSTNode | None = None
    right: BSTNode | None = None


@dataclass(frozen=True)
class OptimalBSTResult:
    """Expected-cost and root tables for every contiguous key range.

    ``cost_table[i][j]`` and ``root_table[i][j]`` cover keys ``i..j``
    (0-based, inclusive); entries with ``i > j`` are 0.0 and None.
    """

    keys: tuple[Any, ...]
    probabilities: tuple[float, ...]
    cost_table: tuple[tuple[float, ...], ...]
    root_table: tuple[tuple[int | None, ...], ...]

    @property
    def cost(self) -> float:
        """Expected number of comparisons for the whole key set."""
        if not self.keys:
            return 0.0
        return self.cost_table[0][-1]

    def build_tree(self) -> BSTNode | None:
        """Return the root of the optimal tree, or None for no keys."""
        return self._build(0, len(self.keys) - 1)

    def _build(self, i: int, j: int) -> BSTNode | None:
        if i > j:
            return None
        root = self.root_table[i][j]
        return BSTNode(self.keys[root], self._build(i, root - 1), self._build(root + 1, j))


def optimal_bst(keys: Sequence[Any], probabilities: Sequence[float]) -> OptimalBSTResult:
    """Compute the search tree over sorted ``keys`` with the least expected search cost."""
    keys = tuple(keys)
    probabilities = tuple(float(p) for p in probabilities)
    if len(keys) != len(probabilities):
        raise ValueError("keys and probabilities must have the same length")
    if any(p < 0 for p in probabilities):
        raise ValueError("probabilities must be non-negative")

    n = len(keys)
    prefix = [0.0, *accumulate(probabilities)]
    cost = [[0.0] * n for _ in range(n)]
    root: list[list[int | None]] = [[None] * n for _ in range(n)]

    def range_cost(i: int, j: int) -> float:
        return cost[i][j] if i <= j else 0.0

    for length in range(1, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            best_root, best = i, range_cost(i + 1, j)
            for k in range(i + 1, j + 1):
                candidate = range_cost(i, k - 1) + range_cost(k + 1, j)
                if candidate < best:
                    best_root, best = k, candidate
            cost[i][j] = best + prefix[j + 1] - prefix[i]
            root[i][j] = best_root

    return OptimalBSTResult(
        keys,
        probabilities,
        tuple(tuple(row) for row in cost),
        tuple(tuple(row) for row in root),
    )