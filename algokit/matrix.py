"""Integer matrices and ways of multiplying a chain of them."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from itertools import pairwise

MAX_MATRIX_NUMBER = 2


class Matrix:
    """Immutable rectangular matrix of integers."""

    def __init__(self, rows: Iterable[Iterable[int]]) -> None:
        data = tuple(tuple(int(value) for value in row) for row in rows)
        if not data or not data[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("matrix rows must all have the same length")
        self._rows = data

    @classmethod
    def random(cls, rows: int, cols: int, rng: random.Random | None = None) -> Matrix:
        """Return a ``rows`` x ``cols`` matrix of random entries below MAX_MATRIX_NUMBER."""
        if rows < 1 or cols < 1:
            raise ValueError(f"matrix shape must be positive, got {rows}x{cols}")
        rng = rng or random.Random()
        return cls([[rng.randrange(MAX_MATRIX_NUMBER) for _ in range(cols)] for _ in range(rows)])

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        return self._rows

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def col_count(self) -> int:
        return len(self._rows[0])

    @property
    def shape(self) -> tuple[int, int]:
        return self.row_count, self.col_count

    def __getitem__(self, position: tuple[int, int]) -> int:
        row, col = position
        return self._rows[row][col]

    def _check_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} and {other.shape}")

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix([a + b for a, b in zip(r, s)] for r, s in zip(self._rows, other._rows))

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix([a - b for a, b in zip(r, s)] for r, s in zip(self._rows, other._rows))

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            if self.col_count != other.row_count:
                raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
            columns = list(zip(*other._rows))
            return Matrix(
                [sum(a * b for a, b in zip(row, column)) for column in columns] for row in self._rows
            )
        if isinstance(other, int) and not isinstance(other, bool):
            return Matrix([value * other for value in row] for row in self._rows)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if isinstance(other, int) and not isinstance(other, bool):
            return self * other
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]!r})"

    def __str__(self) -> str:
        return "\n".join(
            "[   " + "".join(f"{value} " for value in row) + " ]" for row in self._rows
        )


def _check_chain(matrices: Sequence[Matrix]) -> None:
    if not matrices:
        raise ValueError("need at least one matrix")
    for left, right in pairwise(matrices):
        if left.col_count != right.row_count:
            raise ValueError(f"cannot multiply {left.shape} by {right.shape}")


def chain_multiply(matrices: Iterable[Matrix]) -> Matrix:
    """Multiply the matrices strictly from left to right."""
    chain = list(matrices)
    _check_chain(chain)
    result = chain[0]
    for matrix in chain[1:]:
        result = result * matrix
    return result


def greedy_chain_multiply(matrices: Iterable[Matrix]) -> Matrix:
    """Multiply the chain, always doing the cheapest adjacent product first.

    Ties go to the leftmost pair.
    """
    pending = list(matrices)
    _check_chain(pending)
    while len(pending) > 1:
        costs = [a.row_count * a.col_count * b.col_count for a, b in pairwise(pending)]
        cheapest = costs.index(min(costs))
        pending[cheapest : cheapest + 2] = [pending[cheapest] * pending[cheapest + 1]]
    return pending[0]