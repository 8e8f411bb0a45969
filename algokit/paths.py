"""Grid path problems: a greedy descending path and a best monotone path."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import accumulate

CHEESE = 100
NORMAL = 0
TRAP = -100_000_000


@dataclass(frozen=True)
class Cell:
    """A grid position and the value stored there."""

    row: int
    col: int
    value: int


def _grid(table: Sequence[Sequence[int]]) -> list[list[int]]:
    grid = [list(row) for row in table]
    if not grid or not grid[0]:
        raise ValueError("table must have at least one row and one column")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("table rows must all have the same length")
    return grid


def descending_path(table: Sequence[Sequence[int]]) -> tuple[int, list[Cell]]:
    """Climb from each bottom cell, always to the largest of the up to three cells above.

    Returns the largest total found and its path from the top row to the
    bottom row. Ties go to the leftmost column.
    """
    grid = _grid(table)
    rows, cols = len(grid), len(grid[0])
    best_total: int | None = None
    best_path: list[Cell] = []
    for start in range(cols):
        col = start
        path = [Cell(rows - 1, col, grid[rows - 1][col])]
        for row in range(rows - 2, -1, -1):
            line = grid[row]
            col = max(range(max(col - 1, 0), min(col + 1, cols - 1) + 1), key=line.__getitem__)
            path.append(Cell(row, col, line[col]))
        total = sum(cell.value for cell in path)
        if best_total is None or total > best_total:
            best_total, best_path = total, path
    best_path.reverse()
    return best_total, best_path


def collect_cheese(table: Sequence[Sequence[int]]) -> int:
    """Return the largest sum along a path from the top-left to the bottom-right cell.

    The path moves only right or down.
    """
    grid = _grid(table)
    cost = [list(accumulate(grid[0]))]
    for row in grid[1:]:
        previous = cost[-1]
        current = [previous[0] + row[0]]
        for col in range(1, len(row)):
            current.append(max(previous[col], current[col - 1]) + row[col])
        cost.append(current)
    return cost[-1][-1]