"""Small dynamic-programming exercises: sequences, counting and line breaking."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import accumulate

_INT_MAX = 2**31 - 1


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting fibonacci(1) == fibonacci(2) == 1."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current if n > 1 else previous


def making_one(n: int) -> int:
    """Return the fewest steps (divide by 3, divide by 2, subtract 1) that take ``n`` to 1."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    steps = [0, 0]
    for value in range(2, n + 1):
        options = [steps[value - 1]]
        if value % 3 == 0:
            options.append(steps[value // 3])
        if value % 2 == 0:
            options.append(steps[value // 2])
        steps.append(min(options) + 1)
    return steps[n]


def power(base: int, exponent: int) -> int:
    """Return ``base`` raised to a non-negative integer ``exponent`` by repeated multiplication."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def sugar_delivery(n: int) -> int:
    """Return the fewest 3 kg and 5 kg bags for ``n`` kg; any remainder takes one extra bag."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    counts = []
    for threes in range(n // 3 + 1):
        rest = n - threes * 3
        fives, leftover = divmod(rest, 5)
        counts.append(threes + fives + (1 if leftover > 0 else 0))
    return min(counts)


def hanoi_moves(
    n: int, front: str = "A", mid: str = "B", rear: str = "C"
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(disk, from_peg, to_peg)`` moving ``n`` disks from ``front`` to ``rear``.

    Every move goes to or from the middle peg, so a disk never jumps
    straight between the outer pegs; the full solution has 3**n - 1 moves.
    """
    if n < 1:
        return
    if n == 1:
        yield 1, front, mid
        yield 1, mid, rear
        return
    yield from hanoi_moves(n - 1, front, mid, rear)
    yield n, front, mid
    yield from hanoi_moves(n - 1, rear, mid, front)
    yield n, mid, rear
    yield from hanoi_moves(n - 1, front, mid, rear)


def _line_end(words: list[str], width: int, start: int) -> int | None:
    """Return the index of the last word on the line starting at ``start``.

    None means the remaining words are cheap enough to go on one final line.
    """
    overflow = _INT_MAX // len(words)
    lengths = accumulate(len(word) for word in words[start:])
    badness = []
    for count, letters in enumerate(lengths):
        used = letters + count
        badness.append((width - used) ** 2 if used <= width else overflow)
    if sum(badness) < width:
        return None
    return start + badness.index(min(badness))


def justify_lines(words: Iterable[str], width: int) -> list[str]:
    """Break ``words`` into lines of at most ``width`` characters, minimising squared slack."""
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    words = list(words)
    lines: list[str] = []
    start = 0
    while start < len(words):
        end = _line_end(words, width, start)
        if end is None:
            lines.append(" ".join(words[start:]))
            break
        lines.append(" ".join(words[start : end + 1]))
        start = end + 1
    return lines