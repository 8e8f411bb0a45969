"""Choosing fingers for a sequence of notes on five strings."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

STRING_FINGERING_COST = (
    (0, 1, 2, 3, 4),
    (4, 0, 1, 2, 3),
    (3, 4, 0, 1, 2),
    (2, 3, 4, 0, 1),
    (1, 2, 3, 4, 0),
)
FINGERS = range(5)


@dataclass(frozen=True)
class FingerCost:
    """The finger chosen for a note and the cost that choice added."""

    note: int
    finger: int
    cost: int


def random_notes(count: int, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` random notes, each naming one of the five strings."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = rng or random.Random()
    return [rng.randrange(len(STRING_FINGERING_COST)) for _ in range(count)]


def _placement(note: int, finger: int) -> int:
    return STRING_FINGERING_COST[note][finger] ** 2


def optimal_fingering(notes: Iterable[int]) -> list[FingerCost]:
    """Return the fingering with the least total cost.

    A note costs the square of its string-finger cost plus the square of the
    distance moved from the previous finger. Ties go to the lower finger.
    """
    notes = list(notes)
    for note in notes:
        if not 0 <= note < len(STRING_FINGERING_COST):
            raise ValueError(f"note {note} outside 0..{len(STRING_FINGERING_COST) - 1}")
    if not notes:
        return []

    best = [_placement(notes[0], f) for f in FINGERS]
    back: list[list[int]] = []
    for note in notes[1:]:
        pointers = [
            min(FINGERS, key=lambda g, f=f: best[g] + (g - f) ** 2) for f in FINGERS
        ]
        best = [
            best[g] + (g - f) ** 2 + _placement(note, f) for f, g in zip(FINGERS, pointers)
        ]
        back.append(pointers)

    fingers = [min(FINGERS, key=best.__getitem__)]
    for pointers in reversed(back):
        fingers.append(pointers[fingers[-1]])
    fingers.reverse()

    result = [FingerCost(notes[0], fingers[0], _placement(notes[0], fingers[0]))]
    for note, previous, finger in zip(notes[1:], fingers, fingers[1:]):
        result.append(FingerCost(note, finger, (previous - finger) ** 2 + _placement(note, finger)))
    return result