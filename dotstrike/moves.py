"""Random move selection for computer players."""

from __future__ import annotations

import random

from .board import ROWS, Board


def random_pair(rng: random.Random) -> tuple[int, int]:
    """Pick two dots, possibly the same one, from one randomly chosen row."""
    row = rng.randrange(ROWS)
    first = rng.randrange(ROWS - row)
    second = rng.randrange(ROWS - row)
    offset = sum(ROWS - r for r in range(row))
    return first + offset, second + offset


def random_free_pair(
    board: Board, rng: random.Random, attempts: int = 1001
) -> tuple[int, int]:
    """Pick an ordered pair of dots in one row with nothing struck between them.

    Gives up after the given number of attempts and returns the last pair tried.
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")
    for _ in range(attempts):
        first, second = sorted(random_pair(rng))
        if board.is_free(first, second):
            break
    return first, second