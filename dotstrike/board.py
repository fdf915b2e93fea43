"""The triangular board of dots and the geometry used to draw strokes on it."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

DOT_RADIUS = 40
ROWS = 6
DOT_COUNT = ROWS * (ROWS + 1) // 2

ORIGIN_X = 300
ORIGIN_Y = 170
SPACING_X = 2 * DOT_RADIUS + 20
SPACING_Y = 2 * DOT_RADIUS + 10


@dataclass(frozen=True)
class Point:
    """A position on the screen."""

    x: float
    y: float


def dot_positions() -> list[Point]:
    """Return the centres of all dots, row by row, longest row first."""
    return [
        Point(float(ORIGIN_X + SPACING_X * col), float(ORIGIN_Y + SPACING_Y * row))
        for row in range(ROWS)
        for col in range(ROWS - row)
    ]


def shift_lines(x1: float, x2: float) -> float:
    """Return how far a stroke's end is pushed outwards from a dot's centre."""
    offset = 3 * DOT_RADIUS / 4
    delta = x1 - x2
    if delta == 0:
        return offset
    return math.copysign(offset, delta)


def line_segments(points: Sequence[Point]) -> list[tuple[Point, Point]]:
    """Turn a player's stroke end points into drawable segments.

    Points come in pairs, one pair per move; pairs whose ends lie on
    different rows produce no segment.
    """
    segments = []
    for prev, curr in zip(points[::2], points[1::2]):
        if curr.y != prev.y:
            continue
        shift = shift_lines(curr.x, prev.x)
        segments.append((Point(curr.x + shift, curr.y), Point(prev.x - shift, prev.y)))
    return segments


class Board:
    """Which of the dots have been struck out."""

    def __init__(self) -> None:
        self._erased = [False] * DOT_COUNT

    @property
    def erased(self) -> tuple[bool, ...]:
        return tuple(self._erased)

    @staticmethod
    def _span(first: int, second: int) -> range:
        for index in (first, second):
            if not 0 <= index < DOT_COUNT:
                raise IndexError(f"dot index out of range: {index}")
        low, high = sorted((first, second))
        return range(low, high + 1)

    def strike(self, first: int, second: int) -> bool:
        """Strike out every dot from first to second inclusive.

        Returns True if any of them had already been struck out.
        """
        span = self._span(first, second)
        collided = any(self._erased[j] for j in span)
        for j in span:
            self._erased[j] = True
        return collided

    def erased_count(self) -> int:
        return sum(self._erased)

    def is_full(self) -> bool:
        return self.erased_count() >= DOT_COUNT

    def is_free(self, first: int, second: int) -> bool:
        """Tell whether no dot from first to second inclusive is struck out."""
        return not any(self._erased[j] for j in self._span(first, second))