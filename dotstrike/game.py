"""Turn-based rules of the dot striking game."""

from __future__ import annotations

import random
from enum import Enum

from .board import DOT_COUNT, Board, Point, dot_positions
from .moves import random_free_pair


class Player(Enum):
    RED = "red"
    BLUE = "blue"


class Mode(Enum):
    HUMAN_VS_HUMAN = "human2human"
    HUMAN_VS_RANDOM = "human2random"
    RANDOM_VS_RANDOM = "random2random"


_COMPUTER_PLAYERS = {
    Mode.HUMAN_VS_HUMAN: frozenset(),
    Mode.HUMAN_VS_RANDOM: frozenset({Player.BLUE}),
    Mode.RANDOM_VS_RANDOM: frozenset({Player.RED, Player.BLUE}),
}


class Game:
    """One game: red moves first, and whoever strikes the last dot loses."""

    def __init__(self, mode: Mode, rng: random.Random | None = None) -> None:
        self.mode = mode
        self.rng = rng if rng is not None else random.Random()
        self.board = Board()
        self.positions = dot_positions()
        self.points: dict[Player, list[Point]] = {Player.RED: [], Player.BLUE: []}
        self.turn = 0
        self.collision = False
        self.pending: int | None = None

    @property
    def current_player(self) -> Player:
        return Player.RED if self.turn % 2 == 0 else Player.BLUE

    @property
    def red_points(self) -> list[Point]:
        return self.points[Player.RED]

    @property
    def blue_points(self) -> list[Point]:
        return self.points[Player.BLUE]

    def _is_computer(self, player: Player) -> bool:
        return player in _COMPUTER_PLAYERS[self.mode]

    def _play(self, first: int, second: int) -> None:
        if self.board.strike(first, second):
            self.collision = True
        self.turn += 1

    def click(self, index: int) -> bool:
        """Handle a human click on a dot; return whether it was accepted."""
        if not 0 <= index < DOT_COUNT:
            raise IndexError(f"dot index out of range: {index}")
        player = self.current_player
        if self.is_over() or self._is_computer(player):
            return False
        self.points[player].append(self.positions[index])
        if self.pending is None:
            self.pending = index
        else:
            first, self.pending = self.pending, None
            self._play(first, index)
        return True

    def step(self) -> bool:
        """Let a computer player move if it is its turn; return whether it moved."""
        player = self.current_player
        if self.is_over() or not self._is_computer(player):
            return False
        first, second = random_free_pair(self.board, self.rng)
        self.points[player].append(self.positions[first])
        self.points[player].append(self.positions[second])
        self._play(first, second)
        return True

    def winner(self) -> Player | None:
        """Return the winner once every dot is struck out, else None."""
        if not self.board.is_full():
            return None
        return self.current_player

    def is_over(self) -> bool:
        return self.board.is_full() or self.collision