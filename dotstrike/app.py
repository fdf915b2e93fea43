"""Window, input handling and drawing for the dot striking game."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

import pygame

from .board import DOT_RADIUS, Point, line_segments
from .game import Game, Mode, Player

WIDTH = 1000
HEIGHT = 800
FPS = 30
TITLE = "dot2dot"
COMPUTER_DELAY_MS = 1000

WHITE = (255, 255, 255)
RED = (230, 41, 55)
BLUE = (0, 121, 241)

# (dot colour, background colour) for each mode
THEMES: dict[Mode, tuple[tuple[int, int, int], tuple[int, int, int]]] = {
    Mode.HUMAN_VS_HUMAN: ((255, 203, 0), (112, 31, 126)),
    Mode.HUMAN_VS_RANDOM: ((255, 161, 0), (127, 106, 79)),
    Mode.RANDOM_VS_RANDOM: ((211, 176, 131), (245, 245, 245)),
}

LINE_WIDTH = 5
BANNER_SIZE = 150


def dot_at(positions: Sequence[Point], pos: Sequence[float]) -> int | None:
    """Return the index of the dot under the given screen position, if any."""
    x, y = pos
    for index, centre in enumerate(positions):
        if (x - centre.x) ** 2 + (y - centre.y) ** 2 <= DOT_RADIUS**2:
            return index
    return None


def _draw_banner(surface: pygame.Surface, text: str, x: int, colour) -> None:
    banner_font = pygame.font.Font(None, BANNER_SIZE)
    surface.blit(banner_font.render(text, False, colour), (x, HEIGHT // 2 - 60))


def draw(surface: pygame.Surface, game: Game, font: pygame.font.Font) -> None:
    """Draw the current state of the game onto the surface."""
    dot_colour, background = THEMES[game.mode]
    surface.fill(background)

    winner = game.winner()
    if winner is Player.RED:
        _draw_banner(surface, "RED WON", 175, RED)
    elif winner is Player.BLUE:
        _draw_banner(surface, "BLUE WON", 120, BLUE)
    elif game.collision:
        _draw_banner(surface, "COLLISION", 110, dot_colour)
    else:
        for index, centre in enumerate(game.positions):
            pygame.draw.circle(surface, dot_colour, (centre.x, centre.y), DOT_RADIUS)
            label = font.render(str(index), True, WHITE)
            surface.blit(label, (centre.x - 6, centre.y - 10))
        for points, colour in ((game.blue_points, BLUE), (game.red_points, RED)):
            for start, end in line_segments(points):
                pygame.draw.line(
                    surface, colour, (start.x, start.y), (end.x, end.y), LINE_WIDTH
                )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dotstrike", description="Strike out rows of dots; the last stroke loses."
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in Mode],
        default=Mode.HUMAN_VS_RANDOM.value,
        help="who plays red and blue",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for computer moves")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    args = _parse_args(argv)
    mode = Mode(args.mode)
    game = Game(mode, random.Random(args.seed))

    pygame.init()
    try:
        surface = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()
        last_computer_move = pygame.time.get_ticks()
        announced = False
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    index = dot_at(game.positions, event.pos)
                    if index is not None:
                        game.click(index)
            if not running:
                break

            now = pygame.time.get_ticks()
            paced = mode is Mode.RANDOM_VS_RANDOM and game.board.erased_count() > 0
            if not paced or now - last_computer_move >= COMPUTER_DELAY_MS:
                if game.step():
                    last_computer_move = now

            winner = game.winner()
            if winner is not None and not announced:
                print(f"{winner.name} WON")
                announced = True

            draw(surface, game, font)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0