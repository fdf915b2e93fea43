import random

import pytest

from dotstrike.board import DOT_COUNT
from dotstrike.game import Game, Mode, Player

ROW_MOVES = [(0, 5), (6, 10), (11, 14), (15, 17), (18, 19), (20, 20)]


def play(game, moves):
    for first, second in moves:
        assert game.click(first)
        assert game.click(second)


def test_new_game():
    game = Game(Mode.HUMAN_VS_HUMAN, random.Random(0))
    assert game.current_player is Player.RED
    assert game.winner() is None
    assert not game.is_over()


def test_human_move_strikes_range():
    game = Game(Mode.HUMAN_VS_HUMAN)
    play(game, [(2, 0)])
    assert game.board.erased_count() == 3
    assert game.current_player is Player.BLUE
    assert game.red_points == [game.positions[2], game.positions[0]]
    assert game.blue_points == []


def test_first_click_does_not_change_turn():
    game = Game(Mode.HUMAN_VS_HUMAN)
    assert game.click(4)
    assert game.current_player is Player.RED
    assert game.pending == 4
    assert game.board.erased_count() == 0


def test_collision_ends_game():
    game = Game(Mode.HUMAN_VS_HUMAN)
    play(game, [(0, 2), (1, 1)])
    assert game.collision
    assert game.is_over()
    assert game.winner() is None
    assert not game.click(10)


def test_last_stroke_loses():
    game = Game(Mode.HUMAN_VS_HUMAN)
    play(game, ROW_MOVES)
    assert game.board.is_full()
    assert game.winner() is Player.RED
    assert not game.click(0)


def test_red_taking_last_dot_loses():
    game = Game(Mode.HUMAN_VS_HUMAN)
    play(game, ROW_MOVES[:5] + [(20, 20)][:0])
    play(game, [(20, 20), ])
    assert game.winner() is Player.RED
    game2 = Game(Mode.HUMAN_VS_HUMAN)
    play(game2, [(0, 5), (6, 10), (11, 14), (15, 17), (18, 20)])
    assert game2.winner() is Player.BLUE


def test_human_step_does_nothing():
    game = Game(Mode.HUMAN_VS_HUMAN)
    assert game.step() is False
    assert game.turn == 0


def test_human_vs_random():
    game = Game(Mode.HUMAN_VS_RANDOM, random.Random(11))
    assert game.step() is False
    play(game, [(0, 1)])
    assert game.click(7) is False
    before = game.board.erased_count()
    assert game.step() is True
    assert game.board.erased_count() > before
    assert len(game.blue_points) == 2
    assert not game.collision
    assert game.current_player is Player.RED


def test_random_vs_random_plays_out():
    game = Game(Mode.RANDOM_VS_RANDOM, random.Random(5))
    assert game.click(0) is False
    moves = 0
    while game.step():
        moves += 1
    assert game.board.erased_count() == DOT_COUNT
    assert not game.collision
    assert game.turn == moves
    assert game.winner() in (Player.RED, Player.BLUE)
    assert len(game.red_points) + len(game.blue_points) == 2 * moves


def test_click_out_of_range():
    game = Game(Mode.HUMAN_VS_HUMAN)
    with pytest.raises(IndexError):
        game.click(DOT_COUNT)