"""Game session and board generator tests."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import GameState
from backend.models.board import Board, Move, Tile
from backend.models.coordinate import Coordinate, Direction

NEAR_GOAL = Board.from_pairs([(1, 1), (0, 0), (0, 2), (2, 0), (2, 3)])


# -- GamePlay -----------------------------------------------------------------


def test_new_game_starts_from_initial_layout() -> None:
    game = GamePlay()
    assert game.board == GameGenerator.initial()
    assert not game.is_won
    assert game.movable_tiles() == [Tile.SQUARE, Tile.BOTTOMRIGHT]


def test_legal_move_updates_board_and_notifies() -> None:
    game = GamePlay()
    seen: list[Board] = []
    game.subscribe(seen.append)

    assert game.move(Tile.SQUARE, Direction.DOWN)

    assert game.position(Tile.SQUARE) == Coordinate(1, 4)
    assert seen == [game.board]


def test_illegal_move_is_rejected_quietly() -> None:
    game = GamePlay()
    seen: list[Board] = []
    game.subscribe(seen.append)
    before = game.board

    assert not game.move(Tile.TOPLEFT, Direction.UP)
    assert not game.can_move(Tile.TOPLEFT, Direction.UP)

    assert game.board == before
    assert seen == []


def test_apply_takes_a_move() -> None:
    game = GamePlay()
    assert game.apply(Move(Tile.BOTTOMRIGHT, Direction.RIGHT))
    assert game.position(Tile.BOTTOMRIGHT) == Coordinate(2, 3)


def test_restart_returns_to_starting_board() -> None:
    game = GamePlay.from_board(NEAR_GOAL)
    game.move(Tile.TOPRIGHT, Direction.RIGHT)
    assert game.board != NEAR_GOAL

    game.restart()
    assert game.board == NEAR_GOAL


def test_winning_move() -> None:
    game = GamePlay.from_board(NEAR_GOAL)
    assert game.legal_moves() == {
        Tile.TOPRIGHT: Direction.RIGHT,
        Tile.BOTTOMRIGHT: Direction.LEFT,
    }
    assert game.move(Tile.BOTTOMRIGHT, Direction.LEFT)
    assert game.is_won


def test_unsubscribe_stops_notifications() -> None:
    game = GamePlay()
    seen: list[Board] = []
    game.subscribe(seen.append)
    game.unsubscribe(seen.append)

    game.move(Tile.SQUARE, Direction.DOWN)
    assert seen == []


def test_subscribe_is_idempotent() -> None:
    state = GameState(Board())
    seen: list[Board] = []
    state.subscribe(seen.append)
    state.subscribe(seen.append)

    state.update(NEAR_GOAL)
    assert seen == [NEAR_GOAL]
    assert not state.is_solved


def test_legal_directions_passthrough() -> None:
    game = GamePlay()
    assert game.legal_directions(Tile.SQUARE) == [Direction.DOWN]
    assert game.legal_directions(Tile.TOPLEFT) == []


# -- GameGenerator ------------------------------------------------------------


def test_fixed_layouts() -> None:
    assert GameGenerator.initial() == Board()
    assert not GameGenerator.initial().is_goal()
    solved = GameGenerator.solved()
    assert solved.is_goal()
    assert solved.position(Tile.SQUARE) == Coordinate(1, 1)


def test_zero_step_scramble_is_identity() -> None:
    board = GameGenerator.initial()
    assert GameGenerator.scramble(board, steps=0) == board


def test_one_step_scramble_is_a_successor() -> None:
    board = GameGenerator.initial()
    successors = {board.apply(m) for m in board.moves()}
    for seed in range(10):
        assert GameGenerator.scramble(board, steps=1, rng=random.Random(seed)) in successors


@pytest.mark.parametrize("seed", range(5))
def test_generated_board_is_unsolved(seed: int) -> None:
    board = GameGenerator.generate(steps=10, rng=random.Random(seed))
    assert not board.is_goal()


def test_scramble_is_reproducible() -> None:
    a = GameGenerator.scramble(Board(), steps=20, rng=random.Random(7))
    b = GameGenerator.scramble(Board(), steps=20, rng=random.Random(7))
    assert a == b
