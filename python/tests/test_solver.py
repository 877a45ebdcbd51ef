"""Solver tests.

Every solution is replayed through the real game engine to verify it
reaches a goal arrangement.  Each test is hard-killed by
``pytest-timeout`` (configured in ``pyproject.toml``).
"""

from __future__ import annotations

import logging
import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver, SolverConfig, Strategy
from backend.models.board import Board, Move, Tile
from backend.models.coordinate import Direction

NEAR_GOAL = Board.from_pairs([(1, 1), (0, 0), (0, 2), (2, 0), (2, 3)])
TWO_AWAY = Board.from_pairs([(1, 1), (0, 0), (0, 3), (2, 0), (2, 3)])

STRATEGIES = [SolverConfig(strategy=Strategy.bfs), SolverConfig(strategy=Strategy.dfs)]


def _ids(config: SolverConfig) -> str:
    return config.strategy.value


# -- helpers ------------------------------------------------------------------


def _assert_solution(board: Board, moves: list[Move]) -> None:
    """Replay *moves* through ``GamePlay`` and check the goal is reached."""
    assert all(isinstance(m, Move) for m in moves)

    game = GamePlay.from_board(board)
    for i, move in enumerate(moves):
        assert game.apply(move), f"Move {i} ({move}) was illegal at {game.board}"

    assert game.is_won, f"Board not solved after {len(moves)} moves ({board})"


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("config", STRATEGIES, ids=_ids)
def test_goal_needs_no_moves(config: SolverConfig) -> None:
    goal = GameGenerator.solved()
    assert Solver.solve(goal, config) == []
    assert Solver.hint(goal, config) is None
    assert Solver.is_solvable(goal, config)


@pytest.mark.parametrize("config", STRATEGIES, ids=_ids)
def test_one_move_from_goal(config: SolverConfig) -> None:
    moves = Solver.solve(NEAR_GOAL, config)
    assert moves == [Move(Tile.BOTTOMRIGHT, Direction.LEFT)]
    _assert_solution(NEAR_GOAL, moves)


@pytest.mark.parametrize("config", STRATEGIES, ids=_ids)
def test_two_moves_from_goal(config: SolverConfig) -> None:
    moves = Solver.solve(TWO_AWAY, config)
    assert moves == [
        Move(Tile.TOPRIGHT, Direction.LEFT),
        Move(Tile.BOTTOMRIGHT, Direction.LEFT),
    ]
    _assert_solution(TWO_AWAY, moves)


def test_hint_is_first_move() -> None:
    assert Solver.hint(TWO_AWAY) == Move(Tile.TOPRIGHT, Direction.LEFT)
    assert Solver.is_solvable(TWO_AWAY)


@pytest.mark.parametrize("strategy", list(Strategy), ids=str)
def test_depth_limit_is_respected(strategy: Strategy) -> None:
    config = SolverConfig(strategy=strategy, max_depth=1)
    assert Solver.solve(TWO_AWAY, config) == []
    assert not Solver.is_solvable(TWO_AWAY, config)


def test_starting_layout_is_solved() -> None:
    board = GameGenerator.initial()
    moves = Solver.solve(board)
    assert moves, "No solution found for the starting layout"
    _assert_solution(board, moves)
    assert Solver.hint(board) == moves[0]


def test_starting_layout_needs_every_direction() -> None:
    # One direction per tile is not enough from the start.
    board = GameGenerator.initial()
    moves = Solver.solve(board)
    replay = board
    dropped = 0
    for move in moves:
        if replay.legal_moves().get(move.tile) is not move.direction:
            dropped += 1
        replay = replay.apply(move)
    assert dropped > 0


@pytest.mark.parametrize("seed", range(5))
def test_scrambled_solutions_replay(seed: int) -> None:
    # Scrambles walk away from the goal with reversible moves.
    board = GameGenerator.generate(steps=6, rng=random.Random(seed))
    moves = Solver.solve(board)
    assert moves
    _assert_solution(board, moves)


@pytest.mark.parametrize("seed", range(3))
def test_dfs_solves_short_scrambles(seed: int) -> None:
    board = GameGenerator.generate(steps=4, rng=random.Random(seed))
    moves = Solver.solve(board, SolverConfig(strategy=Strategy.dfs))
    assert moves
    _assert_solution(board, moves)


@pytest.mark.parametrize("strategy", list(Strategy), ids=str)
def test_node_cap_stops_search(strategy: Strategy, caplog: pytest.LogCaptureFixture) -> None:
    config = SolverConfig(strategy=strategy, max_nodes=1)
    with caplog.at_level(logging.WARNING, logger="backend.engine.gamesolver.solver"):
        assert Solver.solve(TWO_AWAY, config) == []
    assert "stopped" in caplog.text


@pytest.mark.timeout(5)
def test_dfs_cap_bounds_total_work() -> None:
    board = GameGenerator.initial()
    config = SolverConfig(strategy=Strategy.dfs, max_depth=60, max_nodes=5_000)
    moves = Solver.solve(board, config)
    if moves:
        _assert_solution(board, moves)


def test_bfs_is_never_longer_than_dfs() -> None:
    bfs = Solver.solve(TWO_AWAY, SolverConfig(strategy=Strategy.bfs))
    dfs = Solver.solve(TWO_AWAY, SolverConfig(strategy=Strategy.dfs))
    assert len(bfs) <= len(dfs)


@pytest.mark.parametrize(
    "kwargs",
    [{"max_depth": -1}, {"max_nodes": 0}],
    ids=["depth", "nodes"],
)
def test_config_validation(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        SolverConfig(**kwargs)
