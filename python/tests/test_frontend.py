"""Frontend helpers that do not need a terminal or a display."""

from __future__ import annotations

import pytest

from backend.models.board import HEIGHT, WIDTH, Board, Move, Tile
from backend.models.coordinate import Direction
from frontend.cli.input_handler import DIRECTIONS, TILE_KEYS, next_tile, resolve
from frontend.cli.rich.app import render_board, render_solution


@pytest.mark.parametrize(
    ("raw", "action"),
    [
        ("w", "up"),
        ("S", "down"),
        ("a", "left"),
        ("d", "right"),
        ("\t", "next"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("n", "hint"),
        ("v", "solve"),
        ("\r", "enter"),
        ("3", "3"),
        ("x", "x"),
        ("\x07", ""),
    ],
)
def test_resolve(raw: str, action: str) -> None:
    assert resolve(raw) == action


def test_tile_keys_are_one_based() -> None:
    assert TILE_KEYS["1"] is Tile.SQUARE
    assert TILE_KEYS["5"] is Tile.BOTTOMRIGHT
    assert len(TILE_KEYS) == len(Tile)


def test_direction_actions() -> None:
    assert DIRECTIONS == {
        "up": Direction.UP,
        "right": Direction.RIGHT,
        "down": Direction.DOWN,
        "left": Direction.LEFT,
    }


def test_next_tile_wraps() -> None:
    movable = [Tile.SQUARE, Tile.TOPRIGHT, Tile.BOTTOMRIGHT]
    assert next_tile(Tile.SQUARE, movable) is Tile.TOPRIGHT
    assert next_tile(Tile.TOPLEFT, movable) is Tile.TOPRIGHT
    assert next_tile(Tile.BOTTOMRIGHT, movable) is Tile.SQUARE
    assert next_tile(Tile.BOTTOMLEFT, []) is Tile.BOTTOMLEFT


def test_render_board_shape() -> None:
    table = render_board(Board(), selected=Tile.SQUARE)
    assert len(table.columns) == WIDTH
    assert table.row_count == HEIGHT


def test_render_solution_lists_every_move() -> None:
    moves = [Move(Tile.SQUARE, Direction.DOWN), Move(Tile.SQUARE, Direction.DOWN)]
    table = render_solution(Board(), moves)
    assert table.row_count == len(moves)
