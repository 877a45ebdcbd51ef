from backend.models.board import (
    HEIGHT,
    WIDTH,
    Board,
    IllegalMoveError,
    InvalidBoardError,
    Move,
    Tile,
)
from backend.models.coordinate import Coordinate, Direction

__all__ = [
    "HEIGHT",
    "WIDTH",
    "Board",
    "Coordinate",
    "Direction",
    "IllegalMoveError",
    "InvalidBoardError",
    "Move",
    "Tile",
]
