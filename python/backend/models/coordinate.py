"""Grid coordinates and movement directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Coordinate:
    """A (row, col) cell reference.

    Neighbours are never clamped, so the neighbour of an edge cell is a
    perfectly good ``Coordinate`` that simply lies off the board.
    """

    row: int
    col: int

    def up(self) -> Coordinate:
        return Coordinate(self.row - 1, self.col)

    def down(self) -> Coordinate:
        return Coordinate(self.row + 1, self.col)

    def left(self) -> Coordinate:
        return Coordinate(self.row, self.col - 1)

    def right(self) -> Coordinate:
        return Coordinate(self.row, self.col + 1)

    def neighbor(self, direction: Direction) -> Coordinate:
        match direction:
            case Direction.UP:
                return self.up()
            case Direction.RIGHT:
                return self.right()
            case Direction.DOWN:
                return self.down()
            case Direction.LEFT:
                return self.left()
        raise ValueError(f"Unknown direction {direction!r}.")

    def offset(self, d_row: int, d_col: int) -> Coordinate:
        return Coordinate(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
