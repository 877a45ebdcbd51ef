"""Board model for the corner slide puzzle.

The board is a fixed 4×6 grid holding five pieces: one 2×2 square and four
L-shaped corner pieces.  Every piece is described by an *anchor* coordinate
plus a fixed shape, and a ``Board`` is nothing more than the five anchors.
Boards are immutable values; :meth:`Board.move` returns a new board.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import cached_property
from typing import NamedTuple

from backend.models.coordinate import Coordinate, Direction

HEIGHT = 4
WIDTH = 6


class Tile(IntEnum):
    SQUARE = 0
    TOPLEFT = 1
    TOPRIGHT = 2
    BOTTOMLEFT = 3
    BOTTOMRIGHT = 4


class Move(NamedTuple):
    tile: Tile
    direction: Direction

    def __str__(self) -> str:
        return f"{Tile(self.tile).name} {self.direction.value}"


class InvalidBoardError(ValueError):
    """Raised when five anchors do not describe a valid arrangement."""


class IllegalMoveError(ValueError):
    """Raised when a piece is asked to slide where it cannot go."""


# Cells covered by each piece, as (row, col) offsets from its anchor.
# BOTTOMRIGHT does not cover its own anchor: that cell is the piece's hole.
SHAPES: dict[Tile, tuple[tuple[int, int], ...]] = {
    Tile.SQUARE: ((0, 0), (0, 1), (1, 0), (1, 1)),
    Tile.TOPLEFT: ((0, 0), (0, 1), (1, 0)),
    Tile.TOPRIGHT: ((0, 0), (0, 1), (1, 1)),
    Tile.BOTTOMLEFT: ((0, 0), (1, 0), (1, 1)),
    Tile.BOTTOMRIGHT: ((1, 0), (1, 1), (0, 1)),
}

# Cells a piece newly covers when it slides one step, as offsets from the
# anchor *before* the slide.
_ENTERED: dict[Direction, tuple[tuple[int, int], ...]] = {
    Direction.UP: ((-1, 0), (-1, 1)),
    Direction.RIGHT: ((0, 2), (1, 2)),
    Direction.DOWN: ((2, 0), (2, 1)),
    Direction.LEFT: ((0, -1), (1, -1)),
}

_ENTERED_BY_TILE: dict[tuple[Tile, Direction], tuple[tuple[int, int], ...]] = {
    (Tile.BOTTOMLEFT, Direction.UP): ((-1, 0), (0, 1)),
    (Tile.BOTTOMRIGHT, Direction.UP): ((0, 0), (-1, 1)),
    (Tile.TOPLEFT, Direction.RIGHT): ((0, 2), (1, 1)),
    (Tile.BOTTOMLEFT, Direction.RIGHT): ((0, 1), (1, 2)),
    (Tile.TOPLEFT, Direction.DOWN): ((2, 0), (1, 1)),
    (Tile.TOPRIGHT, Direction.DOWN): ((1, 0), (2, 1)),
    (Tile.TOPRIGHT, Direction.LEFT): ((0, -1), (1, 0)),
    (Tile.BOTTOMRIGHT, Direction.LEFT): ((0, 0), (1, -1)),
}

INITIAL_POSITIONS: tuple[Coordinate, ...] = (
    Coordinate(0, 4),
    Coordinate(0, 0),
    Coordinate(0, 2),
    Coordinate(2, 0),
    Coordinate(2, 2),
)


def is_on_board(coordinate: Coordinate) -> bool:
    return 0 <= coordinate.row < HEIGHT and 0 <= coordinate.col < WIDTH


def footprint_at(tile: Tile, anchor: Coordinate) -> frozenset[Coordinate]:
    """Return the cells *tile* would cover if anchored at *anchor*."""
    return frozenset(anchor.offset(dr, dc) for dr, dc in SHAPES[Tile(tile)])


@dataclass(frozen=True)
class Board:
    """Five piece anchors, indexed by :class:`Tile`.

    ``Board()`` is the canonical starting layout.  Construction checks that
    exactly five anchors are given, that every anchor is on the board and
    that no two footprints share a cell.
    """

    positions: tuple[Coordinate, ...] = INITIAL_POSITIONS

    def __post_init__(self) -> None:
        object.__setattr__(self, "positions", tuple(self.positions))
        self._validate()

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_pairs(cls, pairs: list[tuple[int, int]]) -> Board:
        """Create a board from plain ``(row, col)`` pairs.

        Example::

            Board.from_pairs([(1, 1), (0, 0), (0, 2), (2, 0), (2, 2)])
        """
        return cls(tuple(Coordinate(r, c) for r, c in pairs))

    def _validate(self) -> None:
        if len(self.positions) != len(Tile):
            raise InvalidBoardError(
                f"Expected {len(Tile)} piece positions, "
                f"got {len(self.positions)}."
            )
        for tile, position in zip(Tile, self.positions):
            if not is_on_board(position):
                raise InvalidBoardError(
                    f"{tile.name} anchor {position} lies outside the "
                    f"{HEIGHT}×{WIDTH} board."
                )
        for tile in Tile:
            for other in Tile:
                if other <= tile:
                    continue
                shared = self.footprint(tile) & self.footprint(other)
                if shared:
                    cells = ", ".join(str(c) for c in sorted(shared, key=_cell_key))
                    raise InvalidBoardError(
                        f"{tile.name} and {other.name} overlap at {cells}."
                    )

    # -- queries --------------------------------------------------------------

    def position(self, tile: int) -> Coordinate:
        return self.positions[Tile(tile)]

    def footprint(self, tile: int) -> frozenset[Coordinate]:
        tile = Tile(tile)
        return footprint_at(tile, self.positions[tile])

    @cached_property
    def _cells(self) -> dict[Coordinate, Tile]:
        return {cell: tile for tile in Tile for cell in self.footprint(tile)}

    def tile_at(self, coordinate: Coordinate) -> Tile | None:
        """Return the piece covering *coordinate*, or ``None``."""
        return self._cells.get(coordinate)

    def is_blocked(self, coordinate: Coordinate) -> bool:
        """Check whether *coordinate* is unavailable to a sliding piece.

        Off-board cells and covered cells are blocked.  BOTTOMRIGHT's hole
        (its anchor) is reserved as well, whatever currently covers it.
        """
        if not is_on_board(coordinate):
            return True
        if coordinate == self.positions[Tile.BOTTOMRIGHT]:
            return True
        return coordinate in self._cells

    def is_goal(self) -> bool:
        """Check whether every corner piece sits flush against the square."""
        square = self.positions[Tile.SQUARE]
        return (
            square == self.positions[Tile.TOPLEFT].right().down()
            and square == self.positions[Tile.TOPRIGHT].left().down()
            and square == self.positions[Tile.BOTTOMLEFT].right().up()
            and square == self.positions[Tile.BOTTOMRIGHT].left().up()
        )

    def entered_cells(self, tile: int, direction: Direction) -> tuple[Coordinate, ...]:
        """Return the cells *tile* would newly cover by sliding one step."""
        tile = Tile(tile)
        anchor = self.positions[tile]
        offsets = _ENTERED_BY_TILE.get((tile, direction), _ENTERED[direction])
        return tuple(anchor.offset(dr, dc) for dr, dc in offsets)

    def can_move(self, tile: int, direction: Direction) -> bool:
        tile = Tile(tile)
        anchor = self.positions[tile]
        if not _inside_edges(anchor, direction):
            return False

        for cell in self.entered_cells(tile, direction):
            if tile is Tile.BOTTOMRIGHT and cell == anchor:
                # Sliding back over its own hole: only a real piece blocks it.
                if cell in self._cells:
                    return False
            elif self.is_blocked(cell):
                return False
        return True

    def legal_moves(self) -> dict[Tile, Direction]:
        """Map each movable tile to one direction it can move in.

        Directions are scanned in declaration order, so when a tile can move
        several ways only the last legal direction is kept.  Use
        :meth:`moves` for every legal pair.
        """
        found: dict[Tile, Direction] = {}
        for direction in Direction:
            for tile in Tile:
                if self.can_move(tile, direction):
                    found[tile] = direction
        return dict(sorted(found.items()))

    def legal_directions(self, tile: int) -> list[Direction]:
        return [d for d in Direction if self.can_move(tile, d)]

    def moves(self) -> list[Move]:
        """Every legal ``(tile, direction)`` pair, ordered by tile."""
        return [
            Move(tile, direction)
            for tile in Tile
            for direction in Direction
            if self.can_move(tile, direction)
        ]

    def grid(self) -> list[list[Tile | None]]:
        """Return the board as rows of covering tiles (``None`` for empty)."""
        return [
            [self._cells.get(Coordinate(r, c)) for c in range(WIDTH)]
            for r in range(HEIGHT)
        ]

    # -- transitions ----------------------------------------------------------

    def move(self, tile: int, direction: Direction) -> Board:
        """Return the board with *tile* slid one cell towards *direction*."""
        tile = Tile(tile)
        if not self.can_move(tile, direction):
            raise IllegalMoveError(
                f"{tile.name} cannot move {direction.value} "
                f"from {self.positions[tile]}."
            )
        positions = list(self.positions)
        positions[tile] = positions[tile].neighbor(direction)
        return Board(tuple(positions))

    def apply(self, move: Move) -> Board:
        return self.move(move.tile, move.direction)

    def copy(self) -> Board:
        return Board(self.positions)

    def __str__(self) -> str:
        return "[" + ",".join(str(p) for p in self.positions) + "]"


# -- helpers ------------------------------------------------------------------


def _inside_edges(anchor: Coordinate, direction: Direction) -> bool:
    # Every piece spans the 2×2 box below and to the right of its anchor.
    match direction:
        case Direction.UP:
            return anchor.row > 0
        case Direction.DOWN:
            return anchor.row + 1 < HEIGHT - 1
        case Direction.LEFT:
            return anchor.col > 0
        case Direction.RIGHT:
            return anchor.col + 1 < WIDTH - 1
    return False


def _cell_key(cell: Coordinate) -> tuple[int, int]:
    return cell.row, cell.col
