"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.engine.gamestate.state import Listener
from backend.models.board import Board, Move, Tile
from backend.models.coordinate import Coordinate, Direction


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self) -> None:
        self._start = GameGenerator.initial()
        self.state = GameState(self._start)

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a game session from an existing board (e.g. a scramble)."""
        obj = object.__new__(cls)
        obj._start = board
        obj.state = GameState(board)
        return obj

    # -- movement -------------------------------------------------------------

    def move(self, tile: int, direction: Direction) -> bool:
        """Slide *tile* one cell towards *direction*.

        Returns True if the move was legal and applied; an illegal request
        leaves the board untouched.
        """
        board = self.state.board
        if not board.can_move(tile, direction):
            return False
        self.state.update(board.move(tile, direction))
        return True

    def apply(self, move: Move) -> bool:
        return self.move(move.tile, move.direction)

    def restart(self) -> None:
        self.state.update(self._start)

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    def position(self, tile: int) -> Coordinate:
        return self.state.board.position(tile)

    def can_move(self, tile: int, direction: Direction) -> bool:
        return self.state.board.can_move(tile, direction)

    def legal_moves(self) -> dict[Tile, Direction]:
        return self.state.board.legal_moves()

    def legal_directions(self, tile: int) -> list[Direction]:
        return self.state.board.legal_directions(tile)

    def movable_tiles(self) -> list[Tile]:
        return sorted({move.tile for move in self.state.board.moves()})

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    # -- observers ------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        self.state.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self.state.unsubscribe(listener)
