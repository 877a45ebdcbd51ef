"""Generates corner slide boards."""

from __future__ import annotations

import random

from backend.models.board import INITIAL_POSITIONS, Board, Move, Tile
from backend.models.coordinate import Coordinate


class GameGenerator:
    """Builds the fixed layouts and scrambles them with legal moves."""

    @staticmethod
    def initial() -> Board:
        """Return the canonical starting layout."""
        return Board(INITIAL_POSITIONS)

    @staticmethod
    def solved() -> Board:
        """Return the goal layout: the square pulled into the four corners."""
        positions = list(INITIAL_POSITIONS)
        positions[Tile.SQUARE] = Coordinate(1, 1)
        return Board(tuple(positions))

    @staticmethod
    def scramble(
        board: Board,
        steps: int = 40,
        rng: random.Random | None = None,
    ) -> Board:
        """Return *board* after *steps* random legal moves.

        The move that would immediately undo the previous one is skipped
        whenever another move is available.
        """
        rng = rng or random.Random()
        previous: Move | None = None

        for _ in range(steps):
            moves = board.moves()
            if not moves:
                break
            if previous is not None and len(moves) > 1:
                undo = Move(previous.tile, previous.direction.opposite)
                moves = [m for m in moves if m != undo]
            previous = rng.choice(moves)
            board = board.apply(previous)
        return board

    @staticmethod
    def generate(steps: int = 40, rng: random.Random | None = None) -> Board:
        """Return a scrambled board that is not already solved."""
        rng = rng or random.Random()
        board = GameGenerator.scramble(GameGenerator.solved(), steps, rng)

        # Ensure the board is not already solved
        while board.is_goal():
            board = GameGenerator.scramble(board, max(steps, 1), rng)

        return board
