"""Tracks the board of a game in progress."""

from __future__ import annotations

from collections.abc import Callable

from backend.models.board import Board

Listener = Callable[[Board], None]


class GameState:
    """Holds the current board and notifies listeners when it changes.

    Boards are immutable, so every change is a replacement.  A presentation
    layer that wants to react to moves registers a callback instead of
    polling.
    """

    def __init__(self, board: Board) -> None:
        self._board = board
        self._listeners: list[Listener] = []

    @property
    def board(self) -> Board:
        return self._board

    # -- listeners ------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # -- updates --------------------------------------------------------------

    def update(self, board: Board) -> None:
        self._board = board
        for listener in list(self._listeners):
            listener(board)

    @property
    def is_solved(self) -> bool:
        return self._board.is_goal()
