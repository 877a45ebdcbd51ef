"""Pygame frontend behaviour, driven headless through SDL's dummy drivers."""

from __future__ import annotations

import pygame
import pytest

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import DEFAULT_CONFIG
from backend.models.board import Board
from frontend.gui.pygame.app import PygameApp

NEAR_GOAL = Board.from_pairs([(1, 1), (0, 0), (0, 2), (2, 0), (2, 3)])


@pytest.fixture
def app(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    gui = PygameApp(DEFAULT_CONFIG)
    yield gui
    pygame.quit()


def _key(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_play_mode_hides_solve(app: PygameApp) -> None:
    app._start_game()
    visible = app._visible_game_btns()
    assert app._hint_btn in visible
    assert app._solve_btn not in visible


def test_play_mode_ignores_solve_key(app: PygameApp) -> None:
    app._start_game()
    app._attach(GamePlay.from_board(NEAR_GOAL))

    app._ev_game(_key(pygame.K_v))

    assert app._game.board == NEAR_GOAL


def test_play_mode_ignores_solve_button(app: PygameApp) -> None:
    app._start_game()
    app._attach(GamePlay.from_board(NEAR_GOAL))
    click = pygame.event.Event(
        pygame.MOUSEBUTTONDOWN, button=1, pos=app._solve_btn.rect.center,
    )

    app._ev_game(click)

    assert app._game.board == NEAR_GOAL


def test_study_mode_solves_on_request(app: PygameApp) -> None:
    app._open_study()
    app._attach(GamePlay.from_board(NEAR_GOAL))
    assert app._solve_btn in app._visible_game_btns()

    app._ev_game(_key(pygame.K_v))

    assert app._game.board.is_goal()
