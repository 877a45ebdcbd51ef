"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Includes a built-in menu for play and study modes.
"""

from __future__ import annotations

import sys

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import DEFAULT_CONFIG, Solver, SolverConfig
from backend.models.board import WIDTH, Board, Tile
from frontend.cli.input_handler import DIRECTIONS, TILE_KEYS, get_key, next_tile


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

_PIECE = {
    Tile.SQUARE: "\033[41;97m",
    Tile.TOPLEFT: "\033[44;97m",
    Tile.TOPRIGHT: "\033[42;30m",
    Tile.BOTTOMLEFT: "\033[43;30m",
    Tile.BOTTOMRIGHT: "\033[45;97m",
}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, selected: Tile | None = None) -> str:
    """Return an ANSI-coloured text representation of the board."""
    sep = "+" + ("---+" * WIDTH)
    lines: list[str] = [sep]
    for row in board.grid():
        cells: list[str] = []
        for tile in row:
            if tile is None:
                cells.append(f"{_DIM} · {_R}")
            elif tile == selected:
                cells.append(f"{_PIECE[tile]}{_BOLD}[{tile + 1}]{_R}")
            else:
                cells.append(f"{_PIECE[tile]} {tile + 1} {_R}")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _selection_line(game: GamePlay, selected: Tile) -> str:
    directions = game.legal_directions(selected)
    moves = ", ".join(d.value for d in directions) if directions else "none"
    return f"  Selected: {_BOLD}{selected.name}{_R} ({selected + 1})  |  moves: {_C}{moves}{_R}"


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay, config: SolverConfig) -> str:
    """Apply a single solver hint.  Returns a status message."""
    board = game.board
    hint = Solver.hint(board, config)
    if hint is None:
        if board.is_goal():
            return f"{_G}Already solved!{_R}"
        return f"{_Y}No hint available within the search limits.{_R}"
    game.apply(hint)
    return f"{_C}Hint:{_R} moved {_BOLD}{hint}{_R}"


def _auto_solve(game: GamePlay, config: SolverConfig) -> str:
    """Run the solver and apply its moves.  Returns a status message."""
    board = game.board
    moves = Solver.solve(board, config)
    if not moves:
        if board.is_goal():
            return f"{_G}Already solved!{_R}"
        return "No solution found within the search limits."

    for move in moves:
        game.apply(move)
    return f"{_G}Solved in {len(moves)} moves:{_R} " + ", ".join(str(m) for m in moves)


# -- screens ------------------------------------------------------------------


def _show_menu() -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}        C O R N E R   S L I D E       {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()
    print(f"    {_C}1{_R}  Play")
    print(f"    {_Y}2{_R}  Study")
    print(f"    {_DIM}Q{_R}  Quit")
    print()


def _controls(study: bool) -> str:
    restart = f"{_Y}R{_R}: scramble" if study else f"{_C}R{_R}: restart"
    solve = f"  |  {_C}V{_R}: solve" if study else ""
    return (
        f"  {_C}1-5{_R}/{_C}Tab{_R}: select  |  "
        f"{_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}N{_R}: hint  |  {restart}{solve}  |  {_C}Q{_R}: back"
    )


def _show_game(game: GamePlay, selected: Tile, status: str, study: bool) -> None:
    _clear()
    title = f"{_Y}=== Study ===" if study else f"{_C}=== Corner Slide ==="
    print(f"  {title}{_R}")
    print()
    print(_render_board(game.board, selected))
    print()
    print(_selection_line(game, selected))
    if status:
        print(f"\n  {status}")
    print()
    print(_controls(study))


def _show_win(game: GamePlay) -> None:
    _clear()
    print(f"  {_G}=== Corner Slide ==={_R}")
    print()
    print(_render_board(game.board))
    print()
    print(f"  {_G}★ CONGRATULATIONS! You solved it! ★{_R}")


# -- game loops ---------------------------------------------------------------


def _handle_common(game: GamePlay, key: str, selected: Tile) -> tuple[Tile, str]:
    """Apply selection / movement keys.  Returns (selected, status)."""
    if key in DIRECTIONS:
        direction = DIRECTIONS[key]
        if not game.move(selected, direction):
            return selected, f"{_Y}{selected.name} cannot move {direction.value}.{_R}"
    elif key in TILE_KEYS:
        return TILE_KEYS[key], ""
    elif key == "next":
        return next_tile(selected, game.movable_tiles()), ""
    return selected, ""


def _play_game(config: SolverConfig) -> None:
    """Play mode — canonical start, hint only."""
    while True:
        game = GamePlay()
        selected = Tile.SQUARE
        status = ""

        while not game.is_won:
            _show_game(game, selected, status, study=False)
            key = get_key()

            if key == "hint":
                status = _apply_hint(game, config)
            elif key == "restart":
                game.restart()
                status = ""
            elif key == "quit":
                return
            else:
                selected, status = _handle_common(game, key, selected)

        _show_win(game)
        print(f"\n  Press {_C}R{_R} to play again, {_C}Q{_R} to go back.")

        while True:
            key = get_key()
            if key == "restart":
                break
            if key == "quit":
                return


def _study_game(config: SolverConfig) -> None:
    """Study mode — starts solved, scramble/hint/solve available."""
    game = GamePlay.from_board(GameGenerator.solved())
    selected = Tile.SQUARE
    status = ""

    while True:
        _show_game(game, selected, status, study=True)
        key = get_key()

        if key == "restart":
            game = GamePlay.from_board(GameGenerator.generate())
            status = f"{_Y}Scrambled!{_R}"
        elif key == "hint":
            status = _apply_hint(game, config)
        elif key == "solve":
            status = _auto_solve(game, config)
        elif key == "quit":
            return
        else:
            selected, status = _handle_common(game, key, selected)


# -- menu loop ----------------------------------------------------------------


def _menu_loop(config: SolverConfig) -> None:
    while True:
        _show_menu()
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        elif key in ("1", "enter"):
            _play_game(config)
        elif key == "2":
            _study_game(config)


# -- public entry point -------------------------------------------------------


def run(config: SolverConfig = DEFAULT_CONFIG) -> None:
    """Launch the vanilla CLI with interactive menu."""
    _menu_loop(config)
