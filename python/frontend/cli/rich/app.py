"""Rich terminal frontend — styled tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.  Includes a built-in
menu for play and study modes.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import DEFAULT_CONFIG, Solver, SolverConfig
from backend.models.board import WIDTH, Board, Move, Tile
from frontend.cli.input_handler import DIRECTIONS, TILE_KEYS, get_key, next_tile

console = Console()

_STYLES = {
    Tile.SQUARE: "bold white on red",
    Tile.TOPLEFT: "bold white on blue",
    Tile.TOPRIGHT: "bold black on green",
    Tile.BOTTOMLEFT: "bold black on yellow",
    Tile.BOTTOMRIGHT: "bold white on magenta",
}


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, selected: Tile | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(WIDTH):
        table.add_column(width=3, justify="center")

    for row in board.grid():
        cells: list[Text] = []
        for tile in row:
            if tile is None:
                cells.append(Text("·", style="dim"))
            elif tile == selected:
                cells.append(Text(f"[{tile + 1}]", style=f"{_STYLES[tile]} underline"))
            else:
                cells.append(Text(f" {tile + 1} ", style=_STYLES[tile]))
        table.add_row(*cells)

    return table


def render_solution(board: Board, moves: list[Move]) -> Table:
    """Return a table listing *moves* and the anchor each one leaves behind."""
    table = Table(
        title=Text(f"Solution for {board}", style="bold cyan"),
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Piece", style="bold")
    table.add_column("Direction", style="yellow")
    table.add_column("New anchor", justify="right", style="cyan")

    for i, move in enumerate(moves, 1):
        board = board.apply(move)
        table.add_row(
            str(i),
            Tile(move.tile).name,
            move.direction.value,
            str(board.position(move.tile)),
        )
    return table


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay, config: SolverConfig) -> str:
    board = game.board
    hint = Solver.hint(board, config)
    if hint is None:
        if board.is_goal():
            return "[green]Already solved![/green]"
        return "[yellow]No hint available within the search limits.[/yellow]"
    game.apply(hint)
    return f"[cyan]Hint:[/cyan] moved [bold]{hint}[/bold]"


def _auto_solve(game: GamePlay, config: SolverConfig) -> str:
    board = game.board
    moves = Solver.solve(board, config)
    if not moves:
        if board.is_goal():
            return "[green]Already solved![/green]"
        return "[red]No solution found within the search limits.[/red]"

    for move in moves:
        game.apply(move)
    return f"[bold green]Solved in {len(moves)} moves![/bold green]"


# -- menu screen --------------------------------------------------------------


def _draw_menu() -> None:
    console.clear()

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("2", style="bold yellow")
    opts.append("  Study    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(render_board(GameGenerator.initial())),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]C O R N E R   S L I D E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _selection_text(game: GamePlay, selected: Tile) -> Text:
    directions = game.legal_directions(selected)
    text = Text()
    text.append("  Selected: ", style="dim")
    text.append(f"{selected.name} ({selected + 1})", style=_STYLES[selected])
    text.append("    Moves: ", style="dim")
    if directions:
        text.append(", ".join(d.value for d in directions), style="bold cyan")
    else:
        text.append("none", style="dim")
    return text


def _controls(study: bool) -> Text:
    controls = Text()
    controls.append("  1-5", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("Tab", style="bold cyan")
    controls.append("  select   ", style="dim")
    controls.append("↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    if study:
        controls.append("R", style="bold yellow")
        controls.append("  scramble   ", style="dim")
        controls.append("V", style="bold cyan")
        controls.append("  solve   ", style="dim")
    else:
        controls.append("R", style="bold cyan")
        controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")
    return controls


def _draw_game(game: GamePlay, selected: Tile, status: str, study: bool) -> None:
    console.clear()

    if study:
        title, border = "[bold yellow]Study[/bold yellow]", "yellow"
    else:
        title, border = "[bold cyan]Corner Slide[/bold cyan]", "bright_blue"

    panel = Panel(
        Align.center(render_board(game.board, selected)),
        title=title,
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_selection_text(game, selected)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls(study)))


def _draw_win(game: GamePlay) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    panel = Panel(
        Group(Align.center(render_board(game.board)), Align.center(congrats)),
        title="[bold green]Corner Slide[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


# -- game loops ---------------------------------------------------------------


def _handle_common(game: GamePlay, key: str, selected: Tile) -> tuple[Tile, str]:
    """Apply selection / movement keys.  Returns (selected, status)."""
    if key in DIRECTIONS:
        direction = DIRECTIONS[key]
        if not game.move(selected, direction):
            return selected, f"[yellow]{selected.name} cannot move {direction.value}.[/yellow]"
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
            _draw_game(game, selected, status, study=False)
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

        _draw_win(game)
        console.print(
            Align.center(
                Text("\n  Press R to play again, Q to go back.\n", style="dim")
            )
        )

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
        _draw_game(game, selected, status, study=True)
        key = get_key()

        if key == "restart":
            game = GamePlay.from_board(GameGenerator.generate())
            status = "[yellow]Scrambled![/yellow]"
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
        _draw_menu()
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(
                Align.center(Text("\nGoodbye!\n", style="bold cyan"))
            )
            return
        elif key in ("1", "enter"):
            _play_game(config)
        elif key == "2":
            _study_game(config)


# -- public entry point -------------------------------------------------------


def run(config: SolverConfig = DEFAULT_CONFIG) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(config)
