#!/usr/bin/env python3
"""Corner Slide puzzle.

Usage::

    python main.py                  # interactive menu
    python main.py -f rich          # Rich terminal
    python main.py -f pygame        # Pygame GUI (has its own menu)
    python main.py --solve          # print a solution for the start layout
    python main.py --solve -s dfs   # ... using iterative deepening
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamesolver import Solver, SolverConfig, Strategy  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _print_solution(config: SolverConfig) -> None:
    from backend.engine.gamegenerator import GameGenerator
    from frontend.cli.rich.app import console, render_board, render_solution

    board = GameGenerator.initial()
    moves = Solver.solve(board, config)

    console.print(render_board(board))
    if not moves:
        console.print(
            f"[yellow]No solution within depth {config.max_depth} "
            f"({config.strategy.value}).[/yellow]"
        )
        return
    console.print(render_solution(board, moves))
    console.print(f"[bold green]{len(moves)} moves.[/bold green]")


def _menu_loop(config: SolverConfig) -> None:
    while True:
        print()
        print("  ====================================")
        print("       C O R N E R   S L I D E        ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  4.  Show a solution")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2", "3"):
            frontend = {"1": Frontend.vanilla, "2": Frontend.rich, "3": Frontend.pygame}[choice]
            importlib.import_module(_RUNNERS[frontend]).run(config)

        elif choice == "4":
            _print_solution(config)

        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    solve: bool = typer.Option(
        False, "--solve",
        help="Print a solution for the starting layout and exit.",
    ),
    strategy: Strategy = typer.Option(
        Strategy.bfs, "-s", "--strategy",
        help="Search strategy for hints and solutions.",
    ),
    max_depth: int = typer.Option(
        60, "--max-depth",
        min=1, max=500,
        help="Longest move sequence the solver considers.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log solver diagnostics to stderr.",
    ),
) -> None:
    """Corner Slide puzzle."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    config = SolverConfig(strategy=strategy, max_depth=max_depth)

    if solve:
        _print_solution(config)
        return

    if frontend is None:
        _menu_loop(config)
        return

    importlib.import_module(_RUNNERS[frontend]).run(config)


if __name__ == "__main__":
    app()
