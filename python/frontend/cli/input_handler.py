"""Single-keypress reader for the CLI frontends.

Arrow keys and WASD give a direction, digits 1-5 pick a piece and Tab
cycles through the pieces that can currently move.  Works on macOS / Linux
(tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from backend.models.board import Tile
from backend.models.coordinate import Direction


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "\t": "next",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "h": "help",
    "?": "help",
    "v": "solve",
    "n": "hint",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

DIRECTIONS: dict[str, Direction] = {d.value: d for d in Direction}

TILE_KEYS: dict[str, Tile] = {str(tile + 1): tile for tile in Tile}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    action = _KEY_MAP.get(ch.lower() if ch.isalpha() else ch)
    if action is not None:
        return action
    return ch if ch.isprintable() else ""


def next_tile(current: Tile, movable: list[Tile]) -> Tile:
    """Return the movable tile after *current*, wrapping around."""
    if not movable:
        return current
    later = [t for t in movable if t > current]
    return later[0] if later else movable[0]


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — slide the selected piece
        "1" … "5"                      — select a piece
        "next"                         — Tab (next movable piece)
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r (restart or scramble)
        "help"                         — h / ?
        "solve"                        — v (auto-solve)
        "hint"                         — n (next move)
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"  # bare Escape

    return resolve(ch)
