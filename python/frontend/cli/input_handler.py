"""Keypress input for the puzzle board.

Each keypress is turned into one board action: move the tile cursor, click
the tile under it, reshuffle, or quit.  Raw characters come from termios on
POSIX terminals and msvcrt on Windows; nothing waits for Enter.
"""

from __future__ import annotations

import os
import sys


# -- raw terminal input ------------------------------------------------------


def _read_char_posix() -> str:
    """Read one character with the terminal briefly in raw mode."""
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


def _read_char_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _read_char_windows if os.name == "nt" else _read_char_posix


# -- key → board action ------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C in raw mode
    "r": "reshuffle",
    "R": "reshuffle",
    " ": "select",
    "\r": "select",
    "\n": "select",
}

# Unix escape sequences: ESC [ A/B/C/D
_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — move the cursor
        "select"                       — Enter / Space (click the tile)
        "reshuffle"                    — r
        "quit"                         — q / Ctrl-C / Escape
        ""                             — unrecognised key
    """
    ch = _getch()

    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"  # bare Escape

    return _resolve(ch)
