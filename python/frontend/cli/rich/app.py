"""Rich terminal frontend — styled tiles, a cursor, and a completion banner.

The frontend owns every presentation concern: it moves a cursor over the
board, clicks the tile under it, and asks the engine for the next grid.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.models.grid import home_position
from frontend.cli.input_handler import get_key

console = Console()

_CURSOR_MOVES: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


# -- board rendering ----------------------------------------------------------


def _tile_markup(game: GamePlay, row: int, col: int, selected: bool) -> str:
    tile = game.grid[row][col]
    width = len(str(game.rows * game.cols))

    if not game.is_revealed(row, col):
        label = f"{'·':>{width}}"
        style = "dim"
    else:
        label = f"{tile + 1:>{width}}"
        style = "bold green" if home_position(tile, game.cols) == (row, col) else "bold white"

    if selected:
        style = f"{style} reverse" if game.is_slideable(row, col) else "dim reverse"
    return f"[{style}]{label}[/]"


def render_board(game: GamePlay, cursor: tuple[int, int] | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(game.rows * game.cols))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_green" if game.is_won else "bright_blue",
        padding=(0, 1),
    )
    for _ in range(game.cols):
        table.add_column(width=width + 1, justify="center")

    for r in range(game.rows):
        table.add_row(
            *(_tile_markup(game, r, c, (r, c) == cursor) for c in range(game.cols))
        )

    return table


def render_screen(
    game: GamePlay,
    cursor: tuple[int, int] | None = None,
    status: str = "",
) -> Group:
    board = render_board(game, None if game.is_won else cursor)

    if game.is_won:
        title = f"[bold green]Sliding Puzzle  {game.rows}×{game.cols}[/bold green]"
        border = "bold green"
        footer = Text()
        footer.append("\n  ★ ", style="bold yellow")
        footer.append("COMPLETE!", style="bold green")
        footer.append(f"  Solved in {game.state.moves} moves  ", style="green")
        footer.append("★\n", style="bold yellow")
    else:
        title = f"[bold cyan]Sliding Puzzle  {game.rows}×{game.cols}[/bold cyan]"
        border = "bright_blue"
        footer = Text()
        footer.append("  Moves: ", style="dim")
        footer.append(str(game.state.moves), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  reshuffle   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    parts = [
        Align.center(
            Panel(Align.center(board), title=title, border_style=border, padding=(1, 2))
        ),
        Align.center(footer),
    ]
    if status:
        parts.append(Align.center(Text.from_markup(f"  {status}")))
    parts.append(Align.center(controls))
    return Group(*parts)


# -- input --------------------------------------------------------------------


def move_cursor(game: GamePlay, cursor: tuple[int, int], key: str) -> tuple[int, int]:
    """Move *cursor* one cell, clamped to the board."""
    dr, dc = _CURSOR_MOVES[key]
    row = min(max(cursor[0] + dr, 0), game.rows - 1)
    col = min(max(cursor[1] + dc, 0), game.cols - 1)
    return row, col


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay) -> None:
    cursor = (game.rows - 1, game.cols - 1)
    status = ""

    while True:
        console.clear()
        console.print()
        console.print(render_screen(game, cursor, status))
        status = ""

        key = get_key()
        if key == "quit":
            return
        if key in _CURSOR_MOVES:
            cursor = move_cursor(game, cursor, key)
        elif key == "select":
            if not game.click(*cursor):
                status = "[dim]That tile can't move.[/dim]"
        elif key == "reshuffle":
            game.reshuffle()
            status = "[yellow]Reshuffled![/yellow]"


# -- public entry point -------------------------------------------------------


def run(rows: int, cols: int, seed: int | None = None) -> None:
    """Launch the Rich frontend on a freshly shuffled puzzle."""
    rng = random.Random(seed) if seed is not None else None
    _play(GamePlay(rows, cols, rng))
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
