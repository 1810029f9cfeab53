#!/usr/bin/env python3
"""Sliding Puzzle.

Usage::

    python main.py                  # 4×4 puzzle
    python main.py -r 3 -c 5        # 3 rows, 5 columns
    python main.py --seed 7         # reproducible shuffle
"""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from frontend.cli.rich import app as rich_app  # noqa: E402

DEFAULT_SIZE = 4
MIN_SIZE = 2
MAX_SIZE = 8


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    rows: int = typer.Option(
        DEFAULT_SIZE, "-r", "--rows",
        min=MIN_SIZE, max=MAX_SIZE,
        envvar="SLIDING_PUZZLE_ROWS",
        help=f"Number of rows ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    cols: int = typer.Option(
        DEFAULT_SIZE, "-c", "--cols",
        min=MIN_SIZE, max=MAX_SIZE,
        envvar="SLIDING_PUZZLE_COLS",
        help=f"Number of columns ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="SLIDING_PUZZLE_SEED",
        help="Seed the shuffle for a reproducible puzzle.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level",
        envvar="SLIDING_PUZZLE_LOG_LEVEL",
        case_sensitive=False,
        help="Logging verbosity.",
    ),
) -> None:
    """Sliding Puzzle."""
    _configure_logging(log_level)
    rich_app.run(rows=rows, cols=cols, seed=seed)


if __name__ == "__main__":
    app()
