"""Core gameplay logic — slides tiles and tracks completion."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.models.grid import (
    SCAN_ORDER,
    Grid,
    blank_id,
    dimensions,
    freeze,
    tile_at,
)

_LOGGER = logging.getLogger(__name__)


def slide(grid: Sequence[Sequence[int]], row: int, col: int) -> Grid:
    """Slide the tile at ``(row, col)`` into the blank, if they touch.

    Neighbours are checked up, right, down, left.  Returns a new grid with
    the two cells swapped, or *grid* itself when the blank is not
    orthogonally adjacent or ``(row, col)`` lies outside the grid.
    """
    clicked = tile_at(grid, row, col)
    if clicked is None:
        return grid

    rows, cols = dimensions(grid)
    blank = blank_id(rows, cols)

    for direction in SCAN_ORDER:
        dr, dc = direction.offset
        if tile_at(grid, row + dr, col + dc) != blank:
            continue

        _LOGGER.debug("Tile %d slides %s from (%d, %d)", clicked, direction, row, col)
        return tuple(
            tuple(
                blank if tile == clicked else clicked if tile == blank else tile
                for tile in cells
            )
            for cells in grid
        )

    return grid


class GamePlay:
    """One caller-owned puzzle session.

    The current :class:`GameState` is replaced wholesale on every change.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        rng: random.Random | None = None,
    ) -> None:
        self.rows = rows
        self.cols = cols
        self._rng = rng
        self.state = GameState.start(GameGenerator.generate(rows, cols, rng))

    @classmethod
    def from_grid(
        cls,
        grid: Sequence[Sequence[int]],
        rng: random.Random | None = None,
    ) -> GamePlay:
        """Create a session from an existing grid (e.g. a test fixture)."""
        obj = object.__new__(cls)
        obj.rows, obj.cols = dimensions(grid)
        obj._rng = rng
        obj.state = GameState.start(freeze(grid))
        return obj

    # -- tile queries ---------------------------------------------------------

    def is_slideable(self, row: int, col: int) -> bool:
        """Tiles can be clicked unless they are the blank or the game is won."""
        if self.state.complete or tile_at(self.state.grid, row, col) is None:
            return False
        return not self._is_blank(row, col)

    def is_revealed(self, row: int, col: int) -> bool:
        """The blank stays hidden until the puzzle is complete."""
        if tile_at(self.state.grid, row, col) is None:
            return False
        return not self._is_blank(row, col) or self.state.complete

    # -- actions --------------------------------------------------------------

    def click(self, row: int, col: int) -> bool:
        """Slide the tile at ``(row, col)``.

        Returns True if the tile moved.
        """
        if not self.is_slideable(row, col):
            return False

        grid = slide(self.state.grid, row, col)
        if grid == self.state.grid:
            return False

        self.state = self.state.advance(grid)
        if self.state.complete:
            _LOGGER.info("Puzzle solved in %d moves", self.state.moves)
        return True

    def reshuffle(self) -> None:
        self.state = GameState.start(
            GameGenerator.generate(self.rows, self.cols, self._rng)
        )

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return self.state.grid

    @property
    def is_won(self) -> bool:
        return self.state.complete

    # -- helpers --------------------------------------------------------------

    def _is_blank(self, row: int, col: int) -> bool:
        return self.state.grid[row][col] == blank_id(self.rows, self.cols)
