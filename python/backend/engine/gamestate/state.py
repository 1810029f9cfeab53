"""Immutable snapshot of a game in progress."""

from __future__ import annotations

from dataclasses import dataclass, replace

from backend.engine.gamerules import Rules
from backend.models.grid import Grid, flatten


@dataclass(frozen=True)
class GameState:
    """Holds the current grid, completion flag and move counter.

    A new snapshot is built for every change; completion is re-evaluated
    from the whole grid each time.
    """

    grid: Grid
    complete: bool = False
    moves: int = 0

    @classmethod
    def start(cls, grid: Grid) -> GameState:
        return cls(grid=grid, complete=Rules.is_ordered(flatten(grid)))

    def advance(self, grid: Grid) -> GameState:
        """Return the snapshot that follows a move to *grid*."""
        return replace(
            self,
            grid=grid,
            complete=Rules.is_ordered(flatten(grid)),
            moves=self.moves + 1,
        )
