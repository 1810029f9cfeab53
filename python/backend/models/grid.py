"""Grid model for the sliding puzzle.

A grid is a tuple of row tuples holding tile IDs ``0 .. rows*cols-1``.  The
highest ID is the blank marker; a grid is solved when every tile ID equals
its row-major index.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

Grid = tuple[tuple[int, ...], ...]


class Direction(StrEnum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def offset(self) -> tuple[int, int]:
        """``(row, col)`` delta pointing at the neighbouring cell."""
        return _OFFSETS[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}

# Neighbours are always scanned in this order.
SCAN_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)


# -- construction helpers -----------------------------------------------------


def blank_id(rows: int, cols: int) -> int:
    return rows * cols - 1


def from_flat(rows: int, cols: int, ids: Sequence[int]) -> Grid:
    """Reshape a flat row-major ID list into a grid.

    Example::

        from_flat(2, 3, [0, 1, 2, 3, 5, 4])
    """
    if len(ids) != rows * cols:
        raise ValueError(
            f"Expected {rows * cols} tiles for a {rows}×{cols} grid, "
            f"got {len(ids)}."
        )
    return tuple(tuple(ids[r * cols : (r + 1) * cols]) for r in range(rows))


def solved(rows: int, cols: int) -> Grid:
    """Return the goal grid (tile IDs ascending, blank bottom-right)."""
    return from_flat(rows, cols, range(rows * cols))


def freeze(grid: Sequence[Sequence[int]]) -> Grid:
    return tuple(tuple(row) for row in grid)


# -- queries ------------------------------------------------------------------


def dimensions(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(grid)
    return rows, (len(grid[0]) if rows else 0)


def flatten(grid: Sequence[Sequence[int]]) -> list[int]:
    return [tile for row in grid for tile in row]


def tile_at(grid: Sequence[Sequence[int]], row: int, col: int) -> int | None:
    """Return the tile at ``(row, col)``, or ``None`` outside the grid."""
    rows, cols = dimensions(grid)
    if not (0 <= row < rows and 0 <= col < cols):
        return None
    return grid[row][col]


def find_blank(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows, cols = dimensions(grid)
    blank = blank_id(rows, cols)
    for r, row in enumerate(grid):
        for c, tile in enumerate(row):
            if tile == blank:
                return r, c
    raise ValueError(f"Grid has no blank tile ({blank}).")


def home_position(tile_id: int, cols: int) -> tuple[int, int]:
    """Cell a tile occupies in the solved grid.

    Renderers also use it as the crop offset of the tile's image slice.
    """
    return divmod(tile_id, cols)
