"""Breadth-first search over slides, used to check reachability."""

from __future__ import annotations

from collections import deque

from backend.engine import slide
from backend.models import SCAN_ORDER, Grid, dimensions, find_blank, solved


def neighbours(grid: Grid) -> list[tuple[tuple[int, int], Grid]]:
    """``(clicked cell, resulting grid)`` for every legal slide."""
    rows, cols = dimensions(grid)
    br, bc = find_blank(grid)
    result = []
    for direction in SCAN_ORDER:
        dr, dc = direction.offset
        r, c = br + dr, bc + dc
        if 0 <= r < rows and 0 <= c < cols:
            result.append(((r, c), slide(grid, r, c)))
    return result


def solve_bfs(grid: Grid) -> list[tuple[int, int]] | None:
    """Shortest list of cells to click to solve *grid*, or ``None``."""
    goal = solved(*dimensions(grid))
    parents: dict[Grid, tuple[Grid, tuple[int, int]] | None] = {grid: None}
    queue = deque([grid])

    while queue:
        current = queue.popleft()
        if current == goal:
            clicks: list[tuple[int, int]] = []
            while parents[current] is not None:
                current, cell = parents[current]
                clicks.append(cell)
            return clicks[::-1]
        for cell, nxt in neighbours(current):
            if nxt not in parents:
                parents[nxt] = (current, cell)
                queue.append(nxt)

    return None
