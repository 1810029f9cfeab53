"""Generates shuffled, solvable sliding puzzle grids."""

from __future__ import annotations

import logging
import random

from backend.engine.gamerules import Rules
from backend.models.grid import Grid, blank_id, from_flat, solved

_LOGGER = logging.getLogger(__name__)

# Roughly half of all shuffles are accepted, so this is never reached in
# practice.
MAX_SHUFFLE_ATTEMPTS = 10_000

# With fewer than three movable tiles every even permutation is the
# ordered one.
_MIN_SHUFFLABLE_TILES = 4


class GameGenerator:
    """Creates puzzles by rejection-sampling random permutations."""

    @staticmethod
    def shuffle(ids: list[int], rng: random.Random | None = None) -> None:
        """Fisher–Yates shuffle *ids* in-place."""
        rng = rng or random
        for i in range(len(ids) - 1, 0, -1):
            j = rng.randint(0, i)
            ids[i], ids[j] = ids[j], ids[i]

    @staticmethod
    def generate(
        rows: int,
        cols: int,
        rng: random.Random | None = None,
    ) -> Grid:
        """Return a random *solvable*, not yet solved grid.

        Only the non-blank tiles are shuffled; the blank always ends up in
        the bottom-right cell.  A 1×1 grid is returned solved since it has
        nothing to shuffle.

        Solvability is judged by inversion parity alone.  On a single-row or
        single-column strip (e.g. ``generate(1, 5)``) tiles can never pass
        each other, so only the ordered arrangement is reachable there even
        though the returned grid passes the parity check.
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}×{cols}.")

        total = rows * cols
        if total == 1:
            return solved(rows, cols)
        if total < _MIN_SHUFFLABLE_TILES:
            raise ValueError(
                f"A {rows}×{cols} grid has no shuffled solvable arrangement."
            )

        ids = list(range(total - 1))
        for attempt in range(1, MAX_SHUFFLE_ATTEMPTS + 1):
            GameGenerator.shuffle(ids, rng)
            if Rules.is_solvable(ids) and not Rules.is_ordered(ids):
                _LOGGER.debug(
                    "Generated %d×%d grid after %d attempt(s)", rows, cols, attempt
                )
                return from_flat(rows, cols, [*ids, blank_id(rows, cols)])

        raise RuntimeError(
            f"No solvable {rows}×{cols} shuffle found in "
            f"{MAX_SHUFFLE_ATTEMPTS} attempts."
        )
