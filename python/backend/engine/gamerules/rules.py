"""Order and solvability checks on flattened grids."""

from __future__ import annotations

from collections.abc import Sequence


class Rules:
    """Stateless puzzle rules — all methods are static."""

    @staticmethod
    def is_ordered(ids: Sequence[int]) -> bool:
        """Return True if *ids* counts up by one from its first element.

        A generated grid always starts at 0, so this is also the
        "puzzle complete" check.  Empty and single-tile sequences are
        ordered.
        """
        for i in range(1, len(ids)):
            if ids[i] != ids[i - 1] + 1:
                return False
        return True

    @staticmethod
    def count_inversions(ids: Sequence[int]) -> int:
        """Number of pairs ``i < j`` with ``ids[i] > ids[j]``."""
        inversions = 0
        for i in range(len(ids)):
            for j in range(i + 1, len(ids)):
                if ids[i] > ids[j]:
                    inversions += 1
        return inversions

    @staticmethod
    def is_solvable(ids: Sequence[int]) -> bool:
        """Return True if the permutation has an even number of inversions.

        Only valid for arrangements whose blank sits in the last cell,
        which is where the generator always puts it.
        """
        return Rules.count_inversions(ids) % 2 == 0
