"""Order and inversion-parity checks."""

from __future__ import annotations

import pytest

from backend.engine import count_inversions, is_ordered, is_solvable


@pytest.mark.parametrize(
    "ids, expected",
    [
        ([], True),
        ([0], True),
        ([0, 1, 2], True),
        ([0, 2, 1], False),
        ([1, 0, 2], False),
        (list(range(16)), True),
        ([0, 1, 2, 3, 5, 4], False),
    ],
)
def test_is_ordered(ids: list[int], expected: bool) -> None:
    assert is_ordered(ids) is expected


def test_is_ordered_accepts_tuples() -> None:
    assert is_ordered((0, 1, 2, 3))


@pytest.mark.parametrize(
    "ids, inversions",
    [
        ([0, 1, 2, 3], 0),
        ([1, 0, 2, 3], 1),
        ([2, 1, 0, 3], 3),
        ([3, 2, 1, 0], 6),
    ],
)
def test_count_inversions(ids: list[int], inversions: int) -> None:
    assert count_inversions(ids) == inversions


@pytest.mark.parametrize(
    "ids, expected",
    [
        ([0, 1, 2, 3], True),
        ([1, 0, 2, 3], False),
        # (2,1), (2,0), (1,0): three inversions, odd parity
        ([2, 1, 0, 3], False),
        ([1, 2, 0, 3], True),
        ([], True),
    ],
)
def test_is_solvable_parity(ids: list[int], expected: bool) -> None:
    assert is_solvable(ids) is expected


def test_trailing_blank_does_not_change_parity() -> None:
    ids = [4, 0, 3, 1, 2]
    assert is_solvable(ids) == is_solvable([*ids, 5])
