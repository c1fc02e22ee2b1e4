from __future__ import annotations

import pytest

from snake_cube.config import DEFAULT_LENGTHS
from snake_cube.core.geometry import Direction
from snake_cube.core.validator import are_moves_valid

R, L, U, D, F, B = (
    Direction.RIGHT,
    Direction.LEFT,
    Direction.UP,
    Direction.DOWN,
    Direction.FORWARD,
    Direction.BACKWARD,
)


def test_obviously_valid_prefixes():
    assert are_moves_valid(DEFAULT_LENGTHS, [])
    assert are_moves_valid(DEFAULT_LENGTHS, [B])
    assert are_moves_valid(DEFAULT_LENGTHS, [B, U])
    assert are_moves_valid(DEFAULT_LENGTHS, [B, U, R])


def test_empty_lengths_trivially_valid():
    assert are_moves_valid([], [])


@pytest.mark.parametrize(
    "lengths, moves, expected",
    [
        ([2], [R], True),
        ([3], [R], True),
        ([4], [R], False),
        ([1], [L], False),
        ([1, 1], [R, R], True),
        ([1, 1], [R, L], False),
        ([3, 3, 3], [R, U, L], True),
        ([3, 3, 3, 2], [R, U, L, D], True),
        ([3, 3, 3, 3], [R, U, L, D], False),
    ],
)
def test_concrete_walks(lengths, moves, expected):
    assert are_moves_valid(lengths, moves) is expected


def test_deterministic_and_non_mutating():
    lengths = [2, 1, 3]
    moves = [B, U, R]
    first = are_moves_valid(lengths, moves)
    second = are_moves_valid(lengths, moves)
    assert first == second
    assert lengths == [2, 1, 3]
    assert moves == [B, U, R]


def test_more_moves_than_lengths_rejected():
    with pytest.raises(ValueError):
        are_moves_valid([1], [R, U])
