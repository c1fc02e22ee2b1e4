from __future__ import annotations

from collections.abc import Sequence

from .cube import Cube
from .geometry import Direction


def are_moves_valid(lengths: Sequence[int], moves: Sequence[Direction]) -> bool:
    """Replay `moves` against a fresh cube, starting at the origin.

    Only the first len(moves) entries of `lengths` are used, so a prefix of a
    full move sequence can be checked. Stops at the first rejected step.
    Non-mutating with respect to both arguments.
    """
    if len(moves) > len(lengths):
        raise ValueError("more moves than segments")

    cube = Cube()
    cube.set(cube.pos, True)

    for direction, length in zip(moves, lengths):
        for _ in range(length):
            if not cube.try_move_once(direction):
                return False
    return True
