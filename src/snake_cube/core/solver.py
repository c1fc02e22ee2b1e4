from __future__ import annotations

from collections.abc import Sequence

from .geometry import Direction
from .validator import are_moves_valid


def _first(moves: list[Direction], turns_only: bool) -> Direction:
    d = Direction.first()
    if turns_only and moves:
        prev = moves[-1]
        if d is prev or d is prev.invert():
            d = d.next_turn(prev)  # type: ignore[assignment]
    return d


def advance_attempt(moves: list[Direction], *, turns_only: bool = False) -> bool:
    """Replace the deepest choice in `moves` by its next untried alternative.

    Exhausted levels are popped. Returns False once the whole frontier is
    exhausted (`moves` is then empty).
    """
    while moves:
        last = moves.pop()
        if turns_only and moves:
            nxt = last.next_turn(moves[-1])
        else:
            nxt = last.next()
        if nxt is not None:
            moves.append(nxt)
            return True
    return False


def search(lengths: Sequence[int], *, turns_only: bool = False) -> dict:
    """Depth-first search for a move sequence that packs `lengths` into the cube.

    The frontier is an explicit stack of directions, one per placed segment.
    Each step validates the whole frontier from scratch: a valid complete
    frontier is a solution, a valid partial one is extended with the first
    direction, an invalid one is advanced with `advance_attempt`.

    With `turns_only`, consecutive segments must be perpendicular.

    Returns:
    - lengths: the input, as a tuple
    - solution: list of directions, or None if unsatisfiable
    - validations: number of validator calls
    - max_depth: deepest valid frontier reached
    """
    lengths = tuple(lengths)
    if any(n < 1 for n in lengths):
        raise ValueError("segment lengths must be >= 1")

    moves: list[Direction] = []
    validations = 0
    max_depth = 0
    solution: list[Direction] | None = None

    while True:
        validations += 1
        if are_moves_valid(lengths, moves):
            max_depth = max(max_depth, len(moves))
            if len(moves) == len(lengths):
                solution = moves
                break
            moves.append(_first(moves, turns_only))
        elif not advance_attempt(moves, turns_only=turns_only):
            break

    return {
        "lengths": lengths,
        "solution": solution,
        "validations": validations,
        "max_depth": max_depth,
    }


def solve(lengths: Sequence[int], *, turns_only: bool = False) -> list[Direction] | None:
    """Return a witnessing move sequence for `lengths`, or None if there is none."""
    return search(lengths, turns_only=turns_only)["solution"]
