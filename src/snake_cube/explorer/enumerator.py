from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterator, Sequence

from snake_cube.config import GLYPHS, PROGRESS_EVERY
from snake_cube.core.cube import Cube
from snake_cube.core.solver import solve

logger = logging.getLogger(__name__)

EXPECTED_SUM: int = Cube.SIZE**3


def next_lengths(lengths: list[int]) -> list[int]:
    """Advance the odometer by one, in place.

    Position 0 is the least significant digit; digits run 1 -> 2 -> 3 and
    3 wraps to 1 with a carry. A carry off the end appends a new digit 1.
    """
    for i, digit in enumerate(lengths):
        if digit == 1:
            lengths[i] = 2
            return lengths
        if digit == 2:
            lengths[i] = 3
            return lengths
        if digit != 3:
            raise AssertionError(f"odometer digit out of range at {i}: {digit}")
        lengths[i] = 1
    lengths.append(1)
    return lengths


def advance(lengths: list[int], steps: int) -> list[int]:
    if steps < 0:
        raise ValueError("steps must be >= 0")
    for _ in range(steps):
        next_lengths(lengths)
    return lengths


def checksum(lengths: Sequence[int]) -> int:
    """Cells covered by the snake: the start cell plus one per step."""
    return 1 + sum(lengths)


def render(lengths: Sequence[int]) -> str:
    try:
        return "|" + "".join(GLYPHS[n] for n in lengths) + "|"
    except KeyError as e:
        raise AssertionError(f"no glyph for segment length {e.args[0]}") from e


def write_line(line: str) -> None:
    """Write one result line with a single write call so threads cannot split it."""
    sys.stdout.write(line + "\n")


def iter_lengths(start: int = 0, stride: int = 1) -> Iterator[tuple[int, tuple[int, ...]]]:
    """Yield (global_index, lengths) for positions start, start + stride, ... forever."""
    if start < 0:
        raise ValueError("start must be >= 0")
    if stride < 1:
        raise ValueError("stride must be >= 1")

    lengths = advance([], start)
    index = start
    while True:
        yield index, tuple(lengths)
        advance(lengths, stride)
        index += stride


def look_for_solvables(
    start: int,
    stride: int,
    *,
    emit: Callable[[str], object] = write_line,
    limit: int | None = None,
    expected_sum: int = EXPECTED_SUM,
    progress_every: int = PROGRESS_EVERY,
) -> int:
    """Worker loop: test every candidate of one shard and emit the solvable ones.

    Only candidates whose checksum equals `expected_sum` reach the solver.
    `limit` bounds the number of candidates visited; None runs forever.
    Returns the number of solvable candidates emitted.
    """
    if limit is not None and limit < 0:
        raise ValueError("limit must be >= 0 or None")
    if progress_every < 1:
        raise ValueError("progress_every must be >= 1")

    found = 0
    for i, (_, lengths) in enumerate(iter_lengths(start, stride), start=1):
        if limit is not None and i > limit:
            break
        if i % progress_every == 0:
            logger.info("(%d) i = %d, len = %d", start, i, len(lengths))

        if checksum(lengths) != expected_sum:
            continue
        solution = solve(lengths)
        if solution is not None:
            logger.debug("(%d) solvable %s via %s", start, lengths, [d.name for d in solution])
            emit(render(lengths))
            found += 1
    return found
