from __future__ import annotations

from collections import Counter

from snake_cube.core.solver import solve

from .enumerator import EXPECTED_SUM, checksum, iter_lengths, render


def survey(steps: int, workers: int = 1, *, expected_sum: int = EXPECTED_SUM) -> dict:
    """Bounded, deterministic run over the first `steps` candidates.

    The candidates are split into `workers` stride shards exactly as the
    threaded search does, but the shards run one after another so the
    result does not depend on scheduling.

    Per-length counters are keyed by segment count.
    """
    if steps < 0:
        raise ValueError("steps must be >= 0")
    if workers < 1:
        raise ValueError("workers must be >= 1")

    candidates: Counter[int] = Counter()
    hits: Counter[int] = Counter()
    solvable_counts: Counter[int] = Counter()
    solvable: list[tuple[int, str]] = []

    for k in range(min(workers, steps)):
        for index, lengths in iter_lengths(k, workers):
            if index >= steps:
                break
            candidates[len(lengths)] += 1
            if checksum(lengths) != expected_sum:
                continue
            hits[len(lengths)] += 1
            if solve(lengths) is not None:
                solvable_counts[len(lengths)] += 1
                solvable.append((index, render(lengths)))

    solvable.sort()
    return {
        "steps": steps,
        "workers": workers,
        "expected_sum": expected_sum,
        "candidates_by_length": dict(sorted(candidates.items())),
        "checksum_hits_by_length": dict(sorted(hits.items())),
        "solvable_by_length": dict(sorted(solvable_counts.items())),
        "solvable": [s for _, s in solvable],
    }
