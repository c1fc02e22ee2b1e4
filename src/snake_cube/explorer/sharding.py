from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable

from snake_cube.config import ASSUMED_PARALLELISM, PROGRESS_EVERY

from .enumerator import EXPECTED_SUM, look_for_solvables, write_line

logger = logging.getLogger(__name__)


def available_parallelism() -> int:
    """Number of usable CPUs, or ASSUMED_PARALLELISM if the host won't say."""
    query = getattr(os, "process_cpu_count", os.cpu_count)
    n = query()
    if not n:
        logger.warning("couldn't figure out parallelism, assuming %d", ASSUMED_PARALLELISM)
        return ASSUMED_PARALLELISM
    logger.info("parallelism: %d", n)
    return n


def shard_indices(worker: int, workers: int, count: int) -> list[int]:
    """Global positions below `count` that `worker` visits."""
    if workers < 1:
        raise ValueError("workers must be >= 1")
    if not (0 <= worker < workers):
        raise ValueError("worker must be in [0..workers)")
    return list(range(worker, count, workers))


def run_workers(
    n_threads: int | None = None,
    *,
    emit: Callable[[str], object] = write_line,
    limit: int | None = None,
    expected_sum: int = EXPECTED_SUM,
    progress_every: int = PROGRESS_EVERY,
) -> list[int]:
    """Run one sharded enumeration loop per thread and wait for all of them.

    Worker k starts at position k and strides by n_threads. Workers share
    nothing. A worker that raises is logged and stops;
    the others continue. Returns the ids of failed workers.
    """
    if n_threads is None:
        n_threads = available_parallelism()
    if n_threads < 1:
        raise ValueError("n_threads must be >= 1")

    # One slot per worker; each thread writes only its own.
    ok: list[bool] = [True] * n_threads

    def worker(k: int) -> None:
        try:
            found = look_for_solvables(
                k,
                n_threads,
                emit=emit,
                limit=limit,
                expected_sum=expected_sum,
                progress_every=progress_every,
            )
        except Exception:
            logger.exception("worker %d stopped", k)
            ok[k] = False
            return
        logger.info("worker %d finished, %d solvable", k, found)

    threads = [threading.Thread(target=worker, args=(k,), name=f"snake-worker-{k}") for k in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return [k for k, good in enumerate(ok) if not good]
