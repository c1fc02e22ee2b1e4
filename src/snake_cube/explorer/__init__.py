"""snake_cube.explorer"""

from .enumerator import iter_lengths, look_for_solvables, next_lengths, render
from .sharding import available_parallelism, run_workers
from .survey import survey

__all__ = [
    "iter_lengths",
    "look_for_solvables",
    "next_lengths",
    "render",
    "available_parallelism",
    "run_workers",
    "survey",
]
