"""Snake cube puzzle solver and solvable-sequence explorer."""

from .core.cube import Cube
from .core.geometry import Direction, Vec3
from .core.solver import search, solve
from .core.validator import are_moves_valid
from .explorer.enumerator import look_for_solvables
from .explorer.sharding import run_workers
from .explorer.survey import survey

__all__ = [
    "Cube",
    "Direction",
    "Vec3",
    "are_moves_valid",
    "search",
    "solve",
    "look_for_solvables",
    "run_workers",
    "survey",
]
