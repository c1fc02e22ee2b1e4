"""snake_cube.core"""

from .cube import Cube
from .geometry import Direction, Vec3
from .solver import search, solve
from .validator import are_moves_valid

__all__ = ["Cube", "Direction", "Vec3", "are_moves_valid", "search", "solve"]
