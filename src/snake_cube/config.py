"""Global constants for the snake cube solver.

CUBE_SIZE is the side of the target cube; everything else derives from it.
Function keyword arguments and CLI flags override the rest per call.
"""

from __future__ import annotations

CUBE_SIZE: int = 4

# Reference single-instance input. Its checksum is 27, so it describes a 3-cube snake.
DEFAULT_LENGTHS: tuple[int, ...] = (2, 1, 1, 2, 1, 2, 1, 1, 2, 2, 1, 1, 1, 2, 2, 2, 2)

# Used when the host cannot report its parallelism.
ASSUMED_PARALLELISM: int = 4

PROGRESS_EVERY: int = 10_000_000

GLYPHS: dict[int, str] = {1: " ", 2: ".", 3: ":"}
