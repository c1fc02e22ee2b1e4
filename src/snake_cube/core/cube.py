from __future__ import annotations

from dataclasses import dataclass

from snake_cube.config import CUBE_SIZE

from .geometry import ORIGIN, Direction, Vec3


@dataclass(slots=True)
class Cube:
    """Single-use occupancy grid over [0, SIZE)^3 plus the walker position.

    Cells are stored flat, indexed as z * SIZE * SIZE + y * SIZE + x.
    A visited cell is never cleared; make a new Cube for every walk.
    """

    SIZE = CUBE_SIZE

    cells: list[bool]
    pos: Vec3

    def __init__(self, pos: Vec3 = ORIGIN):
        if not self.is_inside(pos):
            raise ValueError(f"start position outside cube: {pos}")
        self.cells = [False] * (self.SIZE**3)
        self.pos = pos

    def _index(self, v: Vec3) -> int:
        if not self.is_inside(v):
            raise AssertionError(f"coordinate outside cube: {v}")
        return self._unchecked_index(v)

    def _unchecked_index(self, v: Vec3) -> int:
        n = self.SIZE
        return v.z * n * n + v.y * n + v.x

    def is_inside(self, v: Vec3) -> bool:
        n = self.SIZE
        return 0 <= v.x < n and 0 <= v.y < n and 0 <= v.z < n

    def get(self, v: Vec3) -> bool:
        return self.cells[self._index(v)]

    def set(self, v: Vec3, value: bool) -> None:
        self.cells[self._index(v)] = value

    def visited_count(self) -> int:
        return sum(self.cells)

    def try_move_once(self, direction: Direction) -> bool:
        """Step one cell from `pos` towards `direction`.

        On success the cell being left is marked visited and `pos` advances.
        On failure (outside the cube or already visited) nothing changes.
        """
        next_pos = self.pos + direction.to_vec3()
        if next_pos == self.pos:
            raise AssertionError(f"zero-length displacement for {direction}")

        if self.is_inside(next_pos) and not self.cells[self._unchecked_index(next_pos)]:
            self.cells[self._unchecked_index(self.pos)] = True
            self.pos = next_pos
            return True
        return False
