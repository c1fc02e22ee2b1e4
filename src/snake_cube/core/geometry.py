from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Vec3:
    x: int
    y: int
    z: int

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, k: int) -> Vec3:
        return Vec3(self.x * k, self.y * k, self.z * k)


ORIGIN = Vec3(0, 0, 0)


class Direction(Enum):
    """Axis-aligned step direction.

    Declaration order is the canonical order used for backtracking try-order:
    RIGHT, LEFT, UP, DOWN, FORWARD, BACKWARD.
    """

    RIGHT = (1, 0, 0)
    LEFT = (-1, 0, 0)
    UP = (0, 1, 0)
    DOWN = (0, -1, 0)
    FORWARD = (0, 0, -1)
    BACKWARD = (0, 0, 1)

    @classmethod
    def first(cls) -> Direction:
        return _ORDER[0]

    def next(self) -> Direction | None:
        """Successor in canonical order, or None after the last direction."""
        i = _RANK[self] + 1
        return _ORDER[i] if i < len(_ORDER) else None

    def invert(self) -> Direction:
        x, y, z = self.value
        return Direction((-x, -y, -z))

    def to_vec3(self) -> Vec3:
        return Vec3(*self.value)

    def possible_turns(self) -> tuple[Direction, ...]:
        """The four directions perpendicular to this one, in canonical order."""
        inv = self.invert()
        return tuple(d for d in _ORDER if d is not self and d is not inv)

    def next_turn(self, previous: Direction) -> Direction | None:
        """Next direction after this one that is perpendicular to `previous`."""
        d = self.next()
        while d is not None and (d is previous or d is previous.invert()):
            d = d.next()
        return d


_ORDER: tuple[Direction, ...] = tuple(Direction)
_RANK: dict[Direction, int] = {d: i for i, d in enumerate(_ORDER)}
