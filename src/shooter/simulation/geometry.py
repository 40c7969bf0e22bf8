"""Grid coordinates and the direction table.

Terminal cells are roughly twice as tall as they are wide, so one
horizontal step covers two columns while a vertical step covers one row.
Every "one step" in the game (player movement, bullets, enemy wander and
return fire, chaser pursuit) is read from ``Direction.vector`` so the
asymmetry lives in exactly one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

HORIZONTAL_STEP = 2
VERTICAL_STEP = 1


@dataclass(frozen=True)
class Vector:
    """An integer displacement on the grid."""

    dx: int
    dy: int


@dataclass(frozen=True)
class Position:
    """An integer grid cell.  Hashable, so it can live in occupancy sets."""

    x: int
    y: int

    def offset(self, vector: Vector) -> Position:
        return Position(self.x + vector.dx, self.y + vector.dy)

    def shifted(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vector(self) -> Vector:
        return DIRECTION_VECTORS[self]


DIRECTION_VECTORS: dict[Direction, Vector] = {
    Direction.UP: Vector(0, -VERTICAL_STEP),
    Direction.DOWN: Vector(0, VERTICAL_STEP),
    Direction.LEFT: Vector(-HORIZONTAL_STEP, 0),
    Direction.RIGHT: Vector(HORIZONTAL_STEP, 0),
}

# Stable order for random picks: index i of a uniform draw maps to DIRECTIONS[i]
DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


def sign(n: int) -> int:
    return (n > 0) - (n < 0)
