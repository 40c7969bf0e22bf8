"""Entity model — walls, bullets, the player and both enemy species.

Every kind carries a grid ``position`` and knows how to report where it is
and where a step would take it.  None of them check collisions; deciding
whether a move is allowed or what a bullet hit is the job of the engine
and ``CollisionEngine``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

from .geometry import Position, Vector

if TYPE_CHECKING:
    from random import Random


class Color(Enum):
    """Rendering categories; the terminal layer maps them to real colors."""

    WHITE = "white"
    GREEN = "green"
    RED = "red"
    BLUE = "blue"
    MAGENTA = "magenta"


class Origin(Enum):
    PLAYER = "player"
    ENEMY = "enemy"


@dataclass(frozen=True)
class Drawable:
    """Read-only snapshot of one thing the renderer should draw."""

    position: Position
    char: str
    color: Color

    def to_dict(self) -> dict:
        return {
            "x": self.position.x,
            "y": self.position.y,
            "char": self.char,
            "color": self.color.value,
        }


class _Located:
    """Position queries shared by every entity kind."""

    position: Position

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def coordinates(self) -> Position:
        return self.position

    def desired_coordinates(self, dx: int, dy: int) -> Position:
        """Where a (dx, dy) step would land, without moving."""
        return self.position.shifted(dx, dy)


class _Movable(_Located):
    def move(self, dx: int, dy: int) -> None:
        self.position = self.position.shifted(dx, dy)


@dataclass(frozen=True)
class Wall(_Located):
    position: Position

    char = "#"
    color = Color.WHITE

    def drawable(self) -> Drawable:
        return Drawable(self.position, self.char, self.color)


@dataclass
class Bullet(_Movable):
    """A projectile.  Its vector and origin are fixed when it is fired."""

    position: Position
    vector: Vector
    origin: Origin

    char = "*"

    def is_player(self) -> bool:
        return self.origin is Origin.PLAYER

    @property
    def color(self) -> Color:
        return Color.GREEN if self.is_player() else Color.RED

    def advance(self) -> None:
        self.move(self.vector.dx, self.vector.dy)

    def drawable(self) -> Drawable:
        return Drawable(self.position, self.char, self.color)


@dataclass
class Player(_Movable):
    position: Position

    char = "@"
    color = Color.BLUE

    def drawable(self) -> Drawable:
        return Drawable(self.position, self.char, self.color)


@dataclass
class ShooterEnemy(_Movable):
    """Wanders slowly and fires along rows and columns at the player.

    ``tick`` is the enemy's age in ticks; ``last_shot`` counts ticks since
    it last fired and starts at a random value so a fresh batch of
    shooters does not fire in lockstep.
    """

    position: Position
    last_shot: int
    tick: int = 0

    char = "&"
    color = Color.RED

    @classmethod
    def spawn(cls, position: Position, rng: Random, reload_max: int = 10) -> ShooterEnemy:
        return cls(position=position, last_shot=rng.randrange(reload_max))

    def tick_me(self) -> None:
        self.tick += 1
        self.last_shot += 1

    def reload(self, rng: Random, reload_max: int = 10) -> None:
        self.last_shot = rng.randrange(reload_max)

    def drawable(self) -> Drawable:
        return Drawable(self.position, self.char, self.color)


@dataclass
class ChaserEnemy(_Movable):
    """Steps toward the player once every ``speed`` ticks."""

    position: Position
    speed: int
    tick: int = 0

    char = "%"
    color = Color.MAGENTA

    def __post_init__(self) -> None:
        if self.speed <= 0:
            raise ValueError(f"Chaser speed must be positive, got {self.speed}")

    @classmethod
    def spawn(cls, position: Position, rng: Random,
              speed_min: int = 5, speed_max: int = 13) -> ChaserEnemy:
        return cls(position=position, speed=rng.randrange(speed_min, speed_max))

    def tick_me(self) -> None:
        self.tick += 1

    def drawable(self) -> Drawable:
        return Drawable(self.position, self.char, self.color)


Enemy = Union[ShooterEnemy, ChaserEnemy]
Entity = Union[Wall, Bullet, Player, ShooterEnemy, ChaserEnemy]
