"""EnemySpawner — wave-based enemy introduction.

Every ``interval`` ticks a wave arrives.  Wave *k* (tick ``30 * k`` with
the default interval) brings exactly *k* enemies; how many of them are
chasers is drawn uniformly from ``0..k`` and the rest are shooters, so the
mix varies while the total grows steadily.  Spawn cells are picked at
random on the even horizontal grid without checking walls or other
entities; overlapping spawns are part of the game.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from .entities import ChaserEnemy, ShooterEnemy
from .geometry import HORIZONTAL_STEP, Position
from .maze import right_border

if TYPE_CHECKING:
    from random import Random


class EnemySpawner:
    """Creates shooter and chaser batches on wave ticks."""

    def __init__(self, width: int, height: int, rng: Random, interval: int = 30,
                 reload_max: int = 10, chaser_speed_min: int = 5,
                 chaser_speed_max: int = 13) -> None:
        if interval <= 0:
            raise ValueError(f"Spawn interval must be positive, got {interval}")
        if chaser_speed_min <= 0 or chaser_speed_min >= chaser_speed_max:
            raise ValueError(
                f"Invalid chaser speed range [{chaser_speed_min}, {chaser_speed_max})"
            )
        self.width = width
        self.height = height
        self.interval = interval
        self._rng = rng
        self._reload_max = reload_max
        self._speed_range = (chaser_speed_min, chaser_speed_max)

    def random_position(self) -> Position:
        """A random in-bounds cell on the even horizontal grid."""
        x = self._rng.randrange((self.width - 2) // HORIZONTAL_STEP + 1) * HORIZONTAL_STEP
        y = self._rng.randrange(self.height - 3) + 1
        return Position(x, y)

    def player_position(self) -> Position:
        """A random cell for the player, clear of the border columns.

        Enemy spawns may land on the left or right border; the player must
        not, or its first sideways step would leave the arena.
        """
        columns = max(1, (right_border(self.width) - 2) // HORIZONTAL_STEP)
        x = (self._rng.randrange(columns) + 1) * HORIZONTAL_STEP
        y = self._rng.randrange(self.height - 3) + 1
        return Position(x, y)

    def spawn(self, tick: int) -> tuple[list[ShooterEnemy], list[ChaserEnemy]]:
        """Return the shooters and chasers arriving on *tick*."""
        if tick % self.interval != 0:
            return [], []
        wave = tick // self.interval
        chaser_count = self._rng.randrange(wave + 1)
        shooter_count = wave - chaser_count

        shooters = [
            ShooterEnemy.spawn(self.random_position(), self._rng, self._reload_max)
            for _ in range(shooter_count)
        ]
        chasers = [
            ChaserEnemy.spawn(self.random_position(), self._rng, *self._speed_range)
            for _ in range(chaser_count)
        ]
        if wave:
            logger.debug(f"Wave {wave}: {shooter_count} shooters, {chaser_count} chasers")
        return shooters, chasers
