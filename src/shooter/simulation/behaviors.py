"""EnemyBehaviors -- per-species enemy AI.

Architecture
------------
EnemyBehaviors runs once per tick, after bullets have been resolved, and
decides what each enemy does:

  - Shooters: mostly stationary.  Every ``wander_interval`` ticks they take
    one random step (walls block it, nothing else does).  Whenever they
    share a row or column with the player and have not fired for more than
    ``shoot_cooldown`` ticks, they fire straight at the player.  The fire
    check runs both before and after the step, so a shooter that wanders
    into line can fire on the same tick; the second check is skipped once
    the first has fired, so a shooter never fires twice in one tick.
  - Chasers: never fire.  Every ``speed`` ticks they step diagonally or
    straight toward the player.  Chasers ignore walls entirely and can
    cut through the interior of the maze; shooters cannot.

New bullets are returned to the caller rather than appended anywhere, so
the engine stays the only owner of its bullet list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .entities import Bullet, Origin
from .geometry import DIRECTIONS, HORIZONTAL_STEP, Direction, Position, sign

if TYPE_CHECKING:
    from random import Random

    from .entities import ChaserEnemy, Player, ShooterEnemy


class EnemyBehaviors:
    """Shooter and chaser AI. Called each tick to decide enemy actions."""

    def __init__(self, rng: Random, shoot_cooldown: int = 20,
                 wander_interval: int = 7, reload_max: int = 10) -> None:
        self._rng = rng
        self.shoot_cooldown = shoot_cooldown
        self.wander_interval = wander_interval
        self.reload_max = reload_max

    def tick(self, shooters: list[ShooterEnemy], chasers: list[ChaserEnemy],
             player: Player, cwalls: frozenset[Position]) -> list[Bullet]:
        """Run every shooter, then every chaser.  Returns bullets fired."""
        fired: list[Bullet] = []
        for shooter in shooters:
            fired.extend(self.shooter_tick(shooter, player, cwalls))
        for chaser in chasers:
            self.chaser_tick(chaser, player)
        return fired

    # -- Shooters -----------------------------------------------------------

    def aim(self, shooter: ShooterEnemy, player: Player) -> Direction | None:
        """Direction to fire at *player*, or None if not lined up."""
        if shooter.x == player.x:
            return Direction.UP if shooter.y > player.y else Direction.DOWN
        if shooter.y == player.y:
            return Direction.LEFT if shooter.x > player.x else Direction.RIGHT
        return None

    def try_to_shoot(self, shooter: ShooterEnemy, player: Player) -> Bullet | None:
        if shooter.last_shot <= self.shoot_cooldown:
            return None
        direction = self.aim(shooter, player)
        if direction is None:
            return None
        shooter.reload(self._rng, self.reload_max)
        return Bullet(shooter.coordinates(), direction.vector, Origin.ENEMY)

    def wander(self, shooter: ShooterEnemy, cwalls: frozenset[Position]) -> None:
        vec = DIRECTIONS[self._rng.randrange(len(DIRECTIONS))].vector
        if shooter.desired_coordinates(vec.dx, vec.dy) not in cwalls:
            shooter.move(vec.dx, vec.dy)

    def shooter_tick(self, shooter: ShooterEnemy, player: Player,
                     cwalls: frozenset[Position]) -> list[Bullet]:
        bullet = self.try_to_shoot(shooter, player)
        shooter.tick_me()
        if shooter.tick % self.wander_interval == 0:
            self.wander(shooter, cwalls)
        # One shot per tick, whatever the cooldown and reload settings.
        if bullet is None:
            bullet = self.try_to_shoot(shooter, player)
        return [bullet] if bullet is not None else []

    # -- Chasers ------------------------------------------------------------

    def chaser_tick(self, chaser: ChaserEnemy, player: Player) -> None:
        chaser.tick_me()
        if chaser.tick % chaser.speed != 0:
            return
        sx = sign(player.x - chaser.x)
        sy = sign(player.y - chaser.y)
        chaser.move(sx * HORIZONTAL_STEP, sy)
