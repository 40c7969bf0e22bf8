"""CollisionEngine — bullet and contact resolution.

Architecture
------------
The engine calls into CollisionEngine twice per tick:

  1. ``resolve_collisions()`` right after bullets move, running in order:

     a. wall hits: any bullet standing on a wall cell is removed.  Hits
        are decided against the positions as they were before any removal.
     b. enemy hits: every player-origin bullet removes *all* enemies on
        its cell (shooters and chasers alike) and is itself consumed once.
        Enemy-origin bullets pass through other enemies harmlessly.
     c. player hit: a bullet of any origin on the player's cell kills the
        player, including one the player fired itself.

  2. ``check_contact()`` after the enemy AI has moved, to catch enemies
     that stepped onto the player (or the player onto them).

The lists handed in are the engine's own collections and are filtered in
place; nothing here creates entities.

Events are published on the EventBus:
  - ``enemy_eliminated``: one per enemy removed by a player bullet
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from shooter.comms.event_bus import EventBus
    from .entities import Bullet, ChaserEnemy, Enemy, Player, ShooterEnemy
    from .geometry import Position


@dataclass
class CollisionReport:
    """Outcome of the post-movement bullet pass."""

    kills: int = 0
    player_hit: bool = False


class CollisionEngine:
    """Resolves bullet-vs-wall, bullet-vs-enemy and player-death collisions."""

    def __init__(self, event_bus: EventBus | None = None) -> None:
        self._event_bus = event_bus

    def check_wall_collisions(self, bullets: list[Bullet],
                              cwalls: frozenset[Position]) -> int:
        """Drop bullets standing on a wall cell.  Returns how many were dropped."""
        survivors = [b for b in bullets if b.coordinates() not in cwalls]
        removed = len(bullets) - len(survivors)
        bullets[:] = survivors
        return removed

    def check_enemy_collisions(self, bullets: list[Bullet],
                               shooters: list[ShooterEnemy],
                               chasers: list[ChaserEnemy]) -> int:
        """Let player bullets kill enemies.  Returns the number of enemies killed."""
        kills = 0
        survivors: list[Bullet] = []
        for bullet in bullets:
            if not bullet.is_player():
                survivors.append(bullet)
                continue
            cell = bullet.coordinates()
            hit_shooters = [e for e in shooters if e.coordinates() == cell]
            hit_chasers = [e for e in chasers if e.coordinates() == cell]
            if not hit_shooters and not hit_chasers:
                survivors.append(bullet)
                continue
            shooters[:] = [e for e in shooters if e.coordinates() != cell]
            chasers[:] = [e for e in chasers if e.coordinates() != cell]
            killed = ["shooter"] * len(hit_shooters) + ["chaser"] * len(hit_chasers)
            for enemy_type in killed:
                self._publish("enemy_eliminated", {
                    "enemy_type": enemy_type,
                    "position": cell.to_dict(),
                })
            kills += len(killed)
            logger.debug(f"Bullet at ({cell.x}, {cell.y}) killed {len(killed)} enemies")
        bullets[:] = survivors
        return kills

    def check_player_hit(self, player: Player, bullets: list[Bullet]) -> bool:
        """True if any bullet, whoever fired it, is on the player's cell."""
        cell = player.coordinates()
        return any(b.coordinates() == cell for b in bullets)

    def check_contact(self, player: Player, shooters: list[ShooterEnemy],
                      chasers: list[ChaserEnemy]) -> bool:
        """True if any enemy shares the player's cell."""
        enemies: list[Enemy] = [*shooters, *chasers]
        cell = player.coordinates()
        return any(e.coordinates() == cell for e in enemies)

    def resolve_collisions(self, bullets: list[Bullet],
                           shooters: list[ShooterEnemy],
                           chasers: list[ChaserEnemy],
                           player: Player,
                           cwalls: frozenset[Position]) -> CollisionReport:
        """Run the wall, enemy and player bullet checks in that order."""
        self.check_wall_collisions(bullets, cwalls)
        kills = self.check_enemy_collisions(bullets, shooters, chasers)
        return CollisionReport(
            kills=kills,
            player_hit=self.check_player_hit(player, bullets),
        )

    def _publish(self, event_type: str, data: dict) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event_type, data)
