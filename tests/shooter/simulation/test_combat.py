"""Unit tests for CollisionEngine."""

from __future__ import annotations

import pytest

from shooter.comms.event_bus import EventBus
from shooter.simulation.combat import CollisionEngine, CollisionReport
from shooter.simulation.entities import (
    Bullet,
    ChaserEnemy,
    Origin,
    Player,
    ShooterEnemy,
)
from shooter.simulation.geometry import Direction, Position

pytestmark = pytest.mark.unit


def _player_bullet(x: int, y: int, direction: Direction = Direction.RIGHT) -> Bullet:
    return Bullet(Position(x, y), direction.vector, Origin.PLAYER)


def _enemy_bullet(x: int, y: int, direction: Direction = Direction.DOWN) -> Bullet:
    return Bullet(Position(x, y), direction.vector, Origin.ENEMY)


def _shooter(x: int, y: int) -> ShooterEnemy:
    return ShooterEnemy(Position(x, y), last_shot=0)


def _chaser(x: int, y: int) -> ChaserEnemy:
    return ChaserEnemy(Position(x, y), speed=5)


# --------------------------------------------------------------------------
# Wall collisions
# --------------------------------------------------------------------------

class TestWallCollisions:
    def test_bullet_in_wall_removed(self):
        engine = CollisionEngine()
        bullets = [_player_bullet(0, 4), _enemy_bullet(6, 4), _enemy_bullet(8, 8)]
        removed = engine.check_wall_collisions(
            bullets, frozenset({Position(0, 4), Position(8, 8)})
        )
        assert removed == 2
        assert [b.coordinates() for b in bullets] == [Position(6, 4)]

    def test_stacked_bullets_all_removed(self):
        engine = CollisionEngine()
        bullets = [_player_bullet(0, 4), _enemy_bullet(0, 4)]
        engine.check_wall_collisions(bullets, frozenset({Position(0, 4)}))
        assert bullets == []


# --------------------------------------------------------------------------
# Enemy collisions
# --------------------------------------------------------------------------

class TestEnemyCollisions:
    def test_player_bullet_kills_shooter(self):
        engine = CollisionEngine()
        bullets = [_player_bullet(6, 4)]
        shooters = [_shooter(6, 4), _shooter(10, 4)]
        chasers: list[ChaserEnemy] = []
        kills = engine.check_enemy_collisions(bullets, shooters, chasers)
        assert kills == 1
        assert bullets == []
        assert [s.coordinates() for s in shooters] == [Position(10, 4)]

    def test_all_coincident_enemies_removed(self):
        engine = CollisionEngine()
        bullets = [_player_bullet(6, 4)]
        shooters = [_shooter(6, 4), _shooter(6, 4)]
        chasers = [_chaser(6, 4), _chaser(2, 2)]
        kills = engine.check_enemy_collisions(bullets, shooters, chasers)
        assert kills == 3
        assert bullets == []
        assert shooters == []
        assert [c.coordinates() for c in chasers] == [Position(2, 2)]

    def test_enemy_bullet_does_not_kill_enemies(self):
        engine = CollisionEngine()
        bullets = [_enemy_bullet(6, 4)]
        shooters = [_shooter(6, 4)]
        chasers = [_chaser(6, 4)]
        kills = engine.check_enemy_collisions(bullets, shooters, chasers)
        assert kills == 0
        assert len(bullets) == 1
        assert len(shooters) == 1
        assert len(chasers) == 1

    def test_missed_bullet_survives(self):
        engine = CollisionEngine()
        bullets = [_player_bullet(6, 4)]
        shooters = [_shooter(8, 4)]
        engine.check_enemy_collisions(bullets, shooters, [])
        assert len(bullets) == 1
        assert len(shooters) == 1

    def test_second_bullet_on_same_cell_survives(self):
        engine = CollisionEngine()
        bullets = [_player_bullet(6, 4), _player_bullet(6, 4, Direction.UP)]
        shooters = [_shooter(6, 4)]
        kills = engine.check_enemy_collisions(bullets, shooters, [])
        assert kills == 1
        assert len(bullets) == 1
        assert bullets[0].vector == Direction.UP.vector

    def test_eliminations_published(self):
        bus = EventBus()
        q = bus.subscribe("enemy_eliminated")
        engine = CollisionEngine(bus)
        engine.check_enemy_collisions(
            [_player_bullet(6, 4)], [_shooter(6, 4)], [_chaser(6, 4)]
        )
        events = [q.get_nowait(), q.get_nowait()]
        assert q.empty()
        assert {e["data"]["enemy_type"] for e in events} == {"shooter", "chaser"}
        assert events[0]["data"]["position"] == {"x": 6, "y": 4}


# --------------------------------------------------------------------------
# Player hits
# --------------------------------------------------------------------------

class TestPlayerHit:
    def test_enemy_bullet_on_player(self):
        engine = CollisionEngine()
        assert engine.check_player_hit(Player(Position(4, 4)), [_enemy_bullet(4, 4)])

    def test_own_bullet_on_player_is_lethal(self):
        # Self-hits count: the check does not look at the bullet's origin.
        engine = CollisionEngine()
        assert engine.check_player_hit(Player(Position(4, 4)), [_player_bullet(4, 4)])

    def test_no_hit(self):
        engine = CollisionEngine()
        assert not engine.check_player_hit(Player(Position(4, 4)), [_enemy_bullet(4, 5)])

    def test_contact_with_either_species(self):
        engine = CollisionEngine()
        player = Player(Position(4, 4))
        assert engine.check_contact(player, [_shooter(4, 4)], [])
        assert engine.check_contact(player, [], [_chaser(4, 4)])
        assert not engine.check_contact(player, [_shooter(6, 4)], [_chaser(4, 5)])


class TestResolveCollisions:
    def test_wall_pass_runs_before_enemy_pass(self):
        # A shooter sitting inside a wall cannot be killed: the bullet is
        # gone before enemy hits are checked.
        engine = CollisionEngine()
        bullets = [_player_bullet(0, 4)]
        shooters = [_shooter(0, 4)]
        report = engine.resolve_collisions(
            bullets, shooters, [], Player(Position(4, 4)), frozenset({Position(0, 4)})
        )
        assert report == CollisionReport(kills=0, player_hit=False)
        assert len(shooters) == 1

    def test_consumed_bullet_cannot_hit_player(self):
        engine = CollisionEngine()
        bullets = [_player_bullet(4, 4)]
        report = engine.resolve_collisions(
            bullets, [_shooter(4, 4)], [], Player(Position(4, 4)), frozenset()
        )
        assert report.kills == 1
        assert report.player_hit is False

    def test_player_hit_reported(self):
        engine = CollisionEngine()
        report = engine.resolve_collisions(
            [_enemy_bullet(4, 4)], [], [], Player(Position(4, 4)), frozenset()
        )
        assert report.player_hit is True
