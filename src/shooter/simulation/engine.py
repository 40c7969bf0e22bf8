"""SimulationEngine — the tick orchestrator for one game run.

Architecture
------------
The engine is the authoritative owner of every entity: the static wall
list, the bullet list, the shooter and chaser lists and the single
player.  It never runs on its own.  The frame loop calls ``step()`` once
per tick and the input layer calls ``execute()`` (or ``move()`` /
``shoot()`` / ``quit()``) once per key press; nothing else mutates state.

Each ``step()`` while running:

  1. rebuild the wall-occupancy set from the wall list
  2. advance every bullet along its vector
  3. CollisionEngine.resolve_collisions(): walls, enemies, player
  4. EnemyBehaviors.tick(): shooters, then chasers
  5. CollisionEngine.check_contact(): enemies touching the player
  6. EnemySpawner.spawn(): wave arrivals
  7. tick += 1

A player death ends the step on the spot and moves the engine to
TERMINATED with a status message; the tick counter is left at the tick
the player died on.  Quitting also terminates, without a score.  What to
do with a terminated game (exit the process, show a menu) is up to the
caller.

Scoring:
  elapsed = tick * tick_duration
  score   = floor(elapsed * time_score + kills * kill_score)

Events published on the EventBus:
  - ``bullet_fired``: player shot or enemy return fire
  - ``player_moved``: a move command that was not blocked
  - ``enemy_spawned``: one per new enemy
  - ``enemy_eliminated``: (from CollisionEngine) one per kill
  - ``game_over``: reason, elapsed time, kills, score
"""

from __future__ import annotations

import math
import random
from enum import Enum
from typing import TYPE_CHECKING

from loguru import logger

from shooter.comms.event_bus import EventBus
from shooter.config import Settings, settings as default_settings

from .behaviors import EnemyBehaviors
from .combat import CollisionEngine
from .commands import HELP_TEXT, INPUT_MAP, Command, parse_command
from .entities import Bullet, Origin, Player
from .geometry import Direction, Position
from .maze import build_walls, wall_cells
from .spawner import EnemySpawner

if TYPE_CHECKING:
    from .entities import ChaserEnemy, Drawable, Entity, ShooterEnemy, Wall

MIN_SIZE = 4

QUIT_MESSAGE = "Bye bye! See ya later!"


class GameState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class SimulationEngine:
    """Drives one run of the game, one tick at a time."""

    def __init__(self, width: int | None = None, height: int | None = None,
                 rng: random.Random | None = None,
                 event_bus: EventBus | None = None,
                 settings: Settings | None = None,
                 player_position: Position | None = None) -> None:
        self._settings = settings if settings is not None else default_settings
        cfg = self._settings
        self.width = cfg.width if width is None else width
        self.height = cfg.height if height is None else height
        if self.width < MIN_SIZE or self.height < MIN_SIZE:
            raise ValueError(
                f"Arena must be at least {MIN_SIZE}x{MIN_SIZE}, "
                f"got {self.width}x{self.height}"
            )

        self._rng = rng if rng is not None else random.Random(cfg.seed)
        self._event_bus = event_bus if event_bus is not None else EventBus()
        self.tick_duration = cfg.tick_duration

        self.collisions = CollisionEngine(self._event_bus)
        self.behaviors = EnemyBehaviors(
            self._rng,
            shoot_cooldown=cfg.shoot_cooldown,
            wander_interval=cfg.wander_interval,
            reload_max=cfg.reload_max,
        )
        self.spawner = EnemySpawner(
            self.width, self.height, self._rng,
            interval=cfg.spawn_interval,
            reload_max=cfg.reload_max,
            chaser_speed_min=cfg.chaser_speed_min,
            chaser_speed_max=cfg.chaser_speed_max,
        )

        self._walls: list[Wall] = build_walls(self.width, self.height)
        self._cwalls: frozenset[Position] = wall_cells(self._walls)
        self._bullets: list[Bullet] = []
        self._shooters: list[ShooterEnemy] = []
        self._chasers: list[ChaserEnemy] = []

        if player_position is None:
            if cfg.random_player_spawn:
                player_position = self.spawner.player_position()
            else:
                player_position = Position(cfg.player_spawn_x, cfg.player_spawn_y)
        self._player = Player(player_position)

        self._tick = 0
        self._kills = 0
        self._state = GameState.RUNNING
        self._status: str | None = None
        self._final_score: int | None = None

        logger.info(
            f"Simulation engine created ({self.width}x{self.height}, "
            f"{len(self._walls)} walls, player at "
            f"({self._player.x}, {self._player.y}))"
        )

    # -- Read access --------------------------------------------------------

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is GameState.RUNNING

    @property
    def tick_count(self) -> int:
        return self._tick

    @property
    def kills(self) -> int:
        return self._kills

    @property
    def player(self) -> Player:
        return self._player

    @property
    def walls(self) -> list[Wall]:
        return list(self._walls)

    @property
    def wall_cells(self) -> frozenset[Position]:
        return self._cwalls

    @property
    def bullets(self) -> list[Bullet]:
        return self._bullets

    @property
    def shooters(self) -> list[ShooterEnemy]:
        return self._shooters

    @property
    def chasers(self) -> list[ChaserEnemy]:
        return self._chasers

    @property
    def elapsed_time(self) -> float:
        return self._tick * self.tick_duration

    @property
    def score(self) -> int:
        """Current score; frozen once the game has ended."""
        if self._final_score is not None:
            return self._final_score
        # Rounded before flooring so 0.05 * 3 * 100 lands on 15, not 14.
        time_points = math.floor(round(self.elapsed_time * self._settings.time_score, 6))
        return time_points + self._kills * self._settings.kill_score

    def entities(self) -> list[Entity]:
        """Every live entity in draw order: walls, bullets, enemies, player."""
        entities: list[Entity] = list(self._walls)
        entities.extend(self._bullets)
        entities.extend(self._shooters)
        entities.extend(self._chasers)
        entities.append(self._player)
        return entities

    def objects(self) -> list[Drawable]:
        """Snapshot of everything to draw.  The player comes last so it draws on top."""
        return [e.drawable() for e in self.entities()]

    def exit_message(self) -> str | None:
        return self._status

    def help_text(self) -> str:
        return HELP_TEXT

    def input_map(self) -> dict[str, Command]:
        return dict(INPUT_MAP)

    def get_game_state(self) -> dict:
        return {
            "state": self._state.value,
            "tick": self._tick,
            "elapsed": round(self.elapsed_time, 2),
            "kills": self._kills,
            "score": self.score,
            "player": self._player.coordinates().to_dict(),
            "bullets": len(self._bullets),
            "shooters": len(self._shooters),
            "chasers": len(self._chasers),
            "message": self._status,
        }

    # -- Tick ---------------------------------------------------------------

    def step(self) -> None:
        """Advance the simulation by one tick.  Does nothing once terminated."""
        if not self.is_running:
            return

        self._cwalls = wall_cells(self._walls)

        for bullet in self._bullets:
            bullet.advance()

        report = self.collisions.resolve_collisions(
            self._bullets, self._shooters, self._chasers, self._player, self._cwalls,
        )
        self._kills += report.kills
        if report.player_hit:
            self._die("shot")
            return

        fired = self.behaviors.tick(self._shooters, self._chasers, self._player, self._cwalls)
        for bullet in fired:
            self._add_bullet(bullet)

        if self.collisions.check_contact(self._player, self._shooters, self._chasers):
            self._die("caught")
            return

        self._spawn()
        self._tick += 1

    def _spawn(self) -> None:
        shooters, chasers = self.spawner.spawn(self._tick)
        self._shooters.extend(shooters)
        self._chasers.extend(chasers)
        for enemy_type, batch in (("shooter", shooters), ("chaser", chasers)):
            for enemy in batch:
                self._event_bus.publish("enemy_spawned", {
                    "enemy_type": enemy_type,
                    "position": enemy.coordinates().to_dict(),
                    "tick": self._tick,
                })

    def _add_bullet(self, bullet: Bullet) -> None:
        self._bullets.append(bullet)
        self._event_bus.publish("bullet_fired", {
            "origin": bullet.origin.value,
            "position": bullet.coordinates().to_dict(),
            "vector": {"dx": bullet.vector.dx, "dy": bullet.vector.dy},
        })

    # -- Commands -----------------------------------------------------------

    def move(self, direction: Direction) -> bool:
        """Step the player unless a wall is in the way.  Returns True if moved."""
        if not self._accepting("move"):
            return False
        vec = direction.vector
        if self._player.desired_coordinates(vec.dx, vec.dy) in self._cwalls:
            return False
        self._player.move(vec.dx, vec.dy)
        self._event_bus.publish("player_moved", {
            "direction": direction.value,
            "position": self._player.coordinates().to_dict(),
        })
        return True

    def shoot(self, direction: Direction) -> Bullet | None:
        """Fire a player bullet from the player's own cell."""
        if not self._accepting("shoot"):
            return None
        bullet = Bullet(self._player.coordinates(), direction.vector, Origin.PLAYER)
        self._add_bullet(bullet)
        return bullet

    def quit(self) -> None:
        if not self._accepting("quit"):
            return
        self._terminate(QUIT_MESSAGE, reason="quit")

    def execute(self, command: Command | str) -> None:
        """Run a command from the command table."""
        action, direction = parse_command(command)
        if action == "move":
            self.move(direction)
        elif action == "shoot":
            self.shoot(direction)
        else:
            self.quit()

    def handle_key(self, key: str) -> Command | None:
        """Translate a raw key press and run it.  Unbound keys are ignored."""
        command = INPUT_MAP.get(key)
        if command is not None:
            self.execute(command)
        return command

    def _accepting(self, action: str) -> bool:
        if self.is_running:
            return True
        logger.debug(f"Ignoring {action} command: game is over")
        return False

    # -- Termination --------------------------------------------------------

    def _die(self, reason: str) -> None:
        score = self.score
        message = (
            f"You are dead! You lasted {self.elapsed_time:.2f} seconds "
            f"and killed {self._kills} enemies. Score: {score}"
        )
        self._final_score = score
        self._terminate(message, reason=reason)

    def _terminate(self, message: str, reason: str) -> None:
        self._state = GameState.TERMINATED
        self._status = message
        if self._final_score is None:
            self._final_score = self.score
        logger.info(f"Game over ({reason}) at tick {self._tick}: {message}")
        self._event_bus.publish("game_over", {
            "reason": reason,
            "tick": self._tick,
            "elapsed": round(self.elapsed_time, 2),
            "kills": self._kills,
            "score": self._final_score,
            "message": message,
        })
