"""Simulation subsystem — entities, maze, collisions, enemy AI, tick engine."""
from .behaviors import EnemyBehaviors
from .combat import CollisionEngine, CollisionReport
from .commands import HELP_TEXT, INPUT_MAP, Command, parse_command
from .engine import GameState, SimulationEngine
from .entities import (
    Bullet,
    ChaserEnemy,
    Color,
    Drawable,
    Origin,
    Player,
    ShooterEnemy,
    Wall,
)
from .geometry import DIRECTIONS, Direction, Position, Vector
from .maze import build_walls, wall_cells
from .spawner import EnemySpawner

__all__ = [
    "Bullet",
    "ChaserEnemy",
    "CollisionEngine",
    "CollisionReport",
    "Color",
    "Command",
    "DIRECTIONS",
    "Direction",
    "Drawable",
    "EnemyBehaviors",
    "EnemySpawner",
    "GameState",
    "HELP_TEXT",
    "INPUT_MAP",
    "Origin",
    "Player",
    "Position",
    "ShooterEnemy",
    "SimulationEngine",
    "Vector",
    "Wall",
    "build_walls",
    "parse_command",
    "wall_cells",
]
