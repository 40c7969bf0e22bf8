"""Configuration management using Pydantic settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Game settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SHOOTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Viewport (character cells)
    width: int = Field(default=80, gt=0)
    height: int = Field(default=24, gt=0)

    # Seconds per tick.  Pacing belongs to the frame loop; the core only
    # uses this to turn ticks into elapsed time for the score.
    tick_duration: float = Field(default=0.05, gt=0)

    # RNG seed for reproducible runs (None = seeded from the OS)
    seed: Optional[int] = None

    # Spawner
    spawn_interval: int = Field(default=30, gt=0)

    # Shooter AI
    wander_interval: int = Field(default=7, gt=0)
    shoot_cooldown: int = Field(default=20, ge=0)
    reload_max: int = Field(default=10, gt=0)

    # Chaser AI: speed drawn from [min, max)
    chaser_speed_min: int = Field(default=5, gt=0)
    chaser_speed_max: int = Field(default=13, gt=1)

    # Scoring
    kill_score: int = 200
    time_score: int = 100

    # Player spawn.  Fixed cell by default; random in-bounds cell if enabled.
    random_player_spawn: bool = False
    player_spawn_x: int = 4
    player_spawn_y: int = 4


settings = Settings()
