"""Shared fixtures for shooter tests."""

from __future__ import annotations

import random

import pytest

from shooter.config import Settings
from shooter.simulation.engine import SimulationEngine
from shooter.simulation.geometry import Position


class ScriptedRandom:
    """Integer RNG that replays queued draws, then falls back to a seeded one.

    Only ``randrange`` is provided, which is all the simulation uses.  Each
    scripted value is checked against the requested range so a test that
    scripts an impossible draw fails loudly instead of passing by accident.
    """

    def __init__(self, values=(), seed: int = 0) -> None:
        self._values = list(values)
        self._fallback = random.Random(seed)
        self.calls: list[tuple[int, int]] = []

    def push(self, *values: int) -> None:
        self._values.extend(values)

    def randrange(self, start: int, stop: int | None = None) -> int:
        if stop is None:
            start, stop = 0, start
        self.calls.append((start, stop))
        if not self._values:
            return self._fallback.randrange(start, stop)
        value = self._values.pop(0)
        assert start <= value < stop, f"scripted {value} outside [{start}, {stop})"
        return value


@pytest.fixture
def scripted_rng():
    """Factory: ``scripted_rng([3, 1])`` -> ScriptedRandom."""
    return ScriptedRandom


@pytest.fixture
def game_settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def make_engine(game_settings):
    """Factory for engines with a known player cell and a seeded RNG."""

    def _make(width: int = 80, height: int = 24, player=(4, 4), rng=None,
              event_bus=None, **overrides) -> SimulationEngine:
        cfg = game_settings.model_copy(update=overrides) if overrides else game_settings
        return SimulationEngine(
            width=width,
            height=height,
            rng=rng if rng is not None else random.Random(1234),
            event_bus=event_bus,
            settings=cfg,
            player_position=Position(*player) if player is not None else None,
        )

    return _make
