"""
shooter — simulation core for a grid-based ASCII shooter.

The package holds everything that decides what happens on the board; the
terminal renderer, the keyboard reader and the frame loop live elsewhere
and talk to the core through a handful of calls:

  config        – Settings loaded from SHOOTER_* environment variables.
  comms         – EventBus for pushing game events to observers.
  simulation    – Entities, maze, collisions, enemy AI, spawner, engine.
"""
