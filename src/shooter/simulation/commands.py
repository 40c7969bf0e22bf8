"""Player command table.

The input layer turns raw key presses into ``Command`` values through
``INPUT_MAP`` and hands them to ``SimulationEngine.execute()``.  Moves use
the left hand (w/a/s/d), shots the right hand (vi keys h/j/k/l).
"""

from __future__ import annotations

from enum import Enum

from .geometry import Direction


class Command(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SHOOT_UP = "shoot_up"
    SHOOT_DOWN = "shoot_down"
    SHOOT_LEFT = "shoot_left"
    SHOOT_RIGHT = "shoot_right"
    QUIT = "quit"


INPUT_MAP: dict[str, Command] = {
    "a": Command.MOVE_LEFT,
    "d": Command.MOVE_RIGHT,
    "w": Command.MOVE_UP,
    "s": Command.MOVE_DOWN,
    "k": Command.SHOOT_UP,
    "j": Command.SHOOT_DOWN,
    "h": Command.SHOOT_LEFT,
    "l": Command.SHOOT_RIGHT,
    "q": Command.QUIT,
}

HELP_TEXT = "w, s, a, d for move. h, j, k, l for shoot. Fight if you can!"


def parse_command(command: Command | str) -> tuple[str, Direction | None]:
    """Split a command into its action and direction.

    >>> parse_command("shoot_left")
    ('shoot', <Direction.LEFT: 'left'>)
    """
    try:
        command = Command(command)
    except ValueError:
        raise ValueError(f"Unknown command: {command!r}") from None
    if command is Command.QUIT:
        return "quit", None
    action, _, direction = command.value.partition("_")
    return action, Direction(direction)
