"""Maze — the static wall layout.

The arena is a border ring plus four interior segments.  The right-hand
border sits on the even horizontal grid (``width - 2`` for even widths) so
movers stepping two columns at a time always run into it rather than
skipping over it.  Interior segments are laid out for the classic 80x24
terminal and clipped to whatever fits inside the border.
"""

from __future__ import annotations

from collections.abc import Iterable

from .entities import Wall
from .geometry import Position

# (start_x, start_y, step_x, step_y, length) for each interior segment
INTERIOR_SEGMENTS: tuple[tuple[int, int, int, int, int], ...] = (
    (10, 7, 1, 0, 40),
    (30, 14, 1, 0, 40),
    (26, 10, 0, 1, 20),
    (52, 0, 0, 2, 20),   # dotted: every other row
)


def right_border(width: int) -> int:
    """Column of the right-hand border wall."""
    return width - (2 if width % 2 == 0 else 1)


def _border_cells(width: int, height: int) -> list[Position]:
    right = right_border(width)
    cells = []
    for x in range(right + 1):
        cells.append(Position(x, 0))
        cells.append(Position(x, height - 1))
    for y in range(height):
        cells.append(Position(0, y))
        cells.append(Position(right, y))
    return cells


def _interior_cells(width: int, height: int) -> list[Position]:
    right = right_border(width)
    cells = []
    for start_x, start_y, step_x, step_y, length in INTERIOR_SEGMENTS:
        for i in range(length):
            x, y = start_x + step_x * i, start_y + step_y * i
            if 0 < x < right and 0 < y < height - 1:
                cells.append(Position(x, y))
    return cells


def build_walls(width: int, height: int) -> list[Wall]:
    """Generate the full wall list for a *width* x *height* viewport."""
    seen: set[Position] = set()
    walls: list[Wall] = []
    for cell in _border_cells(width, height) + _interior_cells(width, height):
        if cell not in seen:
            seen.add(cell)
            walls.append(Wall(cell))
    return walls


def wall_cells(walls: Iterable[Wall]) -> frozenset[Position]:
    """The blocked-cell oracle used for every movement check in a tick."""
    return frozenset(w.coordinates() for w in walls)
