from __future__ import annotations

import logging
from dataclasses import dataclass
from .grid import Direction, from_rows, line_coordinates
from .merge import merge_line, trace_line

logger = logging.getLogger(__name__)

Cell = tuple[int, int]


@dataclass(frozen=True)
class Transition:
    """One tile's journey during a single move, for animation only."""

    origin: Cell
    destination: Cell
    value: int
    merged: bool = False
    merge_value: int = 0

    def __post_init__(self):
        if not self.merge_value:
            object.__setattr__(self, "merge_value", self.value * 2 if self.merged else self.value)

    @property
    def moving(self):
        return self.origin != self.destination

    def position_at(self, progress):
        """Linear (row, col) position at ``progress`` in [0, 1]."""
        (from_r, from_c), (to_r, to_c) = self.origin, self.destination
        return (from_r + (to_r - from_r) * progress, from_c + (to_c - from_c) * progress)


@dataclass(frozen=True)
class MoveOutcome:
    grid: tuple
    moved: bool
    transitions: tuple[Transition, ...] = ()


def resolve_move(grid, direction):
    """
    Slide every line of ``grid`` toward ``direction``.

    Pure: ``grid`` is left untouched and a ``MoveOutcome`` holds the new grid,
    whether any cell changed, and one ``Transition`` per tile on the old grid.
    """
    direction = Direction.parse(direction)
    grid = from_rows(grid)
    size = len(grid)
    cells = [list(row) for row in grid]
    transitions = []

    for coords in line_coordinates(direction, size):
        line = [grid[r][c] for r, c in coords]
        merged = merge_line(line)
        for (r, c), val in zip(coords, merged):
            cells[r][c] = val
        for m in trace_line(line, merged):
            transitions.append(Transition(coords[m.source], coords[m.target], m.value, m.merged))

    new_grid = tuple(tuple(row) for row in cells)
    moved = new_grid != grid
    logger.debug("Resolved %s: moved=%s, %d transitions", direction.value, moved, len(transitions))
    return MoveOutcome(new_grid, moved, tuple(transitions))
