"""Immutable grid values and the per-direction line layout.

A grid is a tuple of row tuples. 0 marks an empty cell, anything else is a
tile. Every change builds a new grid, so comparing two grids with ``==``
answers "did anything move".
"""

from __future__ import annotations

import enum


class Direction(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, name):
        """Look up a direction by name, ignoring case ("up", "LEFT", ...)."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ValueError(f"Invalid direction: {name!r}. Must be one of up, down, left, right") from None


def empty_grid(size):
    return tuple((0,) * size for _ in range(size))


def from_rows(rows):
    """Freeze any nested sequence of ints into a grid."""
    return tuple(tuple(int(v) for v in row) for row in rows)


def with_cell(grid, row, col, value):
    """Return a copy of ``grid`` with one cell replaced."""
    cells = list(grid[row])
    cells[col] = value
    return grid[:row] + (tuple(cells),) + grid[row + 1:]


def empty_cells(grid):
    return [(r, c) for r, row in enumerate(grid) for c, val in enumerate(row) if val == 0]


def occupied_cells(grid):
    return tuple((r, c, val) for r, row in enumerate(grid) for c, val in enumerate(row) if val != 0)


def in_bounds(grid, row, col):
    size = len(grid)
    return 0 <= row < size and 0 <= col < size


def line_coordinates(direction, size):
    """
    Cell coordinates of every line for a move in ``direction``.

    Returns one list per line. Index 0 of each list is the cell on the edge
    the tiles travel toward, so every direction can be merged as if it were
    LEFT. UP/DOWN transpose rows and columns; DOWN/RIGHT reverse the
    traversal.
    """
    direction = Direction.parse(direction)
    reverse = direction in (Direction.DOWN, Direction.RIGHT)
    transpose = direction in (Direction.UP, Direction.DOWN)

    lines = []
    for i in range(size):
        steps = range(size - 1, -1, -1) if reverse else range(size)
        if transpose:
            lines.append([(j, i) for j in steps])
        else:
            lines.append([(i, j) for j in steps])
    return lines
