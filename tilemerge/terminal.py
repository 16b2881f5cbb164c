from __future__ import annotations


def is_terminal(grid):
    """True when the grid is full and no two neighbouring cells are equal."""
    size = len(grid)
    for r in range(size):
        for c in range(size):
            if grid[r][c] == 0:
                return False
    for r in range(size):
        for c in range(size):
            if r + 1 < size and grid[r][c] == grid[r + 1][c]:
                return False
            if c + 1 < size and grid[r][c] == grid[r][c + 1]:
                return False
    return True
