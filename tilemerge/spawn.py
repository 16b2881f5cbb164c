from __future__ import annotations

import logging
import random

from .grid import empty_cells, with_cell

logger = logging.getLogger(__name__)


class Spawner:
    """Drops new 2 or 4 tiles onto random empty cells."""

    def __init__(self, rng=None, four_probability=0.5):
        self.rng = rng if rng is not None else random.Random()
        self.four_probability = four_probability

    @classmethod
    def seeded(cls, seed, four_probability=0.5):
        return cls(random.Random(seed), four_probability)

    def draw_value(self):
        return 4 if self.rng.random() < self.four_probability else 2

    def spawn(self, grid):
        """
        Place one tile on a uniformly chosen empty cell.
        Returns: (new_grid, (row, col, value)) or (grid, None) when full.
        """
        empty = empty_cells(grid)
        if not empty:
            return grid, None
        r, c = self.rng.choice(empty)
        val = self.draw_value()
        logger.debug("Spawned %d at (%d, %d)", val, r, c)
        return with_cell(grid, r, c, val), (r, c, val)
