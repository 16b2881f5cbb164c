from __future__ import annotations

import enum
import logging
import time

from .exceptions import InvalidGridSizeError
from .grid import Direction, empty_grid, in_bounds, occupied_cells, with_cell
from .moves import resolve_move
from .settings import get_settings
from .spawn import Spawner
from .terminal import is_terminal

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    PLAYING = "playing"
    ANIMATING = "animating"
    GAME_OVER = "game_over"


class GameState:
    """
    One game of the tile-merge puzzle.

    Moves are resolved immediately, but the follow-up spawn waits until the
    renderer reports that the slide animation finished. Until then new moves
    are ignored:

        PLAYING --apply_move (moved)--> ANIMATING
        ANIMATING --animations_complete--> PLAYING or GAME_OVER
        any --restart--> PLAYING
    """

    def __init__(self, size=None, spawner=None, clock=None, settings=None):
        self.settings = settings or get_settings()
        self.size = self.settings.grid_size if size is None else size
        if self.size < 2:
            raise InvalidGridSizeError(self.size)
        if spawner is None:
            spawner = Spawner.seeded(self.settings.seed, self.settings.four_probability)
        self.spawner = spawner
        self.clock = clock or time.monotonic

        self.grid = empty_grid(self.size)
        self.phase = Phase.PLAYING
        self.start_time = 0.0
        self.end_time = None
        self._transitions = ()
        self.restart()

    def restart(self):
        self.grid = empty_grid(self.size)
        self.phase = Phase.PLAYING
        self.start_time = self.clock()
        self.end_time = None
        self._transitions = ()
        for _ in range(self.settings.initial_tiles):
            self.grid, _ = self.spawner.spawn(self.grid)
        logger.info("New %dx%d game started", self.size, self.size)
        self._check_game_over()

    def apply_move(self, direction):
        """
        Slide the board. Returns True if any tile moved.
        The new tile is not spawned until animations_complete().
        """
        direction = Direction.parse(direction)
        if self.phase is not Phase.PLAYING:
            logger.debug("Ignoring %s while %s", direction.value, self.phase.value)
            return False

        outcome = resolve_move(self.grid, direction)
        if not outcome.moved:
            return False

        self.grid = outcome.grid
        self._transitions = outcome.transitions
        self.phase = Phase.ANIMATING
        return True

    def animations_complete(self):
        if self.phase is not Phase.ANIMATING:
            return
        self.grid, _ = self.spawner.spawn(self.grid)
        self._transitions = ()
        self.phase = Phase.PLAYING
        self._check_game_over()

    def place_at(self, row, col):
        """Drop a 2 or 4 on an empty cell chosen by the player."""
        if self.phase is not Phase.PLAYING:
            logger.debug("Rejected placement at (%d, %d) while %s", row, col, self.phase.value)
            return False
        if not in_bounds(self.grid, row, col) or self.grid[row][col] != 0:
            logger.debug("Rejected placement at (%d, %d)", row, col)
            return False

        self.grid = with_cell(self.grid, row, col, self.spawner.draw_value())
        self._check_game_over()
        return True

    def _check_game_over(self):
        if is_terminal(self.grid):
            self.phase = Phase.GAME_OVER
            self.end_time = self.clock()
            logger.info("Game over after %.1fs", self.elapsed_time())

    def current_grid(self):
        return self.grid

    def pending_transitions(self):
        """Transitions of the last accepted move; handed out only once."""
        transitions = self._transitions
        self._transitions = ()
        return transitions

    def tiles(self):
        return occupied_cells(self.grid)

    def is_game_over(self):
        return self.phase is Phase.GAME_OVER

    def elapsed_time(self):
        end = self.end_time if self.end_time is not None else self.clock()
        return end - self.start_time
