"""Core engine for a 2048-style sliding tile merge puzzle."""

from __future__ import annotations

from .animation import frame_progress, interpolate, is_complete, progress_at
from .exceptions import InvalidGridSizeError, TileMergeError
from .game_logic import GameState, Phase
from .grid import Direction
from .merge import merge_line, trace_line
from .moves import MoveOutcome, Transition, resolve_move
from .settings import GameSettings, get_settings
from .spawn import Spawner
from .terminal import is_terminal

__all__ = [
    "Direction",
    "GameSettings",
    "GameState",
    "InvalidGridSizeError",
    "MoveOutcome",
    "Phase",
    "Spawner",
    "TileMergeError",
    "Transition",
    "frame_progress",
    "get_settings",
    "interpolate",
    "is_complete",
    "is_terminal",
    "merge_line",
    "progress_at",
    "resolve_move",
    "trace_line",
]
