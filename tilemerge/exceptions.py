"""Exceptions raised by the tilemerge core.

Gameplay rejections (moving while tiles are still animating, clicking an
occupied cell) are reported through return values, not exceptions. Only
construction-time misconfiguration raises.
"""

from __future__ import annotations


class TileMergeError(Exception):
    """Base exception class for all tilemerge errors."""


class InvalidGridSizeError(TileMergeError, ValueError):
    """Raised when a game is created with a grid smaller than 2x2."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"Grid size must be at least 2, got {size}")
