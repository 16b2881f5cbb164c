"""
Stateless animation timing for move transitions.

Progress is a pure function of elapsed time (or frame count), so a renderer
can restart, skip or replay an animation without keeping counters on the
transitions themselves.
"""

from __future__ import annotations

from .settings import get_settings

# A move animates over this many frames when driven frame by frame.
DEFAULT_FRAMES = 10


def progress_at(elapsed, duration=None):
    """Fraction of the animation done after ``elapsed`` seconds, in [0, 1]."""
    if duration is None:
        duration = get_settings().animation_seconds
    if duration <= 0:
        return 1.0
    return min(max(elapsed / duration, 0.0), 1.0)


def frame_progress(frame, frames=DEFAULT_FRAMES):
    return progress_at(frame, frames)


def is_complete(elapsed, duration=None):
    return progress_at(elapsed, duration) >= 1.0


def interpolate(transitions, progress):
    """
    Where every tile should be drawn at ``progress``.
    Returns: tuple of (row, col, value) with fractional row/col.
    """
    frames = []
    for t in transitions:
        row, col = t.position_at(progress)
        frames.append((row, col, t.value))
    return tuple(frames)
