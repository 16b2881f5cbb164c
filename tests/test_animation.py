from __future__ import annotations

import pytest

from tilemerge.animation import frame_progress, interpolate, is_complete, progress_at
from tilemerge.moves import Transition
from tilemerge.settings import get_settings


class TestProgress:
    """Tests for time-based animation progress."""

    def test_linear_and_clamped(self):
        """Test progress is elapsed/duration clamped to [0, 1]."""
        assert progress_at(0.05, 0.2) == pytest.approx(0.25)
        assert progress_at(-1.0, 0.2) == 0.0
        assert progress_at(5.0, 0.2) == 1.0

    def test_zero_duration_is_done(self):
        """Test a zero-length animation is complete immediately."""
        assert progress_at(0.0, 0.0) == 1.0
        assert is_complete(0.0, 0.0)

    def test_default_duration_from_settings(self):
        """Test the configured duration is used when none is given."""
        duration = get_settings().animation_seconds
        assert not is_complete(duration / 2)
        assert is_complete(duration)

    def test_frame_progress(self):
        """Test frame-driven progress finishes after ten frames by default."""
        assert frame_progress(5) == pytest.approx(0.5)
        assert frame_progress(10) == 1.0
        assert frame_progress(3, frames=6) == pytest.approx(0.5)

    def test_same_input_same_output(self):
        """Test progress keeps no state between calls."""
        assert progress_at(0.1, 0.4) == progress_at(0.1, 0.4)


class TestInterpolation:
    """Tests for tile positions during an animation."""

    def test_position_endpoints(self):
        """Test a transition starts at its origin and ends at its destination."""
        t = Transition((0, 3), (0, 0), 2)
        assert t.position_at(0.0) == (0, 3)
        assert t.position_at(1.0) == (0, 0)
        assert t.moving

    def test_interpolate_halfway(self):
        """Test every transition is placed partway along its path."""
        transitions = (
            Transition((0, 3), (0, 0), 2),
            Transition((3, 1), (1, 1), 4, merged=True),
            Transition((2, 2), (2, 2), 8),
        )
        assert interpolate(transitions, 0.5) == (
            (0.0, 1.5, 2),
            (2.0, 1.0, 4),
            (2.0, 2.0, 8),
        )

    def test_merge_value_defaults(self):
        """Test merged transitions double the value, others keep it."""
        assert Transition((0, 1), (0, 0), 8, merged=True).merge_value == 16
        assert Transition((0, 1), (0, 0), 8).merge_value == 8
        assert not Transition((1, 1), (1, 1), 8).moving
