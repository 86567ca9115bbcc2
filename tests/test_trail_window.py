"""
Tests for trail window selection
"""

import pytest
from gazetrail.buffers.sample_buffer import TrailSample
from gazetrail.exceptions import ConfigurationError
from gazetrail.regression.trail_window import select_trail_window


def _trail(timestamp, x=0.0):
    return TrailSample((1.0,), x, 0.0, timestamp)


class TestSelectTrailWindow:
    """Tests for select_trail_window"""

    def test_lower_bound_is_exclusive(self):
        """Test that a sample exactly decay_ms old is excluded"""
        now = 1000.0
        on_boundary = _trail(now - 100)
        just_inside = _trail(now - 99.999)

        selected = select_trail_window([on_boundary, just_inside], now, 100)
        assert selected == [just_inside]

    def test_preserves_order(self):
        """Test that qualifying samples keep their relative order"""
        samples = [_trail(t, x=float(i)) for i, t in enumerate([10, 950, 20, 960, 990])]
        selected = select_trail_window(samples, 1000.0, 100)
        assert [s.screen_x for s in selected] == [1.0, 3.0, 4.0]

    def test_empty_when_all_expired(self):
        """Test empty result when nothing is recent enough"""
        samples = [_trail(0.0), _trail(10.0)]
        assert select_trail_window(samples, 5000.0, 1000) == []
        assert select_trail_window([], 5000.0, 1000) == []

    def test_zero_decay_selects_only_future_samples(self):
        """Test that a zero horizon excludes samples taken at 'now'"""
        samples = [_trail(1000.0), _trail(1000.5)]
        selected = select_trail_window(samples, 1000.0, 0)
        assert [s.timestamp for s in selected] == [1000.5]

    def test_input_not_modified(self):
        """Test that selection does not mutate its input"""
        samples = [_trail(0.0), _trail(999.0)]
        select_trail_window(samples, 1000.0, 10)
        assert len(samples) == 2

    def test_negative_decay_rejected(self):
        """Test that a negative horizon is a configuration error"""
        with pytest.raises(ConfigurationError):
            select_trail_window([], 0.0, -1)
