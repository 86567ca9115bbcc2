"""
Tests for the bounded sample buffer
"""

import pytest
from gazetrail.buffers.sample_buffer import BoundedSampleBuffer, CalibrationSample, TrailSample
from gazetrail.exceptions import ConfigurationError, IndexOutOfRange


class TestBoundedSampleBuffer:
    """Tests for BoundedSampleBuffer"""

    def test_initialization(self):
        """Test empty buffer after construction"""
        buffer = BoundedSampleBuffer(5)
        assert buffer.size() == 0
        assert buffer.capacity() == 5
        assert buffer.to_sequence() == []

    @pytest.mark.parametrize("capacity", [0, -1, 2.5, True])
    def test_invalid_capacity(self, capacity):
        """Test that a non-positive or non-integer capacity is rejected"""
        with pytest.raises(ConfigurationError):
            BoundedSampleBuffer(capacity)

    def test_push_preserves_order(self):
        """Test insertion order below capacity"""
        buffer = BoundedSampleBuffer(4)
        for value in ("a", "b", "c"):
            buffer.push(value)
        assert buffer.to_sequence() == ["a", "b", "c"]
        assert buffer.get(0) == "a"
        assert buffer.get(2) == "c"

    def test_capacity_invariant(self):
        """Test size bound and oldest element after overflow"""
        capacity = 3
        buffer = BoundedSampleBuffer(capacity)

        for total in range(1, 20):
            buffer.push(total)
            assert buffer.size() <= capacity
            if total > capacity:
                # Oldest live element is the (total - capacity + 1)-th pushed
                assert buffer.get(0) == total - capacity + 1
                assert buffer.get(capacity - 1) == total

    def test_get_out_of_range(self):
        """Test that reading past the live elements fails"""
        buffer = BoundedSampleBuffer(3)
        buffer.push(1)
        with pytest.raises(IndexOutOfRange):
            buffer.get(1)
        with pytest.raises(IndexOutOfRange):
            buffer.get(-1)
        with pytest.raises(IndexError):
            buffer[5]

    def test_to_sequence_is_snapshot(self):
        """Test that the returned sequence is a copy"""
        buffer = BoundedSampleBuffer(3)
        buffer.push(1)
        snapshot = buffer.to_sequence()
        snapshot.append(99)
        buffer.push(2)
        assert buffer.to_sequence() == [1, 2]
        assert snapshot == [1, 99]

    def test_clear_and_push_all(self):
        """Test bulk push and clear"""
        buffer = BoundedSampleBuffer(2)
        buffer.push_all([1, 2, 3])
        assert list(buffer) == [2, 3]
        assert len(buffer) == 2

        buffer.clear()
        assert buffer.size() == 0
        assert buffer.capacity() == 2


class TestSamples:
    """Tests for the sample records"""

    def test_samples_are_immutable(self):
        """Test that samples cannot be changed after creation"""
        calibration = CalibrationSample((1.0, 0.0), 100.0, 200.0)
        trail = TrailSample((1.0, 0.0), 100.0, 200.0, 5.0)

        with pytest.raises(AttributeError):
            calibration.screen_x = 0.0
        with pytest.raises(AttributeError):
            trail.timestamp = 0.0
