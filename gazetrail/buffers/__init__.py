"""
Sample Buffers Module
Fixed-capacity storage for calibration clicks and trailing gaze samples
"""

from gazetrail.buffers.sample_buffer import (
    BoundedSampleBuffer,
    CalibrationSample,
    TrailSample
)

__all__ = [
    'BoundedSampleBuffer',
    'CalibrationSample',
    'TrailSample'
]
