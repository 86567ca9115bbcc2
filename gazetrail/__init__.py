"""
gazetrail - windowed ridge regression gaze prediction

Turns a stream of eye feature vectors into screen coordinates using
calibration clicks plus a time-decayed trail of recent observations.
"""

from gazetrail.exceptions import (
    GazeTrailError,
    ConfigurationError,
    IndexOutOfRange,
    RegressionFailure
)
from gazetrail.buffers import BoundedSampleBuffer, CalibrationSample, TrailSample
from gazetrail.regression import RidgeRegressionEngine, Prediction, ridge, select_trail_window
from gazetrail.filters import KalmanFilter, IdentityFilter
from gazetrail.utils.config_loader import EngineConfig
from gazetrail.session import GazeSession

__all__ = [
    'GazeTrailError',
    'ConfigurationError',
    'IndexOutOfRange',
    'RegressionFailure',
    'BoundedSampleBuffer',
    'CalibrationSample',
    'TrailSample',
    'RidgeRegressionEngine',
    'Prediction',
    'ridge',
    'select_trail_window',
    'KalmanFilter',
    'IdentityFilter',
    'EngineConfig',
    'GazeSession',
]

__version__ = '1.0.0'
