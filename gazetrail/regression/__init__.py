"""
Regression Module

Ridge solver, trail window selection and the windowed prediction engine.
"""

from gazetrail.regression.ridge import ridge
from gazetrail.regression.trail_window import select_trail_window
from gazetrail.regression.ridge_engine import (
    RidgeRegressionEngine,
    Prediction,
    monotonic_ms
)

__all__ = [
    'ridge',
    'select_trail_window',
    'RidgeRegressionEngine',
    'Prediction',
    'monotonic_ms'
]
