"""
Smoothing Filters Module
"""

from .kalman import KalmanFilter, IdentityFilter, build_smoothing_filter

__all__ = [
    'KalmanFilter',
    'IdentityFilter',
    'build_smoothing_filter',
]
