"""
Feature Extraction Module
"""

from .eye_features import get_eye_features

__all__ = [
    'get_eye_features',
]
