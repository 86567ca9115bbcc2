"""
Exception types raised by the gaze prediction engine
"""


class GazeTrailError(Exception):
    """Base class for engine errors"""


class ConfigurationError(GazeTrailError, ValueError):
    """Invalid capacity or parameter at construction time"""


class IndexOutOfRange(GazeTrailError, IndexError):
    """Buffer access past the live elements"""


class RegressionFailure(GazeTrailError):
    """Ridge solver could not produce coefficients for this frame"""
