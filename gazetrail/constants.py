"""
Default values shared by the engine, the session and the config loader
"""

# Ridge regression
DEFAULT_RIDGE_PARAMETER = 1e-5

# Sample retention
DEFAULT_CALIBRATION_BUFFER_CAPACITY = 700
DEFAULT_TRAIL_DECAY_MS = 1000.0
MOVE_TICK_MS = 50  # One trail sample per mouse-move tick
DEFAULT_TRAIL_BUFFER_CAPACITY = int(DEFAULT_TRAIL_DECAY_MS / MOVE_TICK_MS)

# Smoothing
DEFAULT_SMOOTHING_ENABLED = True
KALMAN_DELTA_T = 1 / 10
KALMAN_PIXEL_ERROR = 47.0
KALMAN_INITIAL_COVARIANCE = 0.0001
KALMAN_INITIAL_POSITION = (500.0, 500.0)

# Eye patch features (width x height per eye)
EYE_PATCH_WIDTH = 10
EYE_PATCH_HEIGHT = 6

# Ingestion event types
EVENT_CLICK = "click"
EVENT_MOVE = "move"

DEFAULT_CONFIG_PATH = "config/config.yaml"
