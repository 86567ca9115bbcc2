"""
Smoothing stage for raw gaze predictions

KalmanFilter tracks [x, y, vx, vy] with a constant-velocity model and is
corrected by each raw (x, y) prediction. IdentityFilter is the pass-through
used when smoothing is disabled, so the engine never branches per call.
"""

from typing import Sequence, Tuple

import numpy as np

from gazetrail import constants as const


class KalmanFilter:
    """
    Constant-velocity Kalman filter over screen coordinates

    State: [x, y, vx, vy]. Measurements: [x, y].
    """

    def __init__(
        self,
        delta_t: float = const.KALMAN_DELTA_T,
        pixel_error: float = const.KALMAN_PIXEL_ERROR,
        initial_covariance: float = const.KALMAN_INITIAL_COVARIANCE,
        initial_position: Tuple[float, float] = const.KALMAN_INITIAL_POSITION
    ):
        """
        Initialize Kalman filter

        Args:
            delta_t: Scale applied to the process noise
            pixel_error: Measurement noise variance (pixels)
            initial_covariance: Diagonal of the initial state covariance
            initial_position: Starting (x, y) estimate
        """
        self.delta_t = delta_t
        self.pixel_error = pixel_error
        self.initial_covariance = initial_covariance
        self.initial_position = initial_position

        # Velocity advances position by one unit per update
        self.F = np.array([
            [1, 0, 1, 0],
            [0, 1, 0, 1],
            [0, 0, 1, 0],
            [0, 0, 0, 1],
        ], dtype=np.float64)

        self.Q = np.array([
            [1 / 4, 0, 1 / 2, 0],
            [0, 1 / 4, 0, 1 / 2],
            [1 / 2, 0, 1, 0],
            [0, 1 / 2, 0, 1],
        ], dtype=np.float64) * delta_t

        self.H = np.array([
            [1, 0, 0, 0],
            [0, 1, 0, 0],
        ], dtype=np.float64)

        self.R = np.eye(2) * pixel_error

        self.reset()

    def reset(self) -> None:
        """Restore the initial state and covariance"""
        x0, y0 = self.initial_position
        self.state = np.array([x0, y0, 0.0, 0.0], dtype=np.float64)
        self.covariance = np.eye(4) * self.initial_covariance

    def predict(self) -> np.ndarray:
        """Advance the state one step without a measurement; returns predicted (x, y)"""
        self.state = self.F @ self.state
        self.covariance = self.F @ self.covariance @ self.F.T + self.Q
        return self.H @ self.state

    def update(self, observation: Sequence[float]) -> np.ndarray:
        """
        Predict one step, then correct with a raw (x, y) observation

        Args:
            observation: Raw [x, y] prediction

        Returns:
            Smoothed [x, y]
        """
        z = np.asarray(observation, dtype=np.float64).reshape(2)

        self.predict()

        innovation = z - self.H @ self.state
        S = self.H @ self.covariance @ self.H.T + self.R
        K = self.covariance @ self.H.T @ np.linalg.inv(S)

        self.state = self.state + K @ innovation
        self.covariance = (np.eye(4) - K @ self.H) @ self.covariance

        return self.H @ self.state


class IdentityFilter:
    """Pass-through smoothing stage"""

    def reset(self) -> None:
        pass

    def update(self, observation: Sequence[float]) -> np.ndarray:
        return np.asarray(observation, dtype=np.float64).reshape(2)


def build_smoothing_filter(enabled: bool, **kalman_kwargs):
    """
    Pick the smoothing stage once, at construction time

    Args:
        enabled: Whether Kalman smoothing is applied
        **kalman_kwargs: Forwarded to KalmanFilter

    Returns:
        KalmanFilter if enabled, otherwise IdentityFilter
    """
    if enabled:
        return KalmanFilter(**kalman_kwargs)
    return IdentityFilter()
