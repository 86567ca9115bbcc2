"""
Windowed ridge regression gaze engine

Keeps two bounded buffers:
- calibration samples (clicks at known screen positions)
- trail samples (recent observations at assumed positions, with timestamps)

Every prediction re-fits one ridge regression per axis on the calibration
samples plus the trail samples still inside the decay horizon, dots the
coefficients with the current feature vector, floors the result and passes it
through the smoothing stage.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from gazetrail import constants as const
from gazetrail.buffers.sample_buffer import BoundedSampleBuffer, CalibrationSample, TrailSample
from gazetrail.exceptions import RegressionFailure
from gazetrail.filters.kalman import build_smoothing_filter
from gazetrail.regression.ridge import ridge
from gazetrail.regression.trail_window import select_trail_window
from gazetrail.utils.config_loader import EngineConfig


@dataclass(frozen=True)
class Prediction:
    """Estimated screen coordinate"""
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


def monotonic_ms() -> float:
    """Monotonic clock in milliseconds"""
    return time.monotonic() * 1000.0


class RidgeRegressionEngine:
    """
    Calibration/trail buffers plus per-frame ridge regression

    Not thread-safe: callers driving ingestion and prediction from different
    threads must serialize access themselves.
    """

    name = "ridge"

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        clock: Callable[[], float] = monotonic_ms,
        solver: Callable[[Sequence[float], Sequence[Sequence[float]], float], Sequence[float]] = ridge,
        smoothing_filter=None
    ):
        """
        Initialize engine

        Args:
            config: Engine options (defaults used when None)
            clock: Monotonic time source in ms, used when no timestamp is given
            solver: ridge(targets, design_matrix, ridge_parameter) -> coefficients
            smoothing_filter: Object with update([x, y]) -> [x, y] and reset();
                overrides the filter chosen by config.smoothing_enabled
        """
        self.config = (config or EngineConfig()).validate()
        self.clock = clock
        self.solver = solver
        self.logger = logging.getLogger(__name__)

        self._custom_filter = smoothing_filter
        self.init()

    def init(self) -> None:
        """Create empty buffers and a fresh smoothing stage"""
        self.calibration_buffer: BoundedSampleBuffer[CalibrationSample] = BoundedSampleBuffer(
            self.config.calibration_buffer_capacity
        )
        self.trail_buffer: BoundedSampleBuffer[TrailSample] = BoundedSampleBuffer(
            self.config.trail_buffer_capacity
        )

        if self._custom_filter is not None:
            self.smoothing_filter = self._custom_filter
            self.smoothing_filter.reset()
        else:
            self.smoothing_filter = build_smoothing_filter(self.config.smoothing_enabled)

        self.logger.debug(
            f"Engine initialized (calibration capacity={self.config.calibration_buffer_capacity}, "
            f"trail capacity={self.config.trail_buffer_capacity}, "
            f"trail decay={self.config.trail_decay_ms}ms, "
            f"smoothing={type(self.smoothing_filter).__name__})"
        )

    def reset(self) -> None:
        """Drop all samples and smoothing state (recalibration)"""
        self.logger.info("Resetting engine: clearing calibration and trail samples")
        self.init()

    @property
    def ridge_parameter(self) -> float:
        return self.config.ridge_parameter

    @property
    def trail_decay_ms(self) -> float:
        return self.config.trail_decay_ms

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def add_calibration_sample(self, features: Sequence[float], screen_x: float, screen_y: float) -> None:
        """Record a click at a known screen position"""
        sample = CalibrationSample(tuple(float(v) for v in features), float(screen_x), float(screen_y))
        self.calibration_buffer.push(sample)
        self.logger.debug(
            f"Calibration sample at ({screen_x}, {screen_y}); "
            f"{self.calibration_buffer.size()}/{self.calibration_buffer.capacity()} stored"
        )

    def add_trail_sample(
        self,
        features: Sequence[float],
        screen_x: float,
        screen_y: float,
        timestamp: Optional[float] = None
    ) -> None:
        """Record an observation at an assumed screen position"""
        if timestamp is None:
            timestamp = self.clock()
        sample = TrailSample(
            tuple(float(v) for v in features), float(screen_x), float(screen_y), float(timestamp)
        )
        self.trail_buffer.push(sample)

    def add_data(
        self,
        features: Optional[Sequence[float]],
        screen_pos: Tuple[float, float],
        event_type: str,
        timestamp: Optional[float] = None
    ) -> bool:
        """
        Route an observation by event type

        Args:
            features: Eye feature vector (None when tracking was lost)
            screen_pos: (x, y) screen position for the observation
            event_type: 'click' for calibration, 'move' for trail
            timestamp: Trail timestamp in ms (engine clock when None)

        Returns:
            True if a sample was stored
        """
        if event_type not in (const.EVENT_CLICK, const.EVENT_MOVE):
            raise ValueError(f"Unknown event type: {event_type!r}")

        if features is None or len(features) == 0:
            self.logger.debug(f"Skipping {event_type} event without eye features")
            return False

        screen_x, screen_y = screen_pos
        if event_type == const.EVENT_CLICK:
            self.add_calibration_sample(features, screen_x, screen_y)
        else:
            self.add_trail_sample(features, screen_x, screen_y, timestamp)
        return True

    def get_data(self) -> List[CalibrationSample]:
        """Calibration samples, oldest first"""
        return self.calibration_buffer.to_sequence()

    def set_data(self, samples: Iterable[CalibrationSample]) -> None:
        """Replay stored calibration samples into the calibration buffer"""
        count = 0
        for sample in samples:
            self.add_calibration_sample(sample.features, sample.screen_x, sample.screen_y)
            count += 1
        self.logger.info(f"Restored {count} calibration samples")

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------

    def training_set(
        self,
        now: Optional[float] = None
    ) -> Tuple[List[Tuple[float, ...]], List[float], List[float]]:
        """
        Build the rows fed to the solver

        Calibration samples come first (oldest to newest), followed by the
        trail samples inside the decay horizon.

        Args:
            now: Current monotonic time in ms (engine clock when None)

        Returns:
            (features, screen_x, screen_y)
        """
        if now is None:
            now = self.clock()

        calibration = self.calibration_buffer.to_sequence()
        trail = select_trail_window(self.trail_buffer.to_sequence(), now, self.config.trail_decay_ms)

        features = [s.features for s in calibration] + [s.features for s in trail]
        screen_x = [s.screen_x for s in calibration] + [s.screen_x for s in trail]
        screen_y = [s.screen_y for s in calibration] + [s.screen_y for s in trail]
        return features, screen_x, screen_y

    def predict(self, features: Optional[Sequence[float]], now: Optional[float] = None) -> Optional[Prediction]:
        """
        Estimate the screen coordinate for a feature vector

        Args:
            features: Current eye feature vector (None when unavailable)
            now: Current monotonic time in ms (engine clock when None)

        Returns:
            Prediction, or None when there are no features or no calibration yet

        Raises:
            RegressionFailure: If the solver cannot fit this frame's data
        """
        if features is None or len(features) == 0:
            return None
        if self.calibration_buffer.size() == 0:
            return None

        design_matrix, screen_x, screen_y = self.training_set(now)

        coefficients_x = np.asarray(self.solver(screen_x, design_matrix, self.config.ridge_parameter))
        coefficients_y = np.asarray(self.solver(screen_y, design_matrix, self.config.ridge_parameter))

        current = np.asarray(features, dtype=np.float64)
        if current.shape != coefficients_x.shape or current.shape != coefficients_y.shape:
            raise RegressionFailure(
                f"Feature vector of length {current.size} does not match "
                f"{coefficients_x.size} fitted coefficients"
            )
        if not np.all(np.isfinite(current)):
            raise RegressionFailure("Feature vector contains non-finite values")

        # Floor, not round: downstream pixel snapping depends on it
        raw_x = math.floor(float(np.dot(current, coefficients_x)))
        raw_y = math.floor(float(np.dot(current, coefficients_y)))

        smoothed = self.smoothing_filter.update([raw_x, raw_y])
        prediction = Prediction(float(smoothed[0]), float(smoothed[1]))

        self.logger.debug(
            f"Predicted ({prediction.x:.1f}, {prediction.y:.1f}) from raw ({raw_x}, {raw_y}) "
            f"using {len(design_matrix)} samples"
        )
        return prediction
