"""
Gaze session
Connects feature extraction, the ridge engine and calibration persistence
into the per-frame loop of a webcam tracker
"""

import logging
from typing import Any, Callable, Optional, Sequence

from gazetrail import constants as const
from gazetrail.exceptions import RegressionFailure
from gazetrail.features.eye_features import get_eye_features
from gazetrail.regression.ridge_engine import Prediction, RidgeRegressionEngine
from gazetrail.utils.calibration_store import CalibrationStore
from gazetrail.utils.config_loader import EngineConfig, load_config
from gazetrail.utils.logger import setup_logger_from_config


class GazeSession:
    """
    One tracking session: calibration clicks in, screen coordinates out

    Each processed frame that yields a prediction is also recorded as a trail
    sample at the predicted position, biasing the next frames toward gaze
    continuity until the sample ages out of the decay horizon.
    """

    def __init__(
        self,
        engine: Optional[RidgeRegressionEngine] = None,
        feature_extractor: Callable[[Any], Optional[Sequence[float]]] = get_eye_features,
        store: Optional[CalibrationStore] = None,
        record_trail: bool = True
    ):
        """
        Initialize session

        Args:
            engine: Prediction engine (default engine when None)
            feature_extractor: eyes -> feature vector or None
            store: Calibration persistence (save/load disabled when None)
            record_trail: Record each prediction as a trail sample
        """
        self.engine = engine or RidgeRegressionEngine()
        self.feature_extractor = feature_extractor
        self.store = store
        self.record_trail = record_trail
        self.logger = logging.getLogger(__name__)

        self.frame_count = 0
        self.last_prediction: Optional[Prediction] = None

    @classmethod
    def from_config(cls, config_path: str = const.DEFAULT_CONFIG_PATH) -> 'GazeSession':
        """
        Build a session from a YAML configuration file

        Missing files fall back to defaults.
        """
        found = True
        try:
            config = load_config(config_path)
        except FileNotFoundError:
            found = False
            config = {}

        logger = setup_logger_from_config(config)
        if not found:
            logger.warning(f"Config file not found at {config_path}, using defaults")

        engine = RidgeRegressionEngine(EngineConfig.from_dict(config))

        session_config = config.get('session', {}) or {}
        calibration_config = config.get('calibration', {}) or {}
        store_path = calibration_config.get('store_path')

        session = cls(
            engine=engine,
            store=CalibrationStore(store_path) if store_path else None,
            record_trail=bool(session_config.get('record_trail', True)),
        )
        if session.store is not None and calibration_config.get('load_on_start', False):
            session.load_calibration()
        return session

    def record_click(self, eyes: Any, screen_x: float, screen_y: float) -> bool:
        """
        Add a calibration sample for a click at (screen_x, screen_y)

        Returns:
            False when no features could be extracted for this frame
        """
        features = self.feature_extractor(eyes)
        stored = self.engine.add_data(features, (screen_x, screen_y), const.EVENT_CLICK)
        if not stored:
            self.logger.warning(f"Click at ({screen_x}, {screen_y}) ignored: no eye features")
        return stored

    def record_move(self, eyes: Any, screen_x: float, screen_y: float, now: Optional[float] = None) -> bool:
        """Add a trail sample at an externally known position (e.g. the cursor)"""
        features = self.feature_extractor(eyes)
        return self.engine.add_data(features, (screen_x, screen_y), const.EVENT_MOVE, timestamp=now)

    def process_frame(self, eyes: Any, now: Optional[float] = None) -> Optional[Prediction]:
        """
        Predict the gaze position for one frame

        Args:
            eyes: Raw eye observation passed to the feature extractor
            now: Monotonic time in ms (engine clock when None)

        Returns:
            Prediction, or None before calibration or when tracking is lost
        """
        self.frame_count += 1
        if now is None:
            now = self.engine.clock()

        features = self.feature_extractor(eyes)
        if features is None:
            return None

        try:
            prediction = self.engine.predict(features, now=now)
        except RegressionFailure as exc:
            self.logger.error(f"Frame {self.frame_count}: regression failed: {exc}")
            raise

        if prediction is None:
            return None

        if self.record_trail:
            self.engine.add_trail_sample(features, prediction.x, prediction.y, timestamp=now)

        self.last_prediction = prediction
        return prediction

    def recalibrate(self) -> None:
        """Discard calibration and trail data"""
        self.engine.reset()
        self.last_prediction = None

    def save_calibration(self) -> None:
        if self.store is None:
            raise RuntimeError("No calibration store configured")
        self.store.save(self.engine.get_data())

    def load_calibration(self) -> int:
        """
        Restore stored calibration samples into the engine

        Returns:
            Number of samples loaded
        """
        if self.store is None:
            raise RuntimeError("No calibration store configured")
        samples = self.store.load()
        self.engine.set_data(samples)
        return len(samples)
