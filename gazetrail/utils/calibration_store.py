"""
Calibration persistence

Saves the engine's calibration samples to JSON so a session can be restored
without repeating the click calibration.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List

from gazetrail.buffers.sample_buffer import CalibrationSample


class CalibrationStore:
    """Reads and writes calibration samples as JSON"""

    def __init__(self, path: str = "config/calibration_samples.json"):
        self.path = Path(path)
        self.logger = logging.getLogger(__name__)

    def save(self, samples: Iterable[CalibrationSample]) -> Path:
        """
        Write calibration samples to disk

        Args:
            samples: Samples, oldest first

        Returns:
            Path written
        """
        payload: Dict[str, Any] = {
            "saved_at": datetime.now().isoformat(),
            "samples": [
                {
                    "features": [float(v) for v in sample.features],
                    "screen_x": float(sample.screen_x),
                    "screen_y": float(sample.screen_y),
                }
                for sample in samples
            ],
        }

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2))
        self.logger.info(f"Saved {len(payload['samples'])} calibration samples to {self.path}")
        return self.path

    def load(self) -> List[CalibrationSample]:
        """
        Read calibration samples from disk

        Returns:
            Samples in saved order, or an empty list if the file does not exist

        Raises:
            ValueError: If the file is not a valid calibration dump
        """
        if not self.path.exists():
            self.logger.info(f"No stored calibration at {self.path}")
            return []

        try:
            data = json.loads(self.path.read_text())
            samples = [
                CalibrationSample(
                    features=tuple(float(v) for v in entry["features"]),
                    screen_x=float(entry["screen_x"]),
                    screen_y=float(entry["screen_y"]),
                )
                for entry in data["samples"]
            ]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Malformed calibration file {self.path}: {exc}") from exc

        self.logger.info(f"Loaded {len(samples)} calibration samples from {self.path}")
        return samples
