"""
Configuration loader utility
"""

import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from gazetrail import constants as const
from gazetrail.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def load_config(config_path: str = const.DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load configuration from YAML file

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary with configuration values
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_file, 'r') as f:
        config = yaml.safe_load(f)

    # An empty file loads as None
    return config or {}


@dataclass
class EngineConfig:
    """Recognized engine options"""
    ridge_parameter: float = const.DEFAULT_RIDGE_PARAMETER
    trail_buffer_capacity: int = const.DEFAULT_TRAIL_BUFFER_CAPACITY
    calibration_buffer_capacity: int = const.DEFAULT_CALIBRATION_BUFFER_CAPACITY
    trail_decay_ms: float = const.DEFAULT_TRAIL_DECAY_MS
    smoothing_enabled: bool = const.DEFAULT_SMOOTHING_ENABLED

    def validate(self) -> 'EngineConfig':
        """
        Check every option, raising ConfigurationError on the first bad one

        Returns:
            self, for chaining
        """
        if not self.ridge_parameter > 0:
            raise ConfigurationError(f"ridge_parameter must be > 0, got {self.ridge_parameter}")
        for name in ('trail_buffer_capacity', 'calibration_buffer_capacity'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        if not self.trail_decay_ms >= 0:
            raise ConfigurationError(f"trail_decay_ms must be >= 0, got {self.trail_decay_ms}")
        if not isinstance(self.smoothing_enabled, bool):
            raise ConfigurationError(f"smoothing_enabled must be a boolean, got {self.smoothing_enabled!r}")
        return self

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'EngineConfig':
        """
        Build config from a mapping

        Reads the 'engine' section when present, otherwise treats the mapping
        itself as the engine options. Missing keys keep their defaults.

        Args:
            data: Parsed configuration (may be None)

        Returns:
            Validated EngineConfig
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration must be a mapping, got {type(data).__name__}")
        section = data.get('engine', data) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"Engine configuration must be a mapping, got {type(section).__name__}")

        known = {f.name for f in fields(cls)}
        for key in section:
            if key not in known and key not in ('logging', 'calibration', 'session'):
                logger.warning(f"Ignoring unknown engine option: {key}")

        try:
            config = cls(
                ridge_parameter=float(section.get('ridge_parameter', const.DEFAULT_RIDGE_PARAMETER)),
                trail_buffer_capacity=int(section.get('trail_buffer_capacity', const.DEFAULT_TRAIL_BUFFER_CAPACITY)),
                calibration_buffer_capacity=int(section.get(
                    'calibration_buffer_capacity', const.DEFAULT_CALIBRATION_BUFFER_CAPACITY
                )),
                trail_decay_ms=float(section.get('trail_decay_ms', const.DEFAULT_TRAIL_DECAY_MS)),
                smoothing_enabled=section.get('smoothing_enabled', const.DEFAULT_SMOOTHING_ENABLED),
            )
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid engine configuration: {exc}") from exc

        return config.validate()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_engine_config(config_path: Optional[str] = None) -> EngineConfig:
    """
    Load engine options from YAML, falling back to defaults

    Args:
        config_path: Path to configuration file (default: config/config.yaml)

    Returns:
        Validated EngineConfig
    """
    path = config_path or const.DEFAULT_CONFIG_PATH
    try:
        data = load_config(path)
    except FileNotFoundError:
        logger.warning(f"Config file not found at {path}, using defaults")
        data = {}
    return EngineConfig.from_dict(data)
