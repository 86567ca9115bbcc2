"""
Utilities: configuration, logging and calibration persistence
"""

from gazetrail.utils.config_loader import EngineConfig, load_config, load_engine_config
from gazetrail.utils.logger import setup_logger, get_logger
from gazetrail.utils.calibration_store import CalibrationStore

__all__ = [
    'EngineConfig',
    'load_config',
    'load_engine_config',
    'setup_logger',
    'get_logger',
    'CalibrationStore'
]
