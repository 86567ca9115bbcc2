"""
Logging configuration for the gaze prediction engine
Console output plus an optional daily log file for session analysis
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

LOGGER_NAME = "gazetrail"


def setup_logger(
    name: str = LOGGER_NAME,
    log_level: str = "INFO",
    log_dir: Optional[str] = None,
    log_file: Optional[str] = None,
    console_output: bool = True
) -> logging.Logger:
    """
    Setup logger with file and console handlers

    Module loggers (gazetrail.regression.ridge_engine, ...) propagate to the
    logger configured here.

    Args:
        name: Logger name
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files (default: 'logs' when log_file is set)
        log_file: Log file name (default: 'gazetrail_YYYYMMDD.log')
        console_output: Whether to output to console

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Re-running setup must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    simple_formatter = logging.Formatter(
        '%(levelname)s: %(message)s'
    )

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(simple_formatter)
        logger.addHandler(console_handler)

    if log_dir or log_file:
        log_directory = Path(log_dir) if log_dir else Path("logs")
        log_directory.mkdir(parents=True, exist_ok=True)

        if not log_file:
            timestamp = datetime.now().strftime("%Y%m%d")
            log_file = f"gazetrail_{timestamp}.log"

        log_path = log_directory / log_file

        # Per-frame debug output only goes to the file
        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_path}")

    return logger


def setup_logger_from_config(config: Optional[Dict[str, Any]]) -> logging.Logger:
    """
    Setup the package logger from the 'logging' section of a parsed config

    Args:
        config: Full configuration mapping (may be None)

    Returns:
        Configured logger instance
    """
    logging_config = (config or {}).get('logging', {}) or {}
    return setup_logger(
        name=LOGGER_NAME,
        log_level=logging_config.get('level', 'INFO'),
        log_dir=logging_config.get('log_directory', None),
        log_file=logging_config.get('log_file', None),
        console_output=logging_config.get('console_output', True)
    )


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get existing logger instance

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
