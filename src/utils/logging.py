"""Logging utilities for the project."""

import logging
import os
import sys
from typing import Optional

from config.config import LOG_FILE_ENV_VAR, LOG_LEVEL_ENV_VAR


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """Setup logging configuration for the project.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Falls back to ``DATA_PANEL_LOG_LEVEL`` then INFO.
        log_file: Optional path to log file. Falls back to ``DATA_PANEL_LOG_FILE``.
        format_string: Custom format string for log messages
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV_VAR, "INFO")
    if log_file is None:
        log_file = os.getenv(LOG_FILE_ENV_VAR) or None
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Configure root logger
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=format_string,
        handlers=[
            logging.StreamHandler(sys.stdout),
            *([logging.FileHandler(log_file)] if log_file else [])
        ]
    )


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    # Ensure basic configuration exists
    if not logging.getLogger().handlers:
        setup_logging()

    return logging.getLogger(name)
