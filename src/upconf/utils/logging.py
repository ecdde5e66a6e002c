"""Logging setup for upconf."""

import logging
import sys
from typing import Optional

LOGGER_NAME = "upconf"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.WARNING, format_string: Optional[str] = None) -> logging.Logger:
    """
    Send upconf log records to stderr.
    
    Only the package logger is configured, so applications embedding the
    store keep control of the root logger. Calling this again replaces the
    handler instead of adding a second one.
    
    Args:
        level: Logging level (default: WARNING)
        format_string: Custom format string (optional)
    
    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    
    for handler in list(logger.handlers):
        if getattr(handler, "_upconf", False):
            logger.removeHandler(handler)
    
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler._upconf = True
    
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
