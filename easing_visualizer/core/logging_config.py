"""
Logging configuration for the easing visualizer.

Modules grab a logger with ``get_logger(__name__)``; applications call
``configure_logging`` once at startup.
"""

import functools
import logging
import time
from typing import Optional

PACKAGE_LOGGER = "easing_visualizer"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module."""
    return logging.getLogger(name)


def configure_logging(level: int = logging.INFO, log_file: Optional[str] = None):
    """
    Configure package-wide logging.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO)
        log_file: Optional file path for logging output
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Replace handlers so repeated calls don't duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(DEFAULT_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def log_performance(func):
    """Decorator to log how long a function took, at DEBUG level."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = (time.perf_counter() - start) * 1000
        logger.debug(f"{func.__name__} took {elapsed:.2f}ms")
        return result

    return wrapper


class LogContext:
    """
    Temporarily change the package log level.

    Usage:
        with LogContext(logging.DEBUG):
            evaluate("drift", {"x": 3, "y": 7}, 0.5)
    """

    def __init__(self, level: int, name: str = PACKAGE_LOGGER):
        self.level = level
        self.logger = logging.getLogger(name)
        self._previous = None

    def __enter__(self):
        self._previous = self.logger.level
        self.logger.setLevel(self.level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self._previous)
        return False


__all__ = [
    "get_logger",
    "configure_logging",
    "log_performance",
    "LogContext",
]
