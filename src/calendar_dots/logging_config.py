"""Logging configuration for calendar dots."""

import sys
from typing import TextIO

from loguru import logger

LOG_FORMAT = "{level.icon} {message}"


def configure_logging(*, verbose: bool = False, sink: TextIO | None = None) -> int:
    """Route loguru output to a single sink.

    Dot assembly logs per-note detail at DEBUG, so the default INFO level
    stays quiet while a calendar month renders.

    Returns:
        The loguru handler id, for callers that want to remove it later.
    """
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    return logger.add(sink or sys.stderr, level=level, format=LOG_FORMAT)
