"""Logging setup for hosts embedding minilang_core.

The library itself only creates loggers; nothing is configured on import.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure root logging.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.  Logs go to stdout if None.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    config: dict = {"level": numeric_level, "format": LOG_FORMAT}
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        config["filename"] = log_file
    else:
        config["stream"] = sys.stdout

    logging.basicConfig(**config)
    logging.getLogger(__name__).info("Logging initialized at %s level", level.upper())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for *name* (usually ``__name__``)."""
    return logging.getLogger(name)
