"""Logging setup for the snake_cube package.

Progress, warnings and worker failures are diagnostics and go to stderr.
Solvable sequences are results and are written to stdout by the explorer.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Attach a stderr handler (and optionally a file handler) to the package logger.

    Safe to call repeatedly: previous handlers are replaced.
    """
    logger = logging.getLogger("snake_cube")
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("logging to %d handler(s)", len(handlers))
    return logger
