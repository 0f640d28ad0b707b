"""Logging configuration for the related-products engine."""

from __future__ import annotations

import logging
import sys
from typing import IO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    level: int | str = logging.INFO,
    module_name: str = "src",
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach a stream handler to ``module_name`` and return that logger.

    Module loggers (``logging.getLogger(__name__)``) under the package
    propagate here. Calling it again only adjusts the level.

    Args:
        level: Logging level, numeric or name ("DEBUG", "INFO", ...).
        module_name: Name of the logger to configure.
        stream: Handler stream (default sys.stdout).

    Returns:
        Configured logger.
    """
    level = _resolve_level(level)
    logger = logging.getLogger(module_name)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
