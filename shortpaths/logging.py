"""Logging utilities for shortpaths.

All module loggers live under the ``shortpaths`` package logger and
propagate to it, so a single stderr handler and a single level govern the
whole package. Nothing reaches the root logger.

Long computations report progress at DEBUG level through ``log_progress``:
Bellman-Ford every 200 rounds and Johnson every 50 solved sources. Phase
changes are reported at INFO level.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE = "shortpaths"

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_DEFAULT_LEVEL)
        logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for a shortpaths module.

    Args:
        name: Usually ``__name__``. Names outside the package are placed
            under it; None returns the package logger itself.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Running Bellman-Ford from vertex %d", 1)
    """
    package = _package_logger()
    if name is None or name == PACKAGE:
        return package
    if not name.startswith(PACKAGE + "."):
        name = f"{PACKAGE}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int | str) -> None:
    """Set the level of the package logger, e.g. ``"DEBUG"`` or ``logging.INFO``."""
    _package_logger().setLevel(_coerce_level(level))


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Replace the package handler and set the level.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).

    Example:
        >>> configure_logging(level="INFO")
    """
    logger = _package_logger()
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_coerce_level(level))


def log_progress(logger: logging.Logger, label: str, done: int, total: int, every: int) -> None:
    """Emit a DEBUG progress line when ``done`` is a multiple of ``every``."""
    if done % every == 0:
        logger.debug("%s: %d of %d", label, done, total)
