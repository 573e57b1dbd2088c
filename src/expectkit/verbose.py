"""Debug log handlers for the expectkit package logger."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "expectkit"

_FORMATTER = logging.Formatter(
    fmt="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)


def teardown_logger(logger_name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Close and detach every handler of ``logger_name``."""
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    return logger


def setup_logger(
    debug_file: Path,
    verbose: bool = False,
    logger_name: str = PACKAGE_LOGGER,
    level: int = logging.DEBUG,
) -> logging.Logger:
    """
    Send expectation debug output to ``debug_file``.

    Handlers from a previous setup of the same logger are replaced, so the
    active configuration can be applied again without duplicating output.
    Every ``expectkit.*`` module logger propagates into the package logger.

    Args:
        debug_file: Path to debug log file (always created)
        verbose: If True, also log to stderr
        logger_name: Logger to configure
        level: Minimum level written by the handlers

    Returns:
        The configured logger.
    """
    logger = teardown_logger(logger_name)
    logger.disabled = False
    logger.setLevel(level)

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    handlers: list[logging.Handler] = [logging.FileHandler(debug_file, mode="a")]
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(_FORMATTER)
        logger.addHandler(handler)

    return logger
