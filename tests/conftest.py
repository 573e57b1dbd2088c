"""Pytest configuration and fixtures."""

import logging

import pytest

from expectkit.config import reset_configuration


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from expectkit loggers after each test.

    Loggers stay registered: modules hold references to their own
    ``expectkit.*`` loggers, which must keep propagating to the same parent.
    """
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("expectkit"):
            continue
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def default_configuration():
    """Every test starts and ends with the default configuration."""
    reset_configuration()
    yield
    reset_configuration()
