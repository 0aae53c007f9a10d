"""Test configuration and fixtures."""

import logging

import pytest

from cryptoserve_hashnames.config import get_settings
from cryptoserve_hashnames.registry import HashNameRegistry


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fresh_registry():
    """Create a fresh registry over the built-in table."""
    return HashNameRegistry(reject_collisions=True)


@pytest.fixture
def package_logger():
    """Restore the package logger after tests that reconfigure it."""
    logger = logging.getLogger("cryptoserve_hashnames")
    handlers = logger.handlers[:]
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
