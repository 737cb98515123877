import logging
from logging.handlers import RotatingFileHandler

import pytest

from pattern_catalog.infrastructure.patterns.singleton_registry import SingletonRegistry


@pytest.fixture(autouse=True)
def reset_singleton_registry():
    """Give every test a fresh set of registry-managed singletons."""
    SingletonRegistry.get_instance().reset()
    yield
    SingletonRegistry.get_instance().reset()


@pytest.fixture(autouse=True)
def remove_configured_handlers():
    """Drop handlers installed by setup_logging so they do not outlive the test."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
