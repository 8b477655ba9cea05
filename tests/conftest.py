import logging
from logging.handlers import RotatingFileHandler

import pytest

from pattern_catalogue.application.console import DemoConsole
from pattern_catalogue.bootstrap import create_container
from pattern_catalogue.domain.creational import Singleton


@pytest.fixture(autouse=True)
def reset_singleton():
    """Give every test a fresh Singleton slot."""
    Singleton.reset()
    yield
    Singleton.reset()


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield root_logger
    # pytest's own capture handlers are subclasses, so exact types are ours
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, RotatingFileHandler, logging.NullHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def container():
    """Application container with default configuration."""
    return create_container()


@pytest.fixture
def console():
    return DemoConsole()


@pytest.fixture
def emitted():
    """List that collects lines passed to an ``emit`` callable."""
    return []
