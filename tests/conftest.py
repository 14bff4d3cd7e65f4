import logging

import pytest

from py_psychrocalc.config import restore_solver_defaults
from py_psychrocalc.logger import logger

logger.setLevel(logging.DEBUG)

STANDARD_PRESSURE = 101325.0


@pytest.fixture(autouse=True)
def solver_defaults():
    """Every test starts and ends with the default solver configuration."""
    restore_solver_defaults()
    yield
    restore_solver_defaults()


@pytest.fixture
def pressure():
    return STANDARD_PRESSURE
