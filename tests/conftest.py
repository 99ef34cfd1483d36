"""Shared test fixtures."""
import random

import pytest

from core.logging import configure_logging


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Keep per-question debug events out of the test output."""
    configure_logging(level="WARNING")


@pytest.fixture
def rng():
    """Seeded random source for reproducible draws."""
    return random.Random(1234)
