"""Pytest configuration and shared fixtures."""

from datetime import datetime

import pytest

from pattern_demos.logging.config import configure_logging
from pattern_demos.observer import WeatherStation
from pattern_demos.output import MemorySink
from pattern_demos.singleton import Logger

configure_logging(level="WARNING")

FIXED_TIME = datetime(2024, 5, 1, 12, 30, 45)


@pytest.fixture(autouse=True)
def fresh_logger_singleton():
    """Every test starts before the Logger has been created."""
    Logger.reset_instance()
    yield
    Logger.reset_instance()


@pytest.fixture
def logger() -> Logger:
    """The singleton Logger with a fixed clock."""
    instance = Logger.get_instance()
    instance.configure(clock=lambda: FIXED_TIME)
    return instance


@pytest.fixture
def sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def station() -> WeatherStation:
    return WeatherStation()
