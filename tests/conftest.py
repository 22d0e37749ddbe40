import logging

import pytest

from poseur import Faker, FakerSettings, Operation
from utils import FakeDog


class Function(Operation):
    PING = "ping"
    PONG = "pong"
    ADD = "add"


@pytest.fixture
def function():
    """Operation enum shared by the engine-level tests"""
    return Function


@pytest.fixture
def faker_settings():
    """Settings with defaults only, independent of the environment"""
    return FakerSettings(_env_file=None, LOG_LEVEL="DEBUG", NUMERIC_MATCH_POLICY="strict")


@pytest.fixture
def faker(faker_settings):
    return Faker(faker_settings)


@pytest.fixture
def dog():
    return FakeDog()


@pytest.fixture
def capture_logs(caplog):
    """Capture poseur logs for testing"""
    caplog.set_level(logging.DEBUG, logger="poseur")
    yield caplog
