"""Pytest configuration: logging setup and a clean trace per test."""
import pytest
from src.config import LOG_LEVEL
from src.observability.logging_config import configure_logging
from src.observability.telemetry import clear_trace

configure_logging(LOG_LEVEL)


@pytest.fixture(autouse=True)
def _reset_trace():
    clear_trace()
    yield
