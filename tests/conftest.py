"""Pytest configuration and fixtures for the test suite."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from termwatch.events import EventBus, create_event_bus
from tests.test_utils import FakeNow, FakeTickerFactory


@pytest.fixture
def ticker_factory() -> FakeTickerFactory:
    """Provide a ticker factory whose ticks are delivered by hand."""
    return FakeTickerFactory()


@pytest.fixture
def now() -> FakeNow:
    """Provide a settable time source."""
    return FakeNow()


@pytest.fixture
def event_bus() -> EventBus:
    """Provide a fresh event bus."""
    return create_event_bus()


@pytest.fixture
def temp_workspace() -> Generator[Path, None, None]:
    """Create a temporary workspace for file operations."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)
