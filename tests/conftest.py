"""Pytest configuration and fixtures for the test suite."""

import pytest

from everyquery.engine.shared import SharedEngine
from tests.test_utils import FakeEngine, fake_items


@pytest.fixture
def fake_engine() -> FakeEngine:
    """Provide an engine holding 25 plain files."""
    return FakeEngine(fake_items(25))


@pytest.fixture
def engine(fake_engine: FakeEngine) -> SharedEngine:
    """Provide the fake engine behind a shared handle."""
    return SharedEngine(fake_engine)
