"""Fixtures for the test suite."""

import pytest

from listsync.marketing import marketing_handler


@pytest.fixture(autouse=True)
def _reset_marketing_backend():
    """Start every test with a fresh marketing backend."""
    marketing_handler.reset()
    yield
    marketing_handler.reset()


@pytest.fixture(name="backend")
def fixture_backend():
    """Return the configured marketing backend, an in-memory one in tests."""
    return marketing_handler()
