"""Pytest configuration and shared fixtures for eventual tests."""

import pytest

from eventual import reset_config
from eventual._logging import clear_log_hooks


def pytest_runtest_setup(item):
    """Every test starts from the default configuration and no log hooks."""
    reset_config()
    clear_log_hooks()


def pytest_runtest_teardown(item):
    reset_config()
    clear_log_hooks()


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from eventual import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from eventual import Nothing

    return Nothing()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from eventual import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from eventual import Err

    return Err('test error')
