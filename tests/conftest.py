"""
Shared pytest fixtures and configuration for statekit tests.
"""

import pytest

from statekit import StateContainer, StoreConfig, create_store
from statekit.paths import clear_path_cache


@pytest.fixture(autouse=True)
def reset_path_cache():
    """Clear memoised path parses before each test to prevent leakage."""
    clear_path_cache()


@pytest.fixture
def counter_store():
    """Provide a fresh store holding a single counter."""
    return create_store({"count": 0})


@pytest.fixture
def container():
    """Provide a fresh container with nested state."""
    return StateContainer({"a": {"b": 1, "c": 2}, "d": 3})


@pytest.fixture
def small_history_container():
    """Provide a container whose history holds only three snapshots."""
    return StateContainer({"count": 0}, StoreConfig(max_history_length=3))


@pytest.fixture
def recorder():
    """Provide a callback that records every snapshot it receives."""

    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, snapshot):
            self.calls.append(snapshot)

    return Recorder()
