"""Unit tests for store configuration."""

import logging

import pytest

from statekit import (
    InvalidArgumentError,
    StateContainer,
    StoreConfig,
    create_store,
)
from statekit.config import resolve_config


@pytest.mark.unit
def test_defaults():
    """Default configuration keeps ten snapshots and bounds reentrancy"""
    config = StoreConfig()

    assert config.max_history_length == 10
    assert config.max_reentrancy_depth == 32
    assert config.persist is False
    assert config.key is None


@pytest.mark.unit
def test_resolve_config_applies_keyword_overrides():
    """Keyword options override fields of the base config"""
    base = StoreConfig(max_history_length=4)

    config = resolve_config(base, max_reentrancy_depth=None)

    assert config.max_history_length == 4
    assert config.max_reentrancy_depth is None


@pytest.mark.unit
@pytest.mark.edge_case
def test_unknown_option_is_rejected():
    """Misspelled option names are not silently ignored"""
    with pytest.raises(InvalidArgumentError, match="maxHistoryLength"):
        resolve_config(maxHistoryLength=5)


@pytest.mark.unit
@pytest.mark.edge_case
@pytest.mark.parametrize(
    "options",
    [
        {"max_history_length": 0},
        {"max_history_length": "10"},
        {"max_reentrancy_depth": 0},
        {"key": 42},
    ],
)
def test_invalid_values_are_rejected(options):
    """Out-of-range or wrongly typed values raise InvalidArgumentError"""
    with pytest.raises(InvalidArgumentError):
        StoreConfig(**options)


@pytest.mark.unit
def test_persist_flag_logs_warning_through_create_store(caplog):
    """Requesting persistence through the factory warns that nothing is stored"""
    with caplog.at_level(logging.WARNING):
        store = create_store({"theme": "dark"}, persist=True, key="app-settings")

    assert store.get_state() == {"theme": "dark"}
    assert "app-settings" in caplog.text


@pytest.mark.unit
def test_persist_flag_logs_warning_on_direct_construction(caplog):
    """A container built straight from a config warns as well"""
    with caplog.at_level(logging.WARNING):
        StateContainer({}, StoreConfig(persist=True, key="direct"))

    assert "direct" in caplog.text


@pytest.mark.unit
def test_resolving_a_persist_config_alone_does_not_warn(caplog):
    """Only building a container warns, so the warning fires once per store"""
    with caplog.at_level(logging.WARNING):
        config = resolve_config(persist=True, key="app-settings")

    assert config.persist is True
    assert caplog.text == ""
