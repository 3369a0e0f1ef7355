"""
statekit - Observable State with Undo/Redo History

An observable state container: shallow-merge and replacement updates, dotted
path reads and structurally shared writes, change subscriptions with
per-path watchers, structural diffs, and a bounded undo/redo history.
"""

__version__ = "0.1.0"

from .config import StoreConfig
from .diff import Change, ChangeKind, diff, values_equal
from .exceptions import (
    InvalidArgumentError,
    ReentrancyError,
    StateError,
    SubscriberFailure,
    UpdateFunctionError,
)
from .history import HistoryRing
from .paths import assoc_in, get_in, parse_path
from .state import StateContainer, UpdateResult
from .store import Store, create_store
from .updates import UpdateByFunction, UpdateByPatch
from .util import SubscriberSet

__all__ = [
    # Entry point
    "create_store",
    "Store",
    "StoreConfig",
    # Container and results
    "StateContainer",
    "UpdateResult",
    "UpdateByFunction",
    "UpdateByPatch",
    # Building blocks
    "HistoryRing",
    "SubscriberSet",
    "Change",
    "ChangeKind",
    "diff",
    "values_equal",
    "parse_path",
    "get_in",
    "assoc_in",
    # Exceptions
    "StateError",
    "InvalidArgumentError",
    "UpdateFunctionError",
    "ReentrancyError",
    "SubscriberFailure",
]
