"""
statekit State Container
========================

``StateContainer`` owns one snapshot and everything that happens around
replacing it: the undo/redo history, the structural diff against the previous
snapshot, and the fan-out to subscribers.

Updates come in two shapes with deliberately different semantics:

```python
container = StateContainer({"count": 0, "name": "counter"})

# Mapping: shallow merge, untouched keys survive
container.set_state({"count": 1})
container.get_state()  # {"count": 1, "name": "counter"}

# Function: full replacement, keys the function omits are gone
container.set_state(lambda prev: {"count": prev["count"] + 1})
container.get_state()  # {"count": 2}
```

Reentrancy
----------

Everything is synchronous. A subscriber may update the same container while
it is being notified; the nested update runs its own history push, diff and
notification pass to completion before the outer pass moves on to its next
subscriber. Nothing stops a subscriber that updates on every notification
from recursing forever, so the nesting depth is bounded by
``StoreConfig.max_reentrancy_depth``. Crossing the bound raises
``ReentrancyError`` before any state is touched; updates already committed by
shallower levels stay committed, and the error propagates back to the caller
that started the outermost update.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from .config import StoreConfig
from .diff import Change, diff, values_equal
from .exceptions import InvalidArgumentError, ReentrancyError
from .history import HistoryRing
from .paths import assoc_in, get_in, parse_path
from .updates import Snapshot, UpdateByFunction, as_update
from .util.subscriber_set import SubscriberSet


@dataclass(frozen=True, slots=True)
class UpdateResult:
    """Outcome of a successful ``set_state`` call."""

    success: bool
    previous_state: Snapshot
    current_state: Snapshot
    changes: List[Change] = field(default_factory=list)


class StateContainer:
    """
    Observable state with bounded undo/redo history.

    The live snapshot is never mutated in place. Every successful update
    replaces it with a new mapping, so snapshots handed to callers and kept in
    history stay valid as long as callers do not mutate them either.
    """

    def __init__(
        self,
        initial_state: Optional[Snapshot] = None,
        config: Optional[StoreConfig] = None,
    ):
        if initial_state is None:
            initial_state = {}
        if not isinstance(initial_state, Mapping):
            raise InvalidArgumentError(
                f"Initial state must be a mapping, got {type(initial_state).__name__}"
            )

        self._config = config if config is not None else StoreConfig()
        if self._config.persist:
            logging.warning(
                f"Persistence requested for store key {self._config.key!r}, "
                "but no storage backend is configured; state stays in memory"
            )

        self._state: Snapshot = initial_state
        self._history: HistoryRing[Snapshot] = HistoryRing(
            initial_state, self._config.max_history_length
        )
        self._subscribers = SubscriberSet()
        self._depth = 0

    # ========================================================================
    # READ
    # ========================================================================

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def history(self) -> HistoryRing[Snapshot]:
        """The undo/redo timeline. Read it, do not push to it."""
        return self._history

    def get_state(self) -> Snapshot:
        """Current snapshot, by reference."""
        return self._state

    def select(self, path: str, default: Any = None) -> Any:
        """
        Value at a dotted path, or ``default`` if any segment is missing.

        Raises:
            InvalidArgumentError: If ``path`` is not a string.
        """
        return get_in(self._state, parse_path(path), default)

    # ========================================================================
    # WRITE
    # ========================================================================

    def set_state(self, update: Any) -> UpdateResult:
        """
        Apply a merge (mapping) or replacement (function) update.

        Raises:
            InvalidArgumentError: If ``update`` is neither a mapping nor a
                function, or the function does not return a mapping.
            UpdateFunctionError: If the update function raises.
            ReentrancyError: If subscribers have nested updates too deeply.
        """
        tagged = as_update(update)
        self._check_depth("set_state")

        previous = self._state
        current = tagged.apply(previous)

        self._state = current
        self._history.push(current)
        changes = diff(previous, current)
        self._notify(current)

        return UpdateResult(
            success=True,
            previous_state=previous,
            current_state=current,
            changes=changes,
        )

    def patch(self, path: str, value: Any) -> UpdateResult:
        """
        Set the value at a dotted path.

        Ancestors along the path are copied, every other branch is shared with
        the previous snapshot. The result replaces the snapshot outright.
        """
        segments = parse_path(path)
        return self.set_state(
            UpdateByFunction(lambda previous: assoc_in(previous, segments, value))
        )

    # ========================================================================
    # HISTORY
    # ========================================================================

    def can_undo(self) -> bool:
        return self._history.can_undo()

    def can_redo(self) -> bool:
        return self._history.can_redo()

    def undo(self) -> None:
        """Step back one history entry and notify. No-op at the oldest entry."""
        self._check_depth("undo")
        snapshot = self._history.undo()
        if snapshot is None:
            logging.debug("Nothing to undo")
            return
        self._state = snapshot
        self._notify(snapshot)

    def redo(self) -> None:
        """Step forward one history entry and notify. No-op at the newest entry."""
        self._check_depth("redo")
        snapshot = self._history.redo()
        if snapshot is None:
            logging.debug("Nothing to redo")
            return
        self._state = snapshot
        self._notify(snapshot)

    def reset(self) -> None:
        """
        Restore the oldest history entry and notify.

        The history itself is left alone. Once entries have been evicted the
        oldest entry is no longer the initial state.
        """
        self._check_depth("reset")
        snapshot = self._history.first()
        self._state = snapshot
        self._notify(snapshot)

    # ========================================================================
    # SUBSCRIPTION
    # ========================================================================

    def subscribe(self, callback: Callable[[Snapshot], Any]) -> Callable[[], None]:
        """
        Call ``callback(snapshot)`` after every update, undo, redo and reset.

        Returns:
            A function that unsubscribes ``callback``.
        """
        if not callable(callback):
            raise InvalidArgumentError("subscribe must receive a callable")

        self._subscribers.add(callback)

        def unsubscribe() -> None:
            self._subscribers.remove(callback)

        return unsubscribe

    def watch_value(
        self, path: str, callback: Callable[[Any, Any], Any]
    ) -> Callable[[], None]:
        """
        Call ``callback(current, previous)`` when the value at ``path`` changes.

        Returns:
            A function that stops watching.
        """
        segments = parse_path(path)
        if not callable(callback):
            raise InvalidArgumentError("watch_value must receive a callable")

        previous = get_in(self._state, segments)

        def watcher(_snapshot: Snapshot) -> None:
            nonlocal previous
            current = get_in(self._state, segments)
            if values_equal(current, previous):
                return
            last, previous = previous, current
            callback(current, last)

        return self.subscribe(watcher)

    # ========================================================================
    # INTERNAL
    # ========================================================================

    def _check_depth(self, operation: str) -> None:
        limit = self._config.max_reentrancy_depth
        if limit is not None and self._depth >= limit:
            raise ReentrancyError(
                f"{operation} called from within {self._depth} nested "
                f"notification passes (limit {limit})"
            )

    def _notify(self, snapshot: Snapshot) -> None:
        self._depth += 1
        try:
            self._subscribers.notify_all(snapshot)
        finally:
            self._depth -= 1

    def __repr__(self) -> str:
        return (
            f"StateContainer(keys={list(self._state)!r}, history={self._history!r}, "
            f"subscribers={len(self._subscribers)})"
        )


__all__ = ["StateContainer", "UpdateResult"]
