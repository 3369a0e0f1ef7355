"""
Copy-on-Write Subscriber Set
============================

Ordered, deduplicated collection of change callbacks.

Notification iterates over an immutable tuple of the callbacks registered when
the pass started. Adding or removing callbacks builds a new tuple on the next
pass instead of mutating the one being iterated, so subscribers may freely
subscribe and unsubscribe from inside a callback:

- a callback removed during a pass is skipped if it has not run yet;
- a callback added during a pass is first called on the next pass.
"""

import logging
from types import BuiltinMethodType, MethodType
from typing import Any, Callable, List, Optional, Tuple

from ..exceptions import ReentrancyError, SubscriberFailure

Callback = Callable[[Any], Any]


def _same_callback(a: Callback, b: Callback) -> bool:
    # Bound methods are rebuilt on every attribute access, so they match by
    # equality; every other callable matches by identity only.
    if a is b:
        return True
    if isinstance(a, (MethodType, BuiltinMethodType)):
        return a == b
    return False


class SubscriberSet:
    """
    Insertion-ordered callback registry with per-callback failure isolation.

    Callbacks do not need to be hashable.

    Example:
        subscribers = SubscriberSet()
        subscribers.add(print)
        subscribers.notify_all({"count": 1})  # prints {'count': 1}
        subscribers.remove(print)
    """

    __slots__ = ("_members", "_shared")

    def __init__(self):
        self._members: List[Callback] = []
        self._shared: Optional[Tuple[Callback, ...]] = None

    def _find(self, callback: Callback) -> int:
        for index, member in enumerate(self._members):
            if _same_callback(member, callback):
                return index
        return -1

    def add(self, callback: Callback) -> None:
        """Register ``callback``; registering it again keeps its original position."""
        if self._find(callback) >= 0:
            return
        self._members.append(callback)
        self._shared = None

    def remove(self, callback: Callback) -> bool:
        """Unregister ``callback``. Returns False if it was not registered."""
        index = self._find(callback)
        if index < 0:
            logging.warning(
                "This callback has already been removed or was never subscribed"
            )
            return False
        del self._members[index]
        self._shared = None
        return True

    def _current(self) -> Tuple[Callback, ...]:
        if self._shared is None:
            self._shared = tuple(self._members)
        return self._shared

    def notify_all(self, value: Any) -> List[SubscriberFailure]:
        """
        Call every subscriber with ``value`` in registration order.

        A subscriber that raises is logged and reported in the returned list;
        the remaining subscribers still run. ReentrancyError is not caught.
        """
        failures: List[SubscriberFailure] = []

        for callback in self._current():
            if self._find(callback) < 0:
                continue
            try:
                callback(value)
            except ReentrancyError:
                raise
            except Exception as e:
                failure = SubscriberFailure(callback, e)
                logging.error(f"Error in subscriber callback: {e}", exc_info=e)
                failures.append(failure)

        return failures

    def clear(self) -> None:
        self._members.clear()
        self._shared = None

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, callback: object) -> bool:
        return self._find(callback) >= 0

    def __iter__(self):
        return iter(self._current())


__all__ = ["SubscriberSet", "Callback"]
