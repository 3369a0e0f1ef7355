"""
statekit exceptions.

Argument validation errors are raised to the immediate caller before any
state is touched. Subscriber failures are collected and logged by the
notification loop and never raised from it.
"""

from typing import Any, Callable


class StateError(Exception):
    """Base class for all statekit errors."""

    pass


class InvalidArgumentError(StateError, ValueError):
    """Raised when an operation receives an argument of the wrong shape."""

    pass


class UpdateFunctionError(StateError):
    """Raised when a function-form update raises while computing the next state."""

    pass


class ReentrancyError(StateError):
    """Raised when nested updates from subscribers exceed the configured depth."""

    pass


class SubscriberFailure(StateError):
    """A subscriber callback raised during notification."""

    def __init__(self, callback: Callable[..., Any], error: BaseException):
        self.callback = callback
        self.error = error
        name = getattr(callback, "__qualname__", repr(callback))
        super().__init__(f"Subscriber {name} failed: {error!r}")


__all__ = [
    "StateError",
    "InvalidArgumentError",
    "UpdateFunctionError",
    "ReentrancyError",
    "SubscriberFailure",
]
