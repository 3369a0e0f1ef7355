"""
statekit utilities.

Classes:
- SubscriberSet: Copy-on-write, insertion-ordered callback registry
"""

from .subscriber_set import Callback, SubscriberSet

__all__ = [
    "SubscriberSet",
    "Callback",
]
