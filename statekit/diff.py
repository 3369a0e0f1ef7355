"""
Structural Diff
===============

Computes the list of changes that turns one snapshot into another.

Nested mappings are walked recursively and reported with dotted paths. Lists,
tuples, numpy arrays and every other non-mapping value are compared as opaque
values: a changed list yields a single ``UPDATED`` record for its key, never
per-element records.

Example:
    >>> [c.to_dict() for c in diff({"a": {"b": 1}}, {"a": {"b": 2}})]
    [{'kind': 'updated', 'path': 'a.b', 'old_value': 1, 'new_value': 2}]
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

import numpy as np

from .paths import join_path


class ChangeKind(Enum):
    """Kind of structural change."""

    ADDED = "added"
    UPDATED = "updated"
    REMOVED = "removed"


@dataclass(frozen=True, slots=True)
class Change:
    """
    One structural change at a dotted path.

    ``value`` is set for added and removed keys; ``old_value`` and
    ``new_value`` are set for updated keys.
    """

    kind: ChangeKind
    path: str
    value: Any = None
    old_value: Any = None
    new_value: Any = None

    @classmethod
    def added(cls, path: str, value: Any) -> "Change":
        return cls(ChangeKind.ADDED, path, value=value)

    @classmethod
    def removed(cls, path: str, value: Any) -> "Change":
        return cls(ChangeKind.REMOVED, path, value=value)

    @classmethod
    def updated(cls, path: str, old_value: Any, new_value: Any) -> "Change":
        return cls(ChangeKind.UPDATED, path, old_value=old_value, new_value=new_value)

    def to_dict(self) -> Dict[str, Any]:
        if self.kind is ChangeKind.UPDATED:
            return {
                "kind": self.kind.value,
                "path": self.path,
                "old_value": self.old_value,
                "new_value": self.new_value,
            }
        return {"kind": self.kind.value, "path": self.path, "value": self.value}


def values_equal(a: Any, b: Any) -> bool:
    """
    Identity, then same type and equality.

    ``1``, ``1.0`` and ``True`` are different values here even though they
    compare equal. numpy arrays compare element-wise as a whole.
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    try:
        if isinstance(a, np.ndarray):
            return bool(np.array_equal(a, b))
        return bool(a == b)
    except (ValueError, TypeError):
        return False


def diff(
    prev_state: Mapping[str, Any], next_state: Mapping[str, Any], path_prefix: str = ""
) -> List[Change]:
    """
    List the changes from ``prev_state`` to ``next_state``.

    Changes for ``next_state``'s keys come first, in its iteration order,
    followed by removals in ``prev_state``'s iteration order.
    """
    changes: List[Change] = []

    for key, new_value in next_state.items():
        path = join_path(path_prefix, key)

        if key not in prev_state:
            changes.append(Change.added(path, new_value))
            continue

        old_value = prev_state[key]
        if old_value is new_value:
            continue

        if isinstance(new_value, Mapping) and isinstance(old_value, Mapping):
            changes.extend(diff(old_value, new_value, path))
        elif not values_equal(old_value, new_value):
            changes.append(Change.updated(path, old_value, new_value))

    for key, old_value in prev_state.items():
        if key not in next_state:
            changes.append(Change.removed(join_path(path_prefix, key), old_value))

    return changes


__all__ = ["ChangeKind", "Change", "diff", "values_equal"]
