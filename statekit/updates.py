"""
Update Variants
===============

``set_state`` accepts two kinds of update with different semantics:

- ``UpdateByFunction``: the next snapshot is exactly what the function returns.
- ``UpdateByPatch``: the next snapshot is a shallow merge of the previous one
  with the patch mapping; the patch wins on conflicts.

Raw callables and mappings are tagged once by ``as_update``; everything past
that point dispatches on the variant instead of inspecting the argument again.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Union

from .exceptions import InvalidArgumentError, UpdateFunctionError

Snapshot = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class UpdateByFunction:
    """Replace the snapshot with ``func(previous)``."""

    func: Callable[[Snapshot], Snapshot]

    def apply(self, previous: Snapshot) -> Snapshot:
        try:
            result = self.func(previous)
        except Exception as e:
            raise UpdateFunctionError(f"Error updating state: {e}") from e

        if not isinstance(result, Mapping):
            raise InvalidArgumentError(
                "Invalid state update: update function must return a mapping, "
                f"got {type(result).__name__}"
            )
        return result


@dataclass(frozen=True, slots=True)
class UpdateByPatch:
    """Shallow-merge ``values`` over the snapshot."""

    values: Snapshot

    def apply(self, previous: Snapshot) -> Snapshot:
        return {**previous, **self.values}


Update = Union[UpdateByFunction, UpdateByPatch]


def as_update(update: Any) -> Update:
    """
    Tag a raw ``set_state`` argument.

    Raises:
        InvalidArgumentError: If ``update`` is neither callable nor a mapping.
    """
    if isinstance(update, (UpdateByFunction, UpdateByPatch)):
        return update
    if isinstance(update, Mapping):
        return UpdateByPatch(update)
    if callable(update):
        return UpdateByFunction(update)
    raise InvalidArgumentError(
        f"set_state must receive a mapping or a function, got {type(update).__name__}"
    )


__all__ = ["Snapshot", "Update", "UpdateByFunction", "UpdateByPatch", "as_update"]
