"""
Store configuration.

Options are validated once, at construction, so the container can trust them.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import InvalidArgumentError

DEFAULT_MAX_HISTORY_LENGTH = 10
DEFAULT_MAX_REENTRANCY_DEPTH = 32


@dataclass(frozen=True, slots=True)
class StoreConfig:
    """
    Options for a single state container.

    Attributes:
        max_history_length: Number of snapshots kept for undo/redo (>= 1).
        max_reentrancy_depth: How deeply subscribers may nest further updates
            before ReentrancyError is raised. None removes the bound.
        persist: Accepted for compatibility; no storage backend is wired.
        key: Storage key that would be used if persistence were wired.
    """

    max_history_length: int = DEFAULT_MAX_HISTORY_LENGTH
    max_reentrancy_depth: Optional[int] = DEFAULT_MAX_REENTRANCY_DEPTH
    persist: bool = False
    key: Optional[str] = None

    def __post_init__(self):
        if (
            isinstance(self.max_history_length, bool)
            or not isinstance(self.max_history_length, int)
            or self.max_history_length < 1
        ):
            raise InvalidArgumentError(
                "max_history_length must be a positive integer, "
                f"got {self.max_history_length!r}"
            )
        depth = self.max_reentrancy_depth
        if depth is not None and (
            isinstance(depth, bool) or not isinstance(depth, int) or depth < 1
        ):
            raise InvalidArgumentError(
                "max_reentrancy_depth must be a positive integer or None, "
                f"got {depth!r}"
            )
        if self.key is not None and not isinstance(self.key, str):
            raise InvalidArgumentError(f"key must be a string, got {self.key!r}")

    def replace(self, **overrides: Any) -> "StoreConfig":
        """Return a validated copy with the given fields replaced."""
        known = {field.name for field in dataclasses.fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise InvalidArgumentError(f"Unknown store option(s): {', '.join(unknown)}")
        return dataclasses.replace(self, **overrides)


def resolve_config(config: Optional[StoreConfig] = None, **options: Any) -> StoreConfig:
    """Merge keyword options over an optional base config."""
    if config is not None and not isinstance(config, StoreConfig):
        raise InvalidArgumentError(
            f"config must be a StoreConfig, got {type(config).__name__}"
        )
    base = config if config is not None else StoreConfig()
    return base.replace(**options) if options else base
