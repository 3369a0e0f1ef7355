"""
History Ring
============

Bounded, branch-truncating timeline of snapshots backing undo/redo.

Pushing after an undo discards the redo branch. Once the ring is full the
oldest entry is evicted and ``current_index`` stays where it is, so the index
keeps pointing at the newest entry while the window slides forward.
"""

import logging
from typing import Generic, List, Optional, Tuple, TypeVar

from .config import DEFAULT_MAX_HISTORY_LENGTH
from .exceptions import InvalidArgumentError

T = TypeVar("T")


class HistoryRing(Generic[T]):
    """
    Snapshot timeline with a current position.

    Invariants:
        0 <= current_index < len(self)
        len(self) <= max_length

    Example:
        ring = HistoryRing(initial, max_length=3)
        ring.push(a)
        ring.push(b)
        ring.undo()   # -> a
        ring.redo()   # -> b
    """

    __slots__ = ("_entries", "_index", "_max_length")

    def __init__(self, initial: T, max_length: int = DEFAULT_MAX_HISTORY_LENGTH):
        if (
            isinstance(max_length, bool)
            or not isinstance(max_length, int)
            or max_length < 1
        ):
            raise InvalidArgumentError(
                f"max_length must be a positive integer, got {max_length!r}"
            )
        self._entries: List[T] = [initial]
        self._index = 0
        self._max_length = max_length

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def max_length(self) -> int:
        return self._max_length

    @property
    def entries(self) -> Tuple[T, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, entry: T) -> None:
        """Truncate the redo branch and append ``entry``."""
        del self._entries[self._index + 1 :]
        self._entries.append(entry)

        if len(self._entries) > self._max_length:
            self._entries.pop(0)
            logging.debug(
                f"History full ({self._max_length}); evicted oldest entry, "
                f"index stays at {self._index}"
            )
        else:
            self._index += 1

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> Optional[T]:
        """Step back one entry; ``None`` when already at the oldest."""
        if not self.can_undo():
            return None
        self._index -= 1
        return self._entries[self._index]

    def redo(self) -> Optional[T]:
        """Step forward one entry; ``None`` when already at the newest."""
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]

    def current(self) -> T:
        return self._entries[self._index]

    def first(self) -> T:
        return self._entries[0]

    def __repr__(self) -> str:
        return (
            f"HistoryRing(len={len(self._entries)}, index={self._index}, "
            f"max_length={self._max_length})"
        )


__all__ = ["HistoryRing"]
