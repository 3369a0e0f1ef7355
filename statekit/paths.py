"""
Dotted Path Tokens
==================

Paths such as ``"user.profile.name"`` are parsed once into a tuple of segment
tokens. Reading (``get_in``) and copy-on-write writing (``assoc_in``) work on
those tokens, never on the raw string.

Mappings are traversed by key. Lists and tuples are traversed by non-negative
integer segments, so ``"todos.0.text"`` reaches into a list of dicts.

Example:
    >>> segments = parse_path("a.b")
    >>> segments
    ('a', 'b')
    >>> get_in({"a": {"b": 1}}, segments)
    1
    >>> assoc_in({"a": {"b": 1, "c": 2}}, segments, 9)
    {'a': {'b': 9, 'c': 2}}
"""

from collections.abc import Mapping
from typing import Any, Optional, Tuple

from cachetools import LRUCache

from .exceptions import InvalidArgumentError

Segments = Tuple[str, ...]

PATH_SEPARATOR = "."

_MISSING = object()

# Parsed paths are immutable tuples, so they can be shared freely.
_path_cache: LRUCache = LRUCache(maxsize=1024)


def parse_path(path: str) -> Segments:
    """
    Split a dotted path into segment tokens.

    Raises:
        InvalidArgumentError: If ``path`` is not a string.
    """
    if not isinstance(path, str):
        raise InvalidArgumentError(
            f"Path must be a string, got {type(path).__name__}"
        )

    segments = _path_cache.get(path, _MISSING)
    if segments is _MISSING:
        segments = tuple(path.split(PATH_SEPARATOR))
        _path_cache[path] = segments
    return segments


def join_path(prefix: str, key: Any) -> str:
    """Append ``key`` to a dotted ``prefix``."""
    return f"{prefix}{PATH_SEPARATOR}{key}" if prefix else str(key)


def _as_index(segment: str, size: int) -> Optional[int]:
    if not segment.isdigit():
        return None
    index = int(segment)
    return index if index < size else None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def get_in(root: Any, segments: Segments, default: Any = None) -> Any:
    """Walk ``segments`` from ``root``; return ``default`` on the first dead end."""
    current = root
    for segment in segments:
        if isinstance(current, Mapping):
            current = current.get(segment, _MISSING)
            if current is _MISSING:
                return default
        elif _is_sequence(current):
            index = _as_index(segment, len(current))
            if index is None:
                return default
            current = current[index]
        else:
            return default
    return current


def assoc_in(root: Any, segments: Segments, value: Any) -> Any:
    """
    Return a copy of ``root`` with ``value`` stored at ``segments``.

    Only the ancestors along the path are copied; every other branch is shared
    with ``root``. Ancestors that are missing or not traversable are replaced
    by new dicts.
    """
    if not segments:
        return value

    head, rest = segments[0], segments[1:]

    if _is_sequence(root):
        index = _as_index(head, len(root))
        if index is not None:
            items = list(root)
            items[index] = assoc_in(items[index], rest, value)
            return items if isinstance(root, list) else tuple(items)

    node = dict(root) if isinstance(root, Mapping) else {}
    node[head] = assoc_in(node.get(head), rest, value)
    return node


def clear_path_cache() -> None:
    """Drop all memoised path parses."""
    _path_cache.clear()


__all__ = [
    "Segments",
    "PATH_SEPARATOR",
    "parse_path",
    "join_path",
    "get_in",
    "assoc_in",
    "clear_path_cache",
]
