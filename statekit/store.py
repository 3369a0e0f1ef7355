"""
statekit Store - Bound Operations over a State Container
========================================================

``create_store`` builds a private ``StateContainer`` and hands back a
``Store``: a frozen bundle of the container's bound methods. Callers get the
operations, never the container, and every call to ``create_store`` yields an
independent store. There is no global store.

Basic Usage
-----------

```python
from statekit import create_store

counter = create_store({"count": 0})

unsubscribe = counter.subscribe(lambda state: print(state["count"]))

counter.set_state(lambda prev: {**prev, "count": prev["count"] + 1})  # prints 1
counter.set_state({"count": 10})                                      # prints 10
counter.undo()                                                        # prints 1

unsubscribe()
```

Watching a Path
---------------

```python
settings = create_store({"theme": {"mode": "light"}})

settings.watch_value(
    "theme.mode", lambda current, previous: print(previous, "->", current)
)
settings.patch("theme.mode", "dark")  # prints: light -> dark
```

Configuration
-------------

Options can be passed as keywords, as a ``StoreConfig``, or both (keywords
win):

```python
create_store({}, max_history_length=50)
create_store({}, config=StoreConfig(max_history_length=50), max_reentrancy_depth=8)
```
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .config import StoreConfig, resolve_config
from .state import StateContainer, UpdateResult
from .updates import Snapshot


@dataclass(frozen=True, slots=True)
class Store:
    """Operations bound to one private state container."""

    get_state: Callable[[], Snapshot]
    set_state: Callable[[Any], UpdateResult]
    subscribe: Callable[[Callable[[Snapshot], Any]], Callable[[], None]]
    select: Callable[..., Any]
    patch: Callable[[str, Any], UpdateResult]
    undo: Callable[[], None]
    redo: Callable[[], None]
    reset: Callable[[], None]
    watch_value: Callable[[str, Callable[[Any, Any], Any]], Callable[[], None]]
    can_undo: Callable[[], bool]
    can_redo: Callable[[], bool]

    def __repr__(self) -> str:
        return f"Store(state={self.get_state()!r})"


def create_store(
    initial_state: Optional[Snapshot] = None,
    config: Optional[StoreConfig] = None,
    **options: Any,
) -> Store:
    """
    Create an independent store.

    Args:
        initial_state: Starting snapshot; must be a mapping. Defaults to ``{}``.
        config: Base configuration.
        **options: ``StoreConfig`` fields overriding ``config``.

    Raises:
        InvalidArgumentError: If the initial state or any option is invalid.
    """
    container = StateContainer(initial_state, resolve_config(config, **options))

    return Store(
        get_state=container.get_state,
        set_state=container.set_state,
        subscribe=container.subscribe,
        select=container.select,
        patch=container.patch,
        undo=container.undo,
        redo=container.redo,
        reset=container.reset,
        watch_value=container.watch_value,
        can_undo=container.can_undo,
        can_redo=container.can_redo,
    )


__all__ = ["Store", "create_store"]
