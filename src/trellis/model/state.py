"""Thread-safe key-value store holding the runtime state conditionals read."""

from __future__ import annotations

import threading
from typing import Any


class RuntimeState:
    """Key-value store of UI state such as ``hovering`` or ``selected_tab``.

    Resolution only reads from the state, but the host may update it from
    elsewhere, so every public method takes the lock.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._lock = threading.Lock()
        self._data: dict[str, Any] = dict(initial) if initial else {}

    # --- read / write ---------------------------------------------------------

    def set(self, key: str, value: Any) -> None:
        """Set a single key to the given value."""
        with self._lock:
            self._data[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieve a value by key, returning *default* if absent."""
        with self._lock:
            return self._data.get(key, default)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    # --- bulk operations ------------------------------------------------------

    def apply_updates(self, updates: dict[str, Any]) -> None:
        """Merge a dictionary of updates into the state."""
        with self._lock:
            self._data.update(updates)

    def __repr__(self) -> str:
        with self._lock:
            return f"RuntimeState(keys={list(self._data.keys())})"
