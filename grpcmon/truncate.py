"""Capping a capture store to a maximum size, evicting the oldest entries."""

from __future__ import annotations

import threading

from grpcmon.entry import Store


class Truncator:
    """Trims a Store to a configured maximum number of entries."""

    def __init__(self, store: Store, max_size: int) -> None:
        self._lock = threading.Lock()
        self._store = store
        self._max_size = max(max_size, 1)

    def trim(self) -> int:
        """Remove the oldest entries beyond the maximum; return how many went."""
        with self._lock:
            entries = self._store.list()
            excess = len(entries) - self._max_size
            if excess <= 0:
                return 0
            self._store.clear()
            self._store.extend(entries[excess:])
            return excess

    @property
    def max_size(self) -> int:
        """The configured maximum number of entries."""
        return self._max_size