"""A polling watcher that reports entries newly added to a capture store."""

from __future__ import annotations

import threading
from typing import Callable

from grpcmon.entry import Entry, Store

Handler = Callable[[list[Entry]], None]


class Watcher:
    """Polls a store every interval seconds and passes new entries to a handler."""

    def __init__(self, store: Store, interval: float, handler: Handler) -> None:
        self._store = store
        self._interval = interval
        self._handler = handler
        self._lock = threading.Lock()
        self._seen = 0

    def poll(self) -> list[Entry]:
        """Check the store once; call the handler if entries were added.

        Returns the entries that appeared since the previous poll.
        """
        with self._lock:
            entries = self._store.list()
            if len(entries) <= self._seen:
                return []
            fresh = entries[self._seen:]
            self._seen = len(entries)
        self._handler(fresh)
        return fresh

    def run(self, stop: threading.Event) -> None:
        """Poll every interval until stop is set."""
        while not stop.wait(self._interval):
            self.poll()