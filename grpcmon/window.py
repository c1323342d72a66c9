"""A sliding time-window view over captured entries."""

from __future__ import annotations

import threading
from datetime import datetime, timedelta
from typing import Callable, Optional

from grpcmon.entry import Entry, Store

_DEFAULT_DURATION = timedelta(minutes=1)


def _comparable(ts: datetime, now: datetime) -> datetime:
    """Bring ts to the same naive/aware kind as now."""
    if (ts.tzinfo is None) == (now.tzinfo is None):
        return ts
    if ts.tzinfo is None:
        return ts.astimezone()
    return ts.astimezone().replace(tzinfo=None)


class TimeWindow:
    """Returns the entries captured within a rolling duration ending now."""

    def __init__(
        self,
        store: Store,
        duration: timedelta = _DEFAULT_DURATION,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        if duration <= timedelta(0):
            duration = _DEFAULT_DURATION
        self._lock = threading.Lock()
        self._store = store
        self._duration = duration
        self._clock = clock or datetime.now

    def entries(self) -> list[Entry]:
        """Return entries whose timestamp is not before now minus the duration.

        Entries without a timestamp are never in the window.
        """
        with self._lock:
            now = self._clock()
            cutoff = now - self._duration
            return [
                e
                for e in self._store.list()
                if e.timestamp is not None and _comparable(e.timestamp, now) >= cutoff
            ]

    @property
    def duration(self) -> timedelta:
        """The configured window duration."""
        return self._duration