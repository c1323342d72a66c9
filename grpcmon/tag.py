"""Lightweight tagging of captured entries by ID.

Tags are string labels associated with entry IDs, allowing lookup and
filtering without touching the entries themselves.
"""

from __future__ import annotations

import threading
from typing import Iterable

from grpcmon.entry import Entry


class TagStore:
    """Maps tags to sets of entry IDs."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._tags: dict[str, set[str]] = {}

    def add(self, entry_id: str, *tags: str) -> None:
        """Associate the tags with the entry ID."""
        with self._lock:
            for t in tags:
                self._tags.setdefault(t, set()).add(entry_id)

    def remove(self, entry_id: str, *tags: str) -> None:
        """Disassociate the tags from the entry ID; the tags stay known."""
        with self._lock:
            for t in tags:
                ids = self._tags.get(t)
                if ids is not None:
                    ids.discard(entry_id)

    def lookup(self, tag: str) -> list[str]:
        """Return the entry IDs carrying tag, sorted."""
        with self._lock:
            return sorted(self._tags.get(tag, ()))

    def filter(self, tag: str, entries: Iterable[Entry]) -> list[Entry]:
        """Return the entries whose IDs carry tag, in their original order."""
        ids = set(self.lookup(tag))
        return [e for e in entries if e.id in ids]

    def tags(self) -> list[str]:
        """Return all known tags, sorted."""
        with self._lock:
            return sorted(self._tags)