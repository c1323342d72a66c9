"""Redaction of sensitive metadata fields in captured entries."""

from __future__ import annotations

import dataclasses
from typing import Iterable

from grpcmon.entry import Entry

REDACTED = "[REDACTED]"


class Masker:
    """Redacts metadata values whose keys match configured names, ignoring case."""

    def __init__(self, *fields: str) -> None:
        self._fields = frozenset(f.lower() for f in fields)

    def apply(self, entry: Entry) -> Entry:
        """Return a copy of entry with matching metadata values redacted."""
        if not entry.metadata:
            return entry
        masked = {
            key: REDACTED if key.lower() in self._fields else value
            for key, value in entry.metadata.items()
        }
        return dataclasses.replace(entry, metadata=masked)

    def apply_all(self, entries: Iterable[Entry]) -> list[Entry]:
        return [self.apply(e) for e in entries]