"""Captured gRPC call records and a bounded in-memory store for them."""

from __future__ import annotations

import threading
import uuid
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any, Iterable


class StatusCode(IntEnum):
    """gRPC status codes."""

    OK = 0
    CANCELED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16

    def __str__(self) -> str:
        if self is StatusCode.OK:
            return "OK"
        return "".join(part.capitalize() for part in self.name.split("_"))

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


@dataclass(frozen=True)
class Entry:
    """A single captured gRPC call."""

    id: str = ""
    method: str = ""
    target: str = ""
    request: Any = None
    response: Any = None
    status: StatusCode = StatusCode.OK
    metadata: dict[str, str] | None = None
    timestamp: datetime | None = None
    latency_ms: float = 0.0


def new_id() -> str:
    """Return a fresh unique entry identifier."""
    return uuid.uuid4().hex


class Store:
    """A thread-safe, bounded store of entries kept oldest first.

    When full, adding an entry evicts the oldest one.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"store capacity must be at least 1, got {capacity}")
        self._lock = threading.Lock()
        self._entries: deque[Entry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def add(self, entry: Entry) -> None:
        with self._lock:
            self._entries.append(entry)

    def extend(self, entries: Iterable[Entry]) -> None:
        with self._lock:
            self._entries.extend(entries)

    def list(self) -> list[Entry]:
        """Return a snapshot of the stored entries, oldest first."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)