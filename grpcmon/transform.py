"""Composable transformations applied to captured entries.

A step takes an entry and returns a possibly modified copy, or None to drop it.
"""

from __future__ import annotations

import dataclasses
from typing import Callable, Iterable, Optional

from grpcmon.entry import Entry, StatusCode

Func = Callable[[Entry], Optional[Entry]]


class Chain:
    """An ordered sequence of transformation steps."""

    def __init__(self) -> None:
        self._steps: list[Func] = []

    def add(self, step: Func) -> "Chain":
        self._steps.append(step)
        return self

    def apply(self, entry: Entry) -> Entry | None:
        """Run every step; return None as soon as one drops the entry."""
        current: Entry | None = entry
        for step in self._steps:
            current = step(current)
            if current is None:
                return None
        return current

    def apply_all(self, entries: Iterable[Entry]) -> list[Entry]:
        """Transform entries, omitting any that are dropped."""
        results = (self.apply(e) for e in entries)
        return [e for e in results if e is not None]


def set_method(method: str) -> Func:
    return lambda e: dataclasses.replace(e, method=method)


def drop_errors() -> Func:
    return lambda e: e if e.status is StatusCode.OK else None


def override_target(target: str) -> Func:
    return lambda e: dataclasses.replace(e, target=target)


def redact_metadata_key(key: str) -> Func:
    """Replace the value of the given metadata key, ignoring case, with REDACTED."""
    lower = key.lower()

    def step(e: Entry) -> Entry:
        if e.metadata is None:
            return e
        redacted = {
            k: "REDACTED" if k.lower() == lower else v for k, v in e.metadata.items()
        }
        return dataclasses.replace(e, metadata=redacted)

    return step


def keep_methods(*methods: str) -> Func:
    """Drop entries whose method is not in the allow-list."""
    allowed = frozenset(methods)
    return lambda e: e if e.method in allowed else None


def normalise_method() -> Func:
    """Trim leading slashes and lower-case the method name."""
    return lambda e: dataclasses.replace(e, method=e.method.lstrip("/").lower())