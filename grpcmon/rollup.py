"""Merging of several captured entries into one representative entry."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Sequence

from grpcmon.entry import Entry


@dataclass(frozen=True)
class Options:
    """Controls how entries are merged."""

    keep_first_timestamp: bool = False


def _after(a: datetime | None, b: datetime | None) -> bool:
    if a is None:
        return False
    return b is None or a > b


def _before(a: datetime | None, b: datetime | None) -> bool:
    return _after(b, a)


def merge(entries: Sequence[Entry], options: Options | None = None) -> Entry:
    """Combine entries into one.

    Method and status come from the first entry, response and metadata from the
    newest, latency is the whole-millisecond average, and the timestamp is the
    newest (or oldest with keep_first_timestamp). An empty input yields Entry().
    """
    if not entries:
        return Entry()
    opts = options or Options()
    base = entries[0]
    newest = oldest = base.timestamp
    response, metadata = base.response, base.metadata
    total = 0
    for e in entries:
        total += int(e.latency_ms)
        if _after(e.timestamp, newest):
            newest = e.timestamp
            response, metadata = e.response, e.metadata
        if _before(e.timestamp, oldest):
            oldest = e.timestamp
    average = abs(total) // len(entries)
    if total < 0:
        average = -average
    return dataclasses.replace(
        base,
        response=response,
        metadata=metadata,
        latency_ms=float(average),
        timestamp=oldest if opts.keep_first_timestamp else newest,
    )


def merge_all(entries: Iterable[Entry], options: Options | None = None) -> list[Entry]:
    """Group entries by method and merge each group, in first-seen order."""
    groups: dict[str, list[Entry]] = {}
    for e in entries:
        groups.setdefault(e.method, []).append(e)
    return [merge(group, options) for group in groups.values()]