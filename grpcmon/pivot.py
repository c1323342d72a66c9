"""Pivot tables of captured entries keyed by a chosen dimension."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from grpcmon.entry import Entry, StatusCode


class Dimension(Enum):
    """Grouping key for a pivot table."""

    BY_METHOD = "method"
    BY_STATUS = "status"


@dataclass
class Row:
    """Aggregated metrics for one dimension value."""

    key: str
    count: int = 0
    error_count: int = 0
    total_ms: float = 0.0
    avg_ms: float = 0.0


def build(entries: Iterable[Entry], dimension: Dimension = Dimension.BY_METHOD) -> list[Row]:
    """Group entries by dimension and return rows sorted by key."""
    index: dict[str, Row] = {}
    for e in entries:
        key = str(e.status) if dimension is Dimension.BY_STATUS else e.method
        row = index.setdefault(key, Row(key=key))
        row.count += 1
        row.total_ms += float(int(e.latency_ms))
        if e.status is not StatusCode.OK:
            row.error_count += 1
    for row in index.values():
        if row.count:
            row.avg_ms = row.total_ms / row.count
    return sorted(index.values(), key=lambda r: r.key)