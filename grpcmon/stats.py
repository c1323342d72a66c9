"""Aggregated summary statistics over captured entries.

Stateless: call compute with any snapshot of entries. A summary with no
entries has zero counts and zero latencies.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence

from grpcmon.entry import Entry, StatusCode

_TOP_N = 5


@dataclass(frozen=True)
class MethodStat:
    """Call count for one method."""

    method: str
    count: int


@dataclass(frozen=True)
class Summary:
    """Aggregated statistics; latencies are in milliseconds."""

    total: int = 0
    success_count: int = 0
    error_count: int = 0
    avg_latency: float = 0.0
    min_latency: float = 0.0
    max_latency: float = 0.0
    status_codes: dict[StatusCode, int] = field(default_factory=dict)
    top_methods: list[MethodStat] = field(default_factory=list)


def compute(entries: Sequence[Entry]) -> Summary:
    """Derive a Summary from entries."""
    if not entries:
        return Summary()
    status_codes = Counter(e.status for e in entries)
    method_counts = Counter(e.method for e in entries)
    latencies = [e.latency_ms for e in entries]
    success = status_codes[StatusCode.OK]
    ranked = sorted(method_counts.items(), key=lambda kv: kv[1], reverse=True)
    return Summary(
        total=len(entries),
        success_count=success,
        error_count=len(entries) - success,
        avg_latency=sum(latencies) / len(entries),
        min_latency=min(latencies),
        max_latency=max(latencies),
        status_codes=dict(status_codes),
        top_methods=[MethodStat(m, c) for m, c in ranked[:_TOP_N]],
    )