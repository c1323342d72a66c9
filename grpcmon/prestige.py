"""Scoring of captured entries by how interesting they are.

Recency, latency and error status are combined into one value; higher-scored
entries are surfaced first so slow or failing calls get attention.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from grpcmon.entry import Entry, StatusCode


@dataclass(frozen=True)
class Options:
    """Weights of each scoring component."""

    recency_weight: float = 0.3
    latency_weight: float = 0.4
    error_weight: float = 0.3
    latency_threshold_ms: float = 500.0


@dataclass(frozen=True)
class Score:
    """The computed score of one entry; higher is more interesting."""

    entry: Entry
    value: float


def _recency(entry: Entry, now: datetime | None) -> float:
    if entry.timestamp is None:
        return 0.0
    reference = now if now is not None else datetime.now(entry.timestamp.tzinfo)
    age = (reference - entry.timestamp).total_seconds()
    return math.exp(-age / 60)


def _latency(entry: Entry, threshold_ms: float) -> float:
    if threshold_ms <= 0:
        return 0.0
    return min(float(entry.latency_ms) / threshold_ms, 1.0)


def _error(entry: Entry) -> float:
    return 0.0 if entry.status is StatusCode.OK else 1.0


def _compute(entry: Entry, now: datetime | None, options: Options) -> float:
    return (
        options.recency_weight * _recency(entry, now)
        + options.latency_weight * _latency(entry, options.latency_threshold_ms)
        + options.error_weight * _error(entry)
    )


def rank(
    entries: Iterable[Entry],
    options: Options | None = None,
    now: datetime | None = None,
) -> list[Score]:
    """Score each entry and return them by descending score.

    now defaults to the current time.
    """
    opts = options or Options()
    scores = [Score(entry=e, value=_compute(e, now, opts)) for e in entries]
    return sorted(scores, key=lambda s: s.value, reverse=True)


def top(
    entries: Iterable[Entry],
    n: int,
    options: Options | None = None,
    now: datetime | None = None,
) -> list[Score]:
    """Return the n highest-scored entries."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return rank(entries, options, now)[:n]