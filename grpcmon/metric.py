"""Per-method rate, error and latency tracking over fixed time buckets."""

from __future__ import annotations

import dataclasses
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import TextIO

from grpcmon.entry import Entry, StatusCode

_DEFAULT_BUCKET = timedelta(minutes=1)
_NAIVE_EPOCH = datetime(1, 1, 1)
_AWARE_EPOCH = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass
class Window:
    """Aggregated counters for one time bucket."""

    start: datetime | None
    total: int = 0
    errors: int = 0
    latency: list[float] = field(default_factory=list)


@dataclass(frozen=True)
class MethodSummary:
    """A rolled-up view across all windows for one method."""

    method: str
    total: int
    errors: int
    error_rate: float
    avg_latency: float


def _truncate(ts: datetime | None, size: timedelta) -> datetime | None:
    """Round ts down to a multiple of size since the zero time."""
    if ts is None:
        return None
    if ts.tzinfo is None:
        elapsed = ts - _NAIVE_EPOCH
        return _NAIVE_EPOCH + (elapsed // size) * size
    elapsed = ts - _AWARE_EPOCH
    return (_AWARE_EPOCH + (elapsed // size) * size).astimezone(ts.tzinfo)


class Tracker:
    """Accumulates per-method metrics in buckets of a fixed size."""

    def __init__(self, bucket_size: timedelta = _DEFAULT_BUCKET) -> None:
        if bucket_size <= timedelta(0):
            bucket_size = _DEFAULT_BUCKET
        self._size = bucket_size
        self._lock = threading.Lock()
        self._buckets: dict[str, list[Window]] = {}

    @property
    def bucket_size(self) -> timedelta:
        return self._size

    def record(self, entry: Entry) -> None:
        """Add an entry to the bucket its timestamp falls in."""
        start = _truncate(entry.timestamp, self._size)
        with self._lock:
            windows = self._buckets.setdefault(entry.method, [])
            if windows and windows[-1].start == start:
                window = windows[-1]
            else:
                window = Window(start=start)
                windows.append(window)
            window.total += 1
            if entry.status is not StatusCode.OK:
                window.errors += 1
            window.latency.append(float(entry.latency_ms))

    def windows(self, method: str) -> list[Window]:
        """Return copies of the recorded windows for a method."""
        with self._lock:
            return [
                dataclasses.replace(w, latency=list(w.latency))
                for w in self._buckets.get(method, [])
            ]

    def methods(self) -> list[str]:
        """Return all tracked method names."""
        with self._lock:
            return list(self._buckets)

    def summarise(self) -> list[MethodSummary]:
        """Return one summary per tracked method, sorted by method name."""
        with self._lock:
            out = []
            for method, windows in self._buckets.items():
                total = sum(w.total for w in windows)
                errors = sum(w.errors for w in windows)
                latencies = [value for w in windows for value in w.latency]
                out.append(
                    MethodSummary(
                        method=method,
                        total=total,
                        errors=errors,
                        error_rate=errors / total if total else 0.0,
                        avg_latency=sum(latencies) / len(latencies) if latencies else 0.0,
                    )
                )
        return sorted(out, key=lambda s: s.method)


def write_report(out: TextIO, summaries: list[MethodSummary]) -> None:
    """Write a human-readable metric report to out."""
    out.write(f"{'METHOD':<40} {'TOTAL':>8} {'ERRORS':>8} {'ERR RATE':>10} {'AVG LAT ms':>12}\n")
    for s in summaries:
        out.write(
            f"{s.method:<40} {s.total:>8d} {s.errors:>8d} "
            f"{s.error_rate * 100:>9.1f}% {s.avg_latency:>12.1f}\n"
        )