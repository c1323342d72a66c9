"""Probabilistic sampling of captured entries.

A sampler keeps a fraction of entries given by a rate in [0.0, 1.0]; 1.0 keeps
everything and 0.0 drops everything. The rate can be changed at runtime.
"""

from __future__ import annotations

import random
import threading
from typing import Iterable, Optional

from grpcmon.entry import Entry

_DEFAULT_SEED = 42


def _clamp(rate: float) -> float:
    return min(max(rate, 0.0), 1.0)


class Sampler:
    """Decides at random whether to retain each entry."""

    def __init__(self, rate: float, rng: Optional[random.Random] = None) -> None:
        self._lock = threading.Lock()
        self._rate = _clamp(rate)
        self._rng = rng if rng is not None else random.Random(_DEFAULT_SEED)

    def keep(self, entry: Entry) -> bool:
        """Return True if the entry should be retained."""
        with self._lock:
            return self._rng.random() < self._rate

    def filter(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return the entries that pass the sampler."""
        return [e for e in entries if self.keep(e)]

    @property
    def rate(self) -> float:
        """The sampling rate; assignments are clamped to [0.0, 1.0]."""
        with self._lock:
            return self._rate

    @rate.setter
    def rate(self, value: float) -> None:
        with self._lock:
            self._rate = _clamp(value)