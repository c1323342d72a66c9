"""Replay throttling that preserves the original timing between requests."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from grpcmon.entry import Entry

Replayer = Callable[[Entry], object]

_DEFAULT_MAX_DELAY = 5.0


class Cancelled(Exception):
    """Raised when an operation is cancelled before it completes."""


@dataclass(frozen=True)
class ThrottleOptions:
    """Pacing of a throttled replay.

    speed_factor scales the gaps: 1.0 is real time, 2.0 double speed, 0.5
    half speed. max_delay caps each gap, in seconds.
    """

    speed_factor: float = 1.0
    max_delay: float = _DEFAULT_MAX_DELAY


def _wait(delay: float, cancel: Optional[threading.Event]) -> None:
    if cancel is None:
        time.sleep(delay)
    elif cancel.wait(delay):
        raise Cancelled("throttle: cancelled")


def run(
    entries: Sequence[Entry],
    replayer: Replayer,
    options: Optional[ThrottleOptions] = None,
    cancel: Optional[threading.Event] = None,
) -> None:
    """Replay entries in the given order, keeping their relative timing.

    Errors from replayer propagate and stop the run; Cancelled is raised if
    cancel is set while waiting between entries.
    """
    opts = options or ThrottleOptions()
    speed = opts.speed_factor if opts.speed_factor > 0 else 1.0
    max_delay = opts.max_delay if opts.max_delay > 0 else _DEFAULT_MAX_DELAY

    previous: Optional[Entry] = None
    for entry in entries:
        if (
            previous is not None
            and entry.timestamp is not None
            and previous.timestamp is not None
        ):
            gap = (entry.timestamp - previous.timestamp).total_seconds()
            if gap > 0:
                _wait(min(gap / speed, max_delay), cancel)
        replayer(entry)
        previous = entry