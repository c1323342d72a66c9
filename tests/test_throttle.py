import threading
import time
from datetime import datetime, timedelta

import pytest

from grpcmon.entry import Entry
from grpcmon.throttle import Cancelled, ThrottleOptions, run


def make_entries(*offsets):
    base = datetime.now()
    return [Entry(id=str(i), timestamp=base + d) for i, d in enumerate(offsets)]


def test_calls_replayer_for_each_entry():
    entries = make_entries(
        timedelta(0), timedelta(milliseconds=10), timedelta(milliseconds=20)
    )
    seen = []
    run(entries, lambda e: seen.append(e.id))
    assert seen == ["0", "1", "2"]


def test_respects_cancel():
    entries = make_entries(timedelta(0), timedelta(milliseconds=500), timedelta(seconds=1))
    cancel = threading.Event()
    cancel.set()
    seen = []
    with pytest.raises(Cancelled):
        run(entries, lambda e: seen.append(e.id), cancel=cancel)
    assert seen == ["0"]


def test_max_delay_caps():
    entries = make_entries(timedelta(0), timedelta(seconds=10))
    opts = ThrottleOptions(speed_factor=1.0, max_delay=0.01)
    seen = []
    start = time.monotonic()
    run(entries, lambda e: seen.append(e.id), opts)
    assert seen == ["0", "1"]
    assert time.monotonic() - start < 0.2


def test_default_options_values():
    opts = ThrottleOptions()
    assert opts.speed_factor == 1.0
    assert opts.max_delay == 5.0


def test_speed_factor_shortens_delay():
    entries = make_entries(timedelta(0), timedelta(milliseconds=400))
    seen = []
    start = time.monotonic()
    run(entries, lambda e: seen.append(e.id), ThrottleOptions(speed_factor=4.0))
    elapsed = time.monotonic() - start
    assert seen == ["0", "1"]
    assert 0.09 <= elapsed < 0.35


def test_replayer_error_stops_run():
    entries = make_entries(timedelta(0), timedelta(0), timedelta(0))
    seen = []

    def replayer(entry):
        seen.append(entry.id)
        if entry.id == "1":
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        run(entries, replayer)
    assert seen == ["0", "1"]


def test_entries_without_timestamps_do_not_wait():
    entries = [Entry(id="a"), Entry(id="b")]
    seen = []
    start = time.monotonic()
    run(entries, lambda e: seen.append(e.id))
    assert seen == ["a", "b"]
    assert time.monotonic() - start < 0.1