from datetime import datetime, timedelta, timezone

from grpcmon.entry import Entry, Store
from grpcmon.window import TimeWindow

NOW = datetime(2024, 1, 1, 12, 0, 0)


def clock():
    return NOW


def make_store(entries):
    store = Store(100)
    store.extend(entries)
    return store


def test_new_defaults_to_one_minute():
    assert TimeWindow(Store(10), timedelta(0)).duration == timedelta(minutes=1)


def test_entries_returns_only_within_window():
    old = Entry(id="old", timestamp=NOW - timedelta(minutes=5))
    recent = Entry(id="recent", timestamp=NOW - timedelta(seconds=30))
    window = TimeWindow(make_store([old, recent]), timedelta(minutes=1), clock)
    assert [e.id for e in window.entries()] == ["recent"]


def test_entries_empty_when_all_outside_window():
    store = make_store([
        Entry(id="a", timestamp=NOW - timedelta(minutes=10)),
        Entry(id="b", timestamp=NOW - timedelta(minutes=2)),
    ])
    assert TimeWindow(store, timedelta(minutes=1), clock).entries() == []


def test_entries_all_within_window():
    store = make_store([
        Entry(id="x", timestamp=NOW - timedelta(seconds=10)),
        Entry(id="y", timestamp=NOW - timedelta(seconds=20)),
    ])
    assert [e.id for e in TimeWindow(store, timedelta(minutes=1), clock).entries()] == ["x", "y"]


def test_entries_exactly_at_boundary_included():
    store = make_store([Entry(id="boundary", timestamp=NOW - timedelta(minutes=1))])
    assert [e.id for e in TimeWindow(store, timedelta(minutes=1), clock).entries()] == ["boundary"]


def test_entries_without_timestamp_excluded():
    store = make_store([Entry(id="none"), Entry(id="now", timestamp=NOW)])
    assert [e.id for e in TimeWindow(store, timedelta(minutes=1), clock).entries()] == ["now"]


def test_entries_with_aware_timestamps():
    now = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    store = make_store([
        Entry(id="in", timestamp=now - timedelta(seconds=5)),
        Entry(id="out", timestamp=now - timedelta(hours=1)),
    ])
    window = TimeWindow(store, timedelta(minutes=1), lambda: now)
    assert [e.id for e in window.entries()] == ["in"]


def test_default_clock_sees_fresh_entries():
    store = make_store([Entry(id="fresh", timestamp=datetime.now())])
    assert [e.id for e in TimeWindow(store).entries()] == ["fresh"]