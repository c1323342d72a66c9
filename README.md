# grpcmon

A library for working with records of gRPC calls. It stores them, masks
sensitive metadata, normalises and transforms them, and aggregates and scores
them. It can also save them to JSON snapshots and pace the replay of them
through a callable you provide.

Each record is an `Entry` (in `grpcmon.entry`). An entry is a frozen dataclass
with these fields: `id`, `method`, `target`, `request`, `response`, `status`
(a `StatusCode`), `metadata`, `timestamp` and `latency_ms`. Entries are kept,
oldest first, in a thread-safe `Store(capacity)`. When the store is full, the
oldest entry is evicted.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Modules

| Module | What it provides |
| --- | --- |
| `grpcmon.entry` | `StatusCode`, `Entry`, `Store` (`add`, `extend`, `list`, `clear`, `len()`), `new_id()` |
| `grpcmon.label` | `for_status(code, colour)`, `latency_band(ms)` and `latency_band_colour(ms, colour)`, with optional ANSI colour |
| `grpcmon.mask` | `Masker(*fields)` replaces matching metadata values with `[REDACTED]`; key matching ignores case |
| `grpcmon.normalize` | `apply()` / `apply_all()` with `clear_timestamp`, `lower_method` and `strip_metadata_keys` |
| `grpcmon.pipeline` | `Pipeline(*steps)` runs list-to-list processors in order |
| `grpcmon.pivot` | `build(entries, Dimension.BY_METHOD or Dimension.BY_STATUS)` returns `Row`s sorted by key |
| `grpcmon.transform` | `Chain` of per-entry steps; a step returns `None` to drop the entry. Presets: `set_method`, `drop_errors`, `override_target`, `redact_metadata_key`, `keep_methods`, `normalise_method` |
| `grpcmon.metric` | `Tracker(bucket_size)` groups entries into per-method time buckets; `summarise()` and `write_report(out, summaries)` |
| `grpcmon.prestige` | `rank()` and `top()` score entries by recency, latency and error status, using `Options` weights |
| `grpcmon.rollup` | `merge()` and `merge_all()` combine entries and average their latency |
| `grpcmon.stats` | `compute(entries)` returns a `Summary`: counts, latencies in ms, status counts and the top 5 methods |
| `grpcmon.tag` | `TagStore` links string tags to entry ids |
| `grpcmon.routing` | `Router` dispatches entries by method, calls a fallback or raises `NoRouteError`; `Fanout` calls several handlers |
| `grpcmon.sampler` | `Sampler(rate, rng)` keeps entries at random; `rate` is a property clamped to [0, 1] |
| `grpcmon.truncate` | `Truncator(store, max_size).trim()` evicts the oldest entries |
| `grpcmon.window` | `TimeWindow(store, duration, clock)` lists entries from the last `duration` |
| `grpcmon.watch` | `Watcher(store, interval, handler)` gives new entries to `handler` via `poll()`, or `run(stop_event)` in a loop |
| `grpcmon.snapshot` | `save()`, `load()` and `list_snapshots()` for named JSON snapshot files |
| `grpcmon.retry` | `run(fn, RetryPolicy(), cancel)` retries on `RpcError`s that carry retryable status codes |
| `grpcmon.ratelimit` | `Limiter(rps)`, a token bucket filled by a background thread; it is a context manager |
| `grpcmon.throttle` | `run(entries, replayer, ThrottleOptions(), cancel)` keeps the original gaps between entries, scaled and capped |
| `grpcmon.timeout` | `TimeoutManager` holds per-method deadlines in seconds; `wrap(replayer)` raises `DeadlineExceeded` |

Durations are handled as follows:

- `Tracker` and `TimeWindow` take `datetime.timedelta` values.
- `retry`, `ratelimit`, `throttle`, `timeout` and `watch` take seconds as floats.
- Cancellation uses a `threading.Event`. A cancelled wait raises `grpcmon.throttle.Cancelled`.

## Example

```python
from grpcmon.entry import Entry, Store, StatusCode
from grpcmon.mask import Masker
from grpcmon.stats import compute

store = Store(500)
store.add(Entry(method="/svc.Greeter/SayHello", status=StatusCode.OK,
                metadata={"authorization": "Bearer token"}))

masked = Masker("authorization").apply_all(store.list())
summary = compute(masked)
print(summary.total, summary.success_count)
```

## What it does not do

- It does not capture traffic. Nothing in the package connects to a gRPC channel or intercepts calls. You create `Entry` objects yourself and add them to a `Store`.
- It does not send requests. The replay helpers (`retry.run`, `throttle.run`, `TimeoutManager.wrap` and `Limiter`) pace and guard a callable that you supply, and that callable performs the call.
- It has no command-line program and no terminal interface.
- It does not persist data except through JSON snapshots. `snapshot.save` refuses to overwrite an existing snapshot of the same name.

## Running the tests

```
pytest
```