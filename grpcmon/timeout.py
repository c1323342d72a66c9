"""Per-method deadlines for replayed entries, with a default fallback."""

from __future__ import annotations

import queue
import threading
from typing import Any, Callable

from grpcmon.entry import Entry

Replayer = Callable[[Entry], Any]

_DEFAULT_TIMEOUT = 5.0


class DeadlineExceeded(TimeoutError):
    """Raised when a replayer does not finish within its allowed time."""

    def __init__(self, method: str, seconds: float) -> None:
        super().__init__(f"timeout: deadline exceeded for {method!r} after {seconds}s")
        self.method = method
        self.seconds = seconds


class TimeoutManager:
    """Holds per-method timeouts in seconds and a default for other methods."""

    def __init__(self, default: float = _DEFAULT_TIMEOUT) -> None:
        if default <= 0:
            default = _DEFAULT_TIMEOUT
        self._lock = threading.RLock()
        self._default = default
        self._methods: dict[str, float] = {}

    def set(self, method: str, seconds: float) -> None:
        """Register a timeout for a specific method."""
        with self._lock:
            self._methods[method] = seconds

    def get(self, method: str) -> float:
        """Return the timeout for method, falling back to the default."""
        with self._lock:
            return self._methods.get(method, self._default)

    def wrap(self, replayer: Replayer) -> Replayer:
        """Return a replayer that enforces the method's deadline.

        The wrapped call returns what replayer returns, re-raises its errors,
        and raises DeadlineExceeded when it runs past the deadline.
        """

        def wrapped(entry: Entry) -> Any:
            seconds = self.get(entry.method)
            outcome: queue.Queue[tuple[bool, Any]] = queue.Queue(maxsize=1)

            def work() -> None:
                try:
                    outcome.put((True, replayer(entry)))
                except BaseException as exc:  # handed back to the caller
                    outcome.put((False, exc))

            threading.Thread(target=work, daemon=True).start()
            try:
                ok, value = outcome.get(timeout=seconds)
            except queue.Empty:
                raise DeadlineExceeded(entry.method, seconds) from None
            if not ok:
                raise value
            return value

        return wrapped