"""A token-bucket rate limiter for pacing replay operations."""

from __future__ import annotations

import queue
import threading
from typing import Optional


class Limiter:
    """Lets up to rps operations proceed per second.

    Tokens are added one at a time at an even interval by a background
    thread; the bucket holds at most rps tokens and starts empty.
    """

    def __init__(self, rps: int) -> None:
        if rps <= 0:
            rps = 1
        self._rps = rps
        self._interval = 1.0 / rps
        self._tokens: queue.Queue[None] = queue.Queue(maxsize=rps)
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._fill, daemon=True)
        self._thread.start()

    def _fill(self) -> None:
        while not self._stop.wait(self._interval):
            try:
                self._tokens.put_nowait(None)
            except queue.Full:
                pass

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until a token is available.

        Raises TimeoutError if none arrives within timeout seconds.
        """
        try:
            self._tokens.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError(f"ratelimit: no token within {timeout}s") from None

    @property
    def rps(self) -> int:
        """The configured operations per second."""
        return self._rps

    def stop(self) -> None:
        """Stop adding tokens and release the background thread."""
        self._stop.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> "Limiter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()