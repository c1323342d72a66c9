"""Method-based routing of captured entries to registered handlers."""

from __future__ import annotations

import threading
from typing import Callable, Optional

from grpcmon.entry import Entry

Handler = Callable[[Entry], None]


class NoRouteError(LookupError):
    """Raised when no handler and no fallback exist for a method."""

    def __init__(self, method: str) -> None:
        super().__init__(f"routing: no handler registered for method {method!r}")
        self.method = method


class Router:
    """Dispatches entries to handlers registered per gRPC method path."""

    def __init__(self, fallback: Optional[Handler] = None) -> None:
        self._lock = threading.RLock()
        self._routes: dict[str, Handler] = {}
        self._fallback = fallback

    def register(self, method: str, handler: Handler) -> None:
        """Associate handler with method, replacing any previous one."""
        with self._lock:
            self._routes[method] = handler

    def deregister(self, method: str) -> None:
        """Remove the handler for method, if any."""
        with self._lock:
            self._routes.pop(method, None)

    def dispatch(self, entry: Entry) -> None:
        """Route entry to its handler, else to the fallback.

        Raises NoRouteError when neither exists.
        """
        with self._lock:
            handler = self._routes.get(entry.method)
            fallback = self._fallback
        if handler is not None:
            handler(entry)
        elif fallback is not None:
            fallback(entry)
        else:
            raise NoRouteError(entry.method)

    def methods(self) -> list[str]:
        """Return the registered method paths, sorted."""
        with self._lock:
            return sorted(self._routes)


class Fanout:
    """Passes each entry to several handlers in order."""

    def __init__(self, *handlers: Handler) -> None:
        self._handlers: list[Handler] = list(handlers)

    def add(self, handler: Handler) -> None:
        self._handlers.append(handler)

    def handle(self, entry: Entry) -> None:
        """Call every registered handler with entry."""
        for handler in self._handlers:
            handler(entry)

    def __call__(self, entry: Entry) -> None:
        self.handle(entry)