"""A gRPC-aware retry policy for replaying or re-issuing captured requests.

Use RetryPolicy() for a sensible starting configuration, then call run with
the function that performs the call. run retries up to max_attempts times,
sleeping a fixed backoff between attempts, while the raised error is an
RpcError carrying one of the retryable status codes.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from grpcmon.entry import StatusCode
from grpcmon.throttle import Cancelled


class RpcError(Exception):
    """An error that carries a gRPC status code."""

    def __init__(self, code: StatusCode, message: str = "") -> None:
        super().__init__(f"rpc error: code = {code} desc = {message}")
        self.code = code
        self.message = message


@dataclass(frozen=True)
class RetryPolicy:
    """How often and on which status codes to retry; backoff is in seconds."""

    max_attempts: int = 3
    backoff: float = 0.2
    retry_on: frozenset[StatusCode] = field(
        default_factory=lambda: frozenset(
            {StatusCode.UNAVAILABLE, StatusCode.DEADLINE_EXCEEDED}
        )
    )


def _retryable(exc: BaseException, codes: frozenset[StatusCode]) -> bool:
    return isinstance(exc, RpcError) and exc.code in codes


def run(
    fn: Callable[[], object],
    policy: Optional[RetryPolicy] = None,
    cancel: Optional[threading.Event] = None,
) -> int:
    """Call fn until it succeeds, retrying on retryable RpcErrors.

    Returns the number of attempts made. Re-raises the last error when it is
    not retryable or the attempts are used up, and raises Cancelled when
    cancel is set before an attempt or during a backoff.
    """
    policy = policy or RetryPolicy()
    max_attempts = max(policy.max_attempts, 1)
    backoff = max(policy.backoff, 0.0)
    attempt = 0
    while True:
        if cancel is not None and cancel.is_set():
            raise Cancelled(f"retry: cancelled after {attempt} attempt(s)")
        attempt += 1
        try:
            fn()
        except Exception as exc:
            if attempt >= max_attempts or not _retryable(exc, policy.retry_on):
                raise
            if cancel is not None:
                if cancel.wait(backoff):
                    raise Cancelled(
                        f"retry: cancelled after {attempt} attempt(s)"
                    ) from exc
            else:
                time.sleep(backoff)
        else:
            return attempt