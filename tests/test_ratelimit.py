import time

import pytest

from grpcmon.ratelimit import Limiter


def test_allows_token_acquisition():
    with Limiter(10) as limiter:
        assert limiter.rps == 10
        start = time.monotonic()
        limiter.wait(timeout=1.0)
        assert time.monotonic() - start < 1.0


def test_wait_times_out_when_bucket_drained():
    with Limiter(1) as limiter:
        limiter.wait(timeout=2.0)
        with pytest.raises(TimeoutError):
            limiter.wait(timeout=0.05)


def test_zero_rps_defaults_to_one():
    with Limiter(0) as limiter:
        assert limiter.rps == 1
        start = time.monotonic()
        limiter.wait(timeout=2.0)
        assert time.monotonic() - start < 2.0


def test_negative_rps_defaults_to_one():
    with Limiter(-5) as limiter:
        assert limiter.rps == 1


def test_multiple_tokens():
    with Limiter(50) as limiter:
        assert limiter.rps == 50
        start = time.monotonic()
        for _ in range(5):
            limiter.wait(timeout=2.0)
        assert time.monotonic() - start < 2.0


def test_rps_reports_configured_rate():
    with Limiter(25) as limiter:
        assert limiter.rps == 25


def test_stopped_limiter_adds_no_tokens():
    limiter = Limiter(100)
    limiter.stop()
    while True:
        try:
            limiter.wait(timeout=0.01)
        except TimeoutError:
            break
    with pytest.raises(TimeoutError):
        limiter.wait(timeout=0.1)