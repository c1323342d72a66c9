"""Colour-coded labels for gRPC status codes and latency bands."""

from __future__ import annotations

from grpcmon.entry import StatusCode

_RESET = "\033[0m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_CYAN = "\033[36m"

_SEVERE = {StatusCode.DEADLINE_EXCEEDED, StatusCode.UNAVAILABLE, StatusCode.INTERNAL}

_BAND_COLOURS = {"fast": _CYAN, "ok": _GREEN, "slow": _YELLOW}


def for_status(code: StatusCode, colour: bool = False) -> str:
    """Return a short, optionally coloured label for a status code."""
    text = str(code)
    if not colour:
        return text
    if code is StatusCode.OK:
        tint = _GREEN
    elif code in _SEVERE:
        tint = _RED
    else:
        tint = _YELLOW
    return f"{tint}{text}{_RESET}"


def latency_band(ms: float) -> str:
    """Return a human-readable band for a latency in milliseconds."""
    if ms < 50:
        return "fast"
    if ms < 200:
        return "ok"
    if ms < 1000:
        return "slow"
    return "very slow"


def latency_band_colour(ms: float, colour: bool = False) -> str:
    """Return the latency band, optionally coloured."""
    band = latency_band(ms)
    if not colour:
        return band
    return f"{_BAND_COLOURS.get(band, _RED)}{band}{_RESET}"