"""Normalisation of captured entries so structurally identical calls compare equal."""

from __future__ import annotations

import dataclasses
from typing import Iterable

from grpcmon.entry import Entry


def apply(
    entry: Entry,
    *,
    clear_timestamp: bool = False,
    lower_method: bool = False,
    strip_metadata_keys: Iterable[str] = (),
) -> Entry:
    """Return a copy of entry with the requested normalisations applied.

    Stripped metadata keys are removed both as given and in lower case.
    """
    changes: dict = {}
    if clear_timestamp:
        changes["timestamp"] = None
    if lower_method:
        changes["method"] = entry.method.strip().lower()
    keys = list(strip_metadata_keys)
    if keys and entry.metadata:
        doomed = set(keys) | {k.lower() for k in keys}
        changes["metadata"] = {
            k: v for k, v in entry.metadata.items() if k not in doomed
        }
    return dataclasses.replace(entry, **changes)


def apply_all(
    entries: Iterable[Entry],
    *,
    clear_timestamp: bool = False,
    lower_method: bool = False,
    strip_metadata_keys: Iterable[str] = (),
) -> list[Entry]:
    """Normalise every entry and return the copies."""
    keys = tuple(strip_metadata_keys)
    return [
        apply(
            e,
            clear_timestamp=clear_timestamp,
            lower_method=lower_method,
            strip_metadata_keys=keys,
        )
        for e in entries
    ]