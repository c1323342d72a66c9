"""Saving, loading and listing named snapshots of captured traffic.

Snapshots are JSON files in a directory, one per name, so a set of requests
can be captured, kept and reloaded later for replay or diffing.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Union

from grpcmon.entry import Entry, StatusCode, Store

PathLike = Union[str, Path]

_SUFFIX = ".json"


@dataclass(frozen=True)
class SnapshotMeta:
    """Metadata about a saved snapshot."""

    name: str
    created_at: datetime
    count: int


def _encode(entry: Entry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "method": entry.method,
        "target": entry.target,
        "request": entry.request,
        "response": entry.response,
        "status": entry.status.name,
        "metadata": entry.metadata,
        "timestamp": entry.timestamp.isoformat() if entry.timestamp else None,
        "latency_ms": entry.latency_ms,
    }


def _decode(data: dict[str, Any]) -> Entry:
    timestamp = data.get("timestamp")
    return Entry(
        id=data.get("id", ""),
        method=data.get("method", ""),
        target=data.get("target", ""),
        request=data.get("request"),
        response=data.get("response"),
        status=StatusCode[data.get("status", "OK")],
        metadata=data.get("metadata"),
        timestamp=datetime.fromisoformat(timestamp) if timestamp else None,
        latency_ms=float(data.get("latency_ms", 0.0)),
    )


def _path(directory: PathLike, name: str) -> Path:
    return Path(directory) / f"{name}{_SUFFIX}"


def save(directory: PathLike, name: str, store: Store) -> SnapshotMeta:
    """Write the store's entries to a new snapshot named name under directory.

    Raises FileExistsError if a snapshot of that name already exists.
    """
    Path(directory).mkdir(parents=True, exist_ok=True)
    entries = store.list()
    text = json.dumps([_encode(e) for e in entries], indent=2)
    with _path(directory, name).open("x", encoding="utf-8") as f:
        f.write(text)
    return SnapshotMeta(name=name, created_at=datetime.now(timezone.utc), count=len(entries))


def load(directory: PathLike, name: str) -> list[Entry]:
    """Read the entries of a named snapshot.

    Raises FileNotFoundError if it does not exist and ValueError if it is malformed.
    """
    with _path(directory, name).open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"snapshot {name!r} does not hold a list of entries")
    try:
        return [_decode(item) for item in data]
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"snapshot {name!r} holds a malformed entry") from exc


def list_snapshots(directory: PathLike) -> list[str]:
    """Return the names of the snapshots in directory, sorted."""
    return sorted(p.stem for p in Path(directory).glob(f"*{_SUFFIX}") if p.is_file())