"""A composable entry-processing pipeline.

Processors are plain callables that take and return lists of entries, so
filtering, deduplication and other steps can be chained in a defined order.
"""

from __future__ import annotations

from typing import Callable

from grpcmon.entry import Entry

Processor = Callable[[list[Entry]], list[Entry]]


class Pipeline:
    """Applies a sequence of processors to entries."""

    def __init__(self, *steps: Processor) -> None:
        self._steps: list[Processor] = list(steps)

    def add(self, step: Processor) -> None:
        self._steps.append(step)

    def run(self, entries: list[Entry]) -> list[Entry]:
        """Pass entries through each processor in order."""
        out = entries
        for step in self._steps:
            out = step(out)
        return out