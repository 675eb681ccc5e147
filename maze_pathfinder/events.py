"""Structured search instrumentation.

Search functions report progress to an event sink, a callable that accepts a
single :class:`SearchEvent`. Sinks only observe; nothing they do changes how a
search proceeds or terminates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from .grid import Cell

START = "start"
EXPAND = "expand"
FOUND = "found"
EXHAUSTED = "exhausted"
BUDGET = "budget"


@dataclass(frozen=True)
class SearchEvent:
    algorithm: str
    kind: str
    cell: Optional[Cell] = None
    detail: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "kind": self.kind,
            "cell": list(self.cell) if self.cell is not None else None,
            "detail": self.detail,
        }


EventSink = Callable[[SearchEvent], None]


def null_sink(event: SearchEvent) -> None:
    """Discard every event."""


class RecordingEventSink:
    """Keep every event in memory, mostly for tests and step-through views."""

    def __init__(self) -> None:
        self.events: List[SearchEvent] = []

    def __call__(self, event: SearchEvent) -> None:
        self.events.append(event)

    def kinds(self) -> List[str]:
        return [event.kind for event in self.events]

    def expanded_cells(self) -> List[Cell]:
        return [event.cell for event in self.events if event.kind == EXPAND and event.cell is not None]


class LoggingEventSink:
    """Forward events to :mod:`logging`.

    Expansions go out at ``expand_level`` (DEBUG by default), search outcomes at
    INFO and exhausted step budgets at WARNING.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, *, expand_level: int = logging.DEBUG) -> None:
        self.logger = logger if logger is not None else logging.getLogger("maze_pathfinder.search")
        self.expand_level = expand_level

    def __call__(self, event: SearchEvent) -> None:
        if event.kind == EXPAND:
            if self.logger.isEnabledFor(self.expand_level):
                self.logger.log(
                    self.expand_level,
                    "%s: exploring %s (%s)",
                    event.algorithm,
                    event.cell,
                    event.detail,
                )
        elif event.kind == START:
            self.logger.debug("%s: searching from %s", event.algorithm, event.cell)
        elif event.kind == FOUND:
            self.logger.info("%s: path found after %d expansions", event.algorithm, int(event.detail or 0))
        elif event.kind == BUDGET:
            self.logger.warning(
                "%s: search exceeded its budget of %d steps", event.algorithm, int(event.detail or 0)
            )
        else:
            self.logger.info("%s: no path found", event.algorithm)


__all__ = [
    "SearchEvent",
    "EventSink",
    "null_sink",
    "RecordingEventSink",
    "LoggingEventSink",
    "START",
    "EXPAND",
    "FOUND",
    "EXHAUSTED",
    "BUDGET",
]
