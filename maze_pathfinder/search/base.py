"""Building blocks shared by every search algorithm."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..events import BUDGET, EXHAUSTED, EXPAND, FOUND, START, EventSink, SearchEvent, null_sink
from ..grid import Cell, Maze

# Down, up, right, left. Depth-first path shapes depend on this order.
NEIGHBOR_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


@dataclass(frozen=True)
class SearchNode:
    """Frontier entry; algorithms fill in the optional fields they order by."""

    cell: Cell
    depth: Optional[int] = None
    cost: Optional[float] = None


@dataclass
class SearchResult:
    algorithm: str
    path: List[Cell] = field(default_factory=list)
    expanded: int = 0
    budget_exhausted: bool = False

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def length(self) -> int:
        """Number of edges in the path, or -1 when there is none."""
        return len(self.path) - 1 if self.path else -1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "found": self.found,
            "length": self.length,
            "expanded": self.expanded,
            "budget_exhausted": self.budget_exhausted,
            "path": [list(cell) for cell in self.path],
        }


def neighbors(maze: Maze, cell: Cell) -> List[Cell]:
    result = []
    for dx, dy in NEIGHBOR_STEPS:
        candidate = Cell(cell.x + dx, cell.y + dy)
        if maze.is_passable(candidate):
            result.append(candidate)
    return result


def euclidean_distance(a: Cell, b: Cell) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def manhattan_distance(a: Cell, b: Cell) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def reconstruct_path(parents: Mapping[Cell, Optional[Cell]], start: Cell, end: Cell) -> List[Cell]:
    """Follow parent links from ``end`` back to ``start``."""
    path = [end]
    current = end
    while current != start:
        current = parents[current]
        path.append(current)
    path.reverse()
    return path


class SearchRun:
    """Per-call bookkeeping: expansion counting, step budget and event reporting."""

    def __init__(
        self,
        algorithm: str,
        start: Cell,
        end: Cell,
        *,
        events: Optional[EventSink] = None,
        max_steps: Optional[int] = None,
    ) -> None:
        if max_steps is not None and max_steps < 0:
            raise ValueError("max_steps must be non-negative")
        self.algorithm = algorithm
        self.start = start
        self.end = end
        self.events = events if events is not None else null_sink
        self.max_steps = max_steps
        self.expanded = 0
        self.emit(START, start)

    def emit(self, kind: str, cell: Optional[Cell] = None, detail: Optional[float] = None) -> None:
        self.events(SearchEvent(self.algorithm, kind, cell, detail))

    def step(self, cell: Cell, detail: Optional[float] = None) -> bool:
        """Count one frontier pop; False once the step budget is spent."""
        if self.max_steps is not None and self.expanded >= self.max_steps:
            return False
        self.expanded += 1
        self.emit(EXPAND, cell, detail)
        return True

    def found(self, path: List[Cell]) -> SearchResult:
        self.emit(FOUND, self.end, self.expanded)
        return SearchResult(self.algorithm, path, self.expanded)

    def exhausted(self) -> SearchResult:
        self.emit(EXHAUSTED, None, self.expanded)
        return SearchResult(self.algorithm, [], self.expanded)

    def out_of_budget(self) -> SearchResult:
        self.emit(BUDGET, None, self.max_steps)
        return SearchResult(self.algorithm, [], self.expanded, budget_exhausted=True)


__all__ = [
    "NEIGHBOR_STEPS",
    "SearchNode",
    "SearchResult",
    "SearchRun",
    "neighbors",
    "euclidean_distance",
    "manhattan_distance",
    "reconstruct_path",
]
