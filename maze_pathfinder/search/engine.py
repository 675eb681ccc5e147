"""Algorithm registry and the validated entry points ``solve`` and ``find_path``."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

from ..errors import EndpointNotPassableError, EndpointsNotSetError, InvalidEndpointsError, UnknownAlgorithmError
from ..events import EventSink
from ..grid import Cell, CellLike, Maze, as_cell
from .base import SearchResult
from .informed import best_first_search, dijkstra_search, greedy_best_first_search
from .uninformed import bidirectional_search, breadth_first_search, depth_first_search, depth_limited_search

logger = logging.getLogger(__name__)

SearchFunction = Callable[..., SearchResult]

ALGORITHMS: Dict[str, SearchFunction] = {
    "bfs": breadth_first_search,
    "dfs": depth_first_search,
    "dijkstra": dijkstra_search,
    "bestFirst": best_first_search,
    "depthLimited": depth_limited_search,
    "bidirectional": bidirectional_search,
    "greedyBestFirst": greedy_best_first_search,
}

# Algorithms that accept the optional knobs below.
_DEPTH_BOUNDED = {"dfs", "depthLimited"}
_ITERATION_CAPPED = {"greedyBestFirst"}


def available_algorithms() -> List[str]:
    return list(ALGORITHMS)


def resolve_endpoints(
    maze: Maze,
    start: Optional[CellLike] = None,
    end: Optional[CellLike] = None,
) -> Tuple[Cell, Cell]:
    """Return validated endpoints, defaulting to the ones stored on the maze."""
    start_value = start if start is not None else maze.start
    end_value = end if end is not None else maze.end
    if start_value is None or end_value is None:
        raise EndpointsNotSetError("start and end points must both be set before searching")
    start_cell = as_cell(start_value)
    end_cell = as_cell(end_value)
    for name, cell in (("start", start_cell), ("end", end_cell)):
        if not maze.in_bounds(cell):
            raise EndpointNotPassableError(f"{name} {cell} lies outside the {maze.width}x{maze.height} maze")
        if not maze.is_passable(cell):
            raise EndpointNotPassableError(f"{name} {cell} is a blocked cell")
    if start_cell == end_cell:
        raise InvalidEndpointsError(f"start and end must differ, both are {start_cell}")
    return start_cell, end_cell


def solve(
    maze: Maze,
    algorithm: str,
    *,
    start: Optional[CellLike] = None,
    end: Optional[CellLike] = None,
    depth_limit: Optional[int] = None,
    max_iterations: Optional[int] = None,
    max_steps: Optional[int] = None,
    events: Optional[EventSink] = None,
) -> SearchResult:
    """Run one algorithm and return its full :class:`SearchResult`.

    ``depth_limit`` applies to ``dfs`` and ``depthLimited`` and
    ``max_iterations`` to ``greedyBestFirst``; other algorithms ignore them.
    ``max_steps`` bounds the number of frontier pops for every algorithm.
    """
    try:
        search = ALGORITHMS[algorithm]
    except KeyError as exc:
        raise UnknownAlgorithmError(
            f"unknown algorithm '{algorithm}', expected one of: {', '.join(ALGORITHMS)}"
        ) from exc
    start_cell, end_cell = resolve_endpoints(maze, start, end)

    options: Dict[str, object] = {"events": events, "max_steps": max_steps}
    if algorithm in _DEPTH_BOUNDED:
        options["depth_limit"] = depth_limit
    if algorithm in _ITERATION_CAPPED:
        options["max_iterations"] = max_iterations

    result = search(maze, start_cell, end_cell, **options)
    logger.debug(
        "%s from %s to %s: %s after %d expansions",
        algorithm,
        start_cell,
        end_cell,
        f"path of {result.length} steps" if result.found else "no path",
        result.expanded,
    )
    return result


def find_path(
    maze: Maze,
    algorithm: str,
    *,
    start: Optional[CellLike] = None,
    end: Optional[CellLike] = None,
    depth_limit: Optional[int] = None,
    max_iterations: Optional[int] = None,
    max_steps: Optional[int] = None,
    events: Optional[EventSink] = None,
) -> List[Cell]:
    """Return the path found by ``algorithm``; an empty list means no path."""
    return solve(
        maze,
        algorithm,
        start=start,
        end=end,
        depth_limit=depth_limit,
        max_iterations=max_iterations,
        max_steps=max_steps,
        events=events,
    ).path


def compare_algorithms(
    maze: Maze,
    algorithms: Optional[List[str]] = None,
    **kwargs,
) -> Dict[str, SearchResult]:
    """Run several algorithms on one maze; each run owns its own scratch state."""
    names = algorithms if algorithms is not None else available_algorithms()
    return {name: solve(maze, name, **kwargs) for name in names}


__all__ = [
    "ALGORITHMS",
    "SearchFunction",
    "available_algorithms",
    "resolve_endpoints",
    "solve",
    "find_path",
    "compare_algorithms",
]
