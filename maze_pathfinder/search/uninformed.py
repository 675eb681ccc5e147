"""Searches that ignore the goal's position: breadth-first, depth-first and bidirectional.

The functions here assume validated input: two distinct passable endpoints
inside the maze. :func:`maze_pathfinder.search.engine.solve` performs those
checks before dispatching.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Optional

from ..config import DEFAULT_DEPTH_LIMIT
from ..events import EventSink
from ..grid import Cell, Maze
from .base import SearchNode, SearchResult, SearchRun, neighbors, reconstruct_path


def breadth_first_search(
    maze: Maze,
    start: Cell,
    end: Cell,
    *,
    events: Optional[EventSink] = None,
    max_steps: Optional[int] = None,
) -> SearchResult:
    run = SearchRun("bfs", start, end, events=events, max_steps=max_steps)
    queue: Deque[Cell] = deque([start])
    parents: Dict[Cell, Cell] = {}
    visited = {start}

    while queue:
        cell = queue.popleft()
        if not run.step(cell):
            return run.out_of_budget()
        if cell == end:
            return run.found(reconstruct_path(parents, start, end))
        for neighbor in neighbors(maze, cell):
            if neighbor not in visited:
                visited.add(neighbor)
                parents[neighbor] = cell
                queue.append(neighbor)
    return run.exhausted()


def depth_first_search(
    maze: Maze,
    start: Cell,
    end: Cell,
    *,
    depth_limit: Optional[int] = None,
    events: Optional[EventSink] = None,
    max_steps: Optional[int] = None,
    algorithm: str = "dfs",
) -> SearchResult:
    """Stack-based depth-first search, optionally bounded in depth.

    Cells are marked visited when popped, not when pushed, so one cell can sit
    on the stack several times. Nothing deeper than ``depth_limit`` is ever
    pushed, so a returned path has at most ``depth_limit`` edges. A parent link
    is overwritten by each push; the newest push of a cell is always the one
    popped first, which keeps the links consistent with the popped depths.
    """
    if depth_limit is not None and depth_limit < 0:
        raise ValueError("depth_limit must be non-negative")
    run = SearchRun(algorithm, start, end, events=events, max_steps=max_steps)
    stack: List[SearchNode] = [SearchNode(start, depth=0)]
    parents: Dict[Cell, Cell] = {}
    visited = set()

    while stack:
        node = stack.pop()
        if not run.step(node.cell, node.depth):
            return run.out_of_budget()
        if depth_limit is not None and node.depth > depth_limit:
            continue
        if node.cell == end:
            return run.found(reconstruct_path(parents, start, end))
        if node.cell in visited:
            continue
        visited.add(node.cell)
        child_depth = node.depth + 1
        if depth_limit is not None and child_depth > depth_limit:
            continue
        for neighbor in neighbors(maze, node.cell):
            if neighbor not in visited:
                stack.append(SearchNode(neighbor, depth=child_depth))
                parents[neighbor] = node.cell
    return run.exhausted()


def depth_limited_search(
    maze: Maze,
    start: Cell,
    end: Cell,
    *,
    depth_limit: Optional[int] = None,
    events: Optional[EventSink] = None,
    max_steps: Optional[int] = None,
) -> SearchResult:
    """Depth-first search with a finite bound; misses goals beyond it by design."""
    limit = DEFAULT_DEPTH_LIMIT if depth_limit is None else depth_limit
    return depth_first_search(
        maze,
        start,
        end,
        depth_limit=limit,
        events=events,
        max_steps=max_steps,
        algorithm="depthLimited",
    )


class _Frontier:
    """One side of a bidirectional search."""

    def __init__(self, origin: Cell) -> None:
        self.origin = origin
        self.queue: Deque[Cell] = deque([origin])
        self.parents: Dict[Cell, Optional[Cell]] = {origin: None}
        self.depths: Dict[Cell, int] = {origin: 0}

    def expand(self, maze: Maze, cell: Cell) -> None:
        for neighbor in neighbors(maze, cell):
            if neighbor not in self.parents:
                self.parents[neighbor] = cell
                self.depths[neighbor] = self.depths[cell] + 1
                self.queue.append(neighbor)

    def chain_to_origin(self, cell: Cell) -> List[Cell]:
        chain = [cell]
        parent = self.parents[cell]
        while parent is not None:
            chain.append(parent)
            parent = self.parents[parent]
        return chain


def bidirectional_search(
    maze: Maze,
    start: Cell,
    end: Cell,
    *,
    events: Optional[EventSink] = None,
    max_steps: Optional[int] = None,
) -> SearchResult:
    """Alternate breadth-first expansions from both endpoints until they meet.

    The search stops as soon as one side dequeues a cell the other side has
    already recorded. The path then goes through whichever cell recorded by
    both sides has the smallest combined depth, which is a shortest path.
    """
    run = SearchRun("bidirectional", start, end, events=events, max_steps=max_steps)
    forward = _Frontier(start)
    backward = _Frontier(end)

    while forward.queue and backward.queue:
        for side, other in ((forward, backward), (backward, forward)):
            cell = side.queue.popleft()
            if not run.step(cell, side.depths[cell]):
                return run.out_of_budget()
            if cell in other.parents:
                meeting = _best_meeting_cell(forward, backward)
                path = list(reversed(forward.chain_to_origin(meeting)))
                path.extend(backward.chain_to_origin(meeting)[1:])
                return run.found(path)
            side.expand(maze, cell)
            if not side.queue:
                break
    return run.exhausted()


def _best_meeting_cell(forward: _Frontier, backward: _Frontier) -> Cell:
    smaller, larger = (
        (forward.depths, backward.depths)
        if len(forward.depths) <= len(backward.depths)
        else (backward.depths, forward.depths)
    )
    return min(
        (cell for cell in smaller if cell in larger),
        key=lambda cell: smaller[cell] + larger[cell],
    )


__all__ = [
    "breadth_first_search",
    "depth_first_search",
    "depth_limited_search",
    "bidirectional_search",
]
