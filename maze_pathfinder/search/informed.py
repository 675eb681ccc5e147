"""Priority-queue searches: Dijkstra, best-first and greedy best-first.

Best-first ranks the frontier by Euclidean distance to the goal and greedy
best-first by Manhattan distance. The two differ observably on open grids, so
they stay separate.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Optional

from ..events import EventSink
from ..grid import Cell, Maze
from ..priority_queue import PriorityQueue
from .base import (
    SearchNode,
    SearchResult,
    SearchRun,
    euclidean_distance,
    manhattan_distance,
    neighbors,
    reconstruct_path,
)

Heuristic = Callable[[Cell, Cell], float]


def _by_cost(a: SearchNode, b: SearchNode) -> bool:
    return a.cost <= b.cost


def dijkstra_search(
    maze: Maze,
    start: Cell,
    end: Cell,
    *,
    events: Optional[EventSink] = None,
    max_steps: Optional[int] = None,
) -> SearchResult:
    run = SearchRun("dijkstra", start, end, events=events, max_steps=max_steps)
    distances: Dict[Cell, float] = {start: 0}
    parents: Dict[Cell, Cell] = {}
    queue: PriorityQueue[SearchNode] = PriorityQueue(_by_cost)
    queue.enqueue(SearchNode(start, cost=0))

    while not queue.is_empty():
        node = queue.dequeue()
        if not run.step(node.cell, node.cost):
            return run.out_of_budget()
        if node.cell == end:
            return run.found(reconstruct_path(parents, start, end))
        if node.cost > distances.get(node.cell, math.inf):
            continue
        for neighbor in neighbors(maze, node.cell):
            new_cost = node.cost + 1
            if new_cost < distances.get(neighbor, math.inf):
                distances[neighbor] = new_cost
                parents[neighbor] = node.cell
                queue.enqueue(SearchNode(neighbor, cost=new_cost))
    return run.exhausted()


def _heuristic_search(
    algorithm: str,
    heuristic: Heuristic,
    maze: Maze,
    start: Cell,
    end: Cell,
    *,
    events: Optional[EventSink],
    max_steps: Optional[int],
) -> SearchResult:
    # Nodes carry their heuristic value in ``cost``; accumulated distance is not tracked.
    run = SearchRun(algorithm, start, end, events=events, max_steps=max_steps)
    queue: PriorityQueue[SearchNode] = PriorityQueue(_by_cost)
    queue.enqueue(SearchNode(start, cost=heuristic(start, end)))
    parents: Dict[Cell, Cell] = {}
    visited = set()

    while not queue.is_empty():
        node = queue.dequeue()
        if not run.step(node.cell, node.cost):
            return run.out_of_budget()
        if node.cell == end:
            return run.found(reconstruct_path(parents, start, end))
        if node.cell in visited:
            continue
        visited.add(node.cell)
        for neighbor in neighbors(maze, node.cell):
            if neighbor not in visited:
                queue.enqueue(SearchNode(neighbor, cost=heuristic(neighbor, end)))
                parents[neighbor] = node.cell
    return run.exhausted()


def best_first_search(
    maze: Maze,
    start: Cell,
    end: Cell,
    *,
    events: Optional[EventSink] = None,
    max_steps: Optional[int] = None,
) -> SearchResult:
    """Expand whichever frontier cell is closest to the goal in a straight line."""
    return _heuristic_search(
        "bestFirst",
        euclidean_distance,
        maze,
        start,
        end,
        events=events,
        max_steps=max_steps,
    )


def greedy_best_first_search(
    maze: Maze,
    start: Cell,
    end: Cell,
    *,
    max_iterations: Optional[int] = None,
    events: Optional[EventSink] = None,
    max_steps: Optional[int] = None,
) -> SearchResult:
    """Manhattan-distance best-first search with an iteration cap.

    The cap defaults to the maze's cell count. Running out of iterations is
    reported as no path with ``budget_exhausted`` set. ``max_steps`` tightens
    the cap further when it is smaller.
    """
    cap = maze.cell_count if max_iterations is None else max_iterations
    if max_steps is not None:
        cap = min(cap, max_steps)
    return _heuristic_search(
        "greedyBestFirst",
        manhattan_distance,
        maze,
        start,
        end,
        events=events,
        max_steps=cap,
    )


__all__ = ["dijkstra_search", "best_first_search", "greedy_best_first_search"]
