"""Pathfinding over maze grids."""

__all__ = [
    "ALGORITHMS",
    "SearchNode",
    "SearchResult",
    "available_algorithms",
    "bidirectional_search",
    "best_first_search",
    "breadth_first_search",
    "compare_algorithms",
    "depth_first_search",
    "depth_limited_search",
    "dijkstra_search",
    "euclidean_distance",
    "find_path",
    "greedy_best_first_search",
    "manhattan_distance",
    "neighbors",
    "reconstruct_path",
    "resolve_endpoints",
    "solve",
]

from .base import SearchNode, SearchResult, euclidean_distance, manhattan_distance, neighbors, reconstruct_path
from .engine import ALGORITHMS, available_algorithms, compare_algorithms, find_path, resolve_endpoints, solve
from .informed import best_first_search, dijkstra_search, greedy_best_first_search
from .uninformed import bidirectional_search, breadth_first_search, depth_first_search, depth_limited_search
