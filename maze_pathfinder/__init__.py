"""Random grid mazes and interchangeable pathfinding algorithms."""

__all__ = [
    "Cell",
    "CellState",
    "Maze",
    "MazeGenerator",
    "generate_maze",
    "PriorityQueue",
    "SearchEvent",
    "SearchResult",
    "LoggingEventSink",
    "RecordingEventSink",
    "ALGORITHMS",
    "available_algorithms",
    "compare_algorithms",
    "find_path",
    "solve",
    "MazeError",
    "InvalidDimensionsError",
    "EndpointsNotSetError",
    "EndpointNotPassableError",
    "InvalidEndpointsError",
    "UnknownAlgorithmError",
]

__version__ = "0.1.0"

from .errors import (
    EndpointNotPassableError,
    EndpointsNotSetError,
    InvalidDimensionsError,
    InvalidEndpointsError,
    MazeError,
    UnknownAlgorithmError,
)
from .events import LoggingEventSink, RecordingEventSink, SearchEvent
from .generator import MazeGenerator, generate_maze
from .grid import Cell, CellState, Maze
from .priority_queue import PriorityQueue
from .search import ALGORITHMS, SearchResult, available_algorithms, compare_algorithms, find_path, solve
