"""Error taxonomy for maze generation and pathfinding.

Every error is raised before any work starts, so a caller never observes a
half-finished search. An unreachable goal is not an error: searches report it
as an empty path.
"""

from __future__ import annotations


class MazeError(Exception):
    """Base class for all maze errors."""


class InvalidDimensionsError(MazeError, ValueError):
    """Raised when a maze is requested with a width or height below the minimum."""


class EndpointsNotSetError(MazeError, ValueError):
    """Raised when a search is requested before both endpoints are chosen."""


class EndpointNotPassableError(MazeError, ValueError):
    """Raised when an endpoint lies outside the maze or on a blocked cell."""


class InvalidEndpointsError(MazeError, ValueError):
    """Raised when start and end reference the same cell."""


class UnknownAlgorithmError(MazeError, KeyError):
    """Raised for an algorithm selector that is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


__all__ = [
    "MazeError",
    "InvalidDimensionsError",
    "EndpointsNotSetError",
    "EndpointNotPassableError",
    "InvalidEndpointsError",
    "UnknownAlgorithmError",
]
