"""Defaults and named complexity tiers."""

from __future__ import annotations

from typing import Dict

COMPLEXITY_SIZES: Dict[str, int] = {
    "easy": 15,
    "medium": 25,
    "hard": 35,
}
DEFAULT_COMPLEXITY = "medium"

DEFAULT_EXTRA_PATH_PROBABILITY = 0.3
DEFAULT_DEPTH_LIMIT = 10


def maze_size_for_complexity(complexity: str) -> int:
    """Return the side length for a complexity tier, falling back to the default tier."""
    return COMPLEXITY_SIZES.get(complexity, COMPLEXITY_SIZES[DEFAULT_COMPLEXITY])


__all__ = [
    "COMPLEXITY_SIZES",
    "DEFAULT_COMPLEXITY",
    "DEFAULT_EXTRA_PATH_PROBABILITY",
    "DEFAULT_DEPTH_LIMIT",
    "maze_size_for_complexity",
]
