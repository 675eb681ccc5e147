"""Randomized depth-first maze generator."""

from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional, Tuple

from .config import DEFAULT_EXTRA_PATH_PROBABILITY
from .grid import Cell, CellState, Maze, MIN_SIZE
from .errors import InvalidDimensionsError

logger = logging.getLogger(__name__)

CARVE_STEPS: Tuple[Tuple[int, int], ...] = ((2, 0), (0, 2), (-2, 0), (0, -2))
CARDINAL_STEPS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
ORIGIN = Cell(1, 1)


class MazeGenerator:
    """Carve spanning-tree mazes over the odd-coordinate lattice.

    Carving starts at ``(1, 1)`` and walks two cells at a time in a shuffled
    direction order, opening the wall between. Once a cell has exhausted its
    directions it may open one extra neighbouring wall, which adds loops but
    never disconnects anything. Borders are blocked at the end.
    """

    DEFAULT_EXTRA_PATH_PROBABILITY = DEFAULT_EXTRA_PATH_PROBABILITY

    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        extra_path_probability: float = DEFAULT_EXTRA_PATH_PROBABILITY,
    ) -> None:
        if not 0.0 <= extra_path_probability <= 1.0:
            raise ValueError("extra_path_probability must be within [0, 1]")
        self._rng = rng if rng is not None else random.Random(seed)
        self.extra_path_probability = float(extra_path_probability)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def generate(self, width: int, height: int) -> Maze:
        if width < MIN_SIZE or height < MIN_SIZE:
            raise InvalidDimensionsError(
                f"maze dimensions must be at least {MIN_SIZE}x{MIN_SIZE}, got {width}x{height}"
            )
        maze = Maze(width, height)
        self._carve(maze)
        maze.enforce_border()
        logger.debug(
            "Generated %dx%d maze with %d passable cells",
            width,
            height,
            len(maze.passable_cells()),
        )
        return maze

    # ------------------------------------------------------------------

    def _carve(self, maze: Maze) -> None:
        # Each frame is a cell and the iterator over its remaining shuffled steps.
        maze.set_state(ORIGIN, CellState.PASSABLE)
        stack: List[Tuple[Cell, Iterator[Tuple[int, int]]]] = [(ORIGIN, self._shuffled_steps())]
        while stack:
            cell, steps = stack[-1]
            for dx, dy in steps:
                target = Cell(cell.x + dx, cell.y + dy)
                if self._is_interior(maze, target) and maze.state(target) == CellState.BLOCKED:
                    maze.set_state(Cell(cell.x + dx // 2, cell.y + dy // 2), CellState.PASSABLE)
                    maze.set_state(target, CellState.PASSABLE)
                    stack.append((target, self._shuffled_steps()))
                    break
            else:
                stack.pop()
                self._add_extra_path(maze, cell)

    def _shuffled_steps(self) -> Iterator[Tuple[int, int]]:
        steps = list(CARVE_STEPS)
        self._rng.shuffle(steps)
        return iter(steps)

    def _add_extra_path(self, maze: Maze, cell: Cell) -> None:
        if self._rng.random() >= self.extra_path_probability:
            return
        dx, dy = CARDINAL_STEPS[self._rng.randrange(len(CARDINAL_STEPS))]
        target = Cell(cell.x + dx, cell.y + dy)
        if self._is_interior(maze, target) and maze.state(target) == CellState.BLOCKED:
            maze.set_state(target, CellState.PASSABLE)

    @staticmethod
    def _is_interior(maze: Maze, cell: Cell) -> bool:
        return 0 < cell.x < maze.width - 1 and 0 < cell.y < maze.height - 1


def generate_maze(
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
    *,
    seed: Optional[int] = None,
) -> Maze:
    """Generate a maze with a one-off :class:`MazeGenerator`."""
    return MazeGenerator(seed=seed, rng=rng).generate(width, height)


__all__ = ["MazeGenerator", "generate_maze"]
