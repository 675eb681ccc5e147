"""Grid maze model shared by the generator and every search algorithm.

Cells are addressed as ``(x, y)`` with ``x`` the column and ``y`` the row. The
backing array is indexed ``grid[y, x]`` and stores :class:`CellState` values.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator, List, NamedTuple, Optional, Sequence, Union

import numpy as np

from .errors import EndpointNotPassableError, InvalidDimensionsError, InvalidEndpointsError

MIN_SIZE = 3


class Cell(NamedTuple):
    x: int
    y: int


class CellState(IntEnum):
    PASSABLE = 0
    BLOCKED = 1


CellLike = Union[Cell, Sequence[int]]


def as_cell(value: CellLike) -> Cell:
    if isinstance(value, Cell):
        return value
    x, y = value
    return Cell(int(x), int(y))


class Maze:
    """Fixed-size grid of passable and blocked cells with optional endpoints."""

    def __init__(self, width: int, height: int, grid: Optional[np.ndarray] = None) -> None:
        if width < MIN_SIZE or height < MIN_SIZE:
            raise InvalidDimensionsError(
                f"maze dimensions must be at least {MIN_SIZE}x{MIN_SIZE}, got {width}x{height}"
            )
        self.width = int(width)
        self.height = int(height)
        if grid is None:
            self.grid = np.full((self.height, self.width), CellState.BLOCKED, dtype=np.uint8)
        else:
            array = np.asarray(grid, dtype=np.uint8)
            if array.shape != (self.height, self.width):
                raise InvalidDimensionsError(
                    f"grid shape {array.shape} does not match {self.height}x{self.width}"
                )
            self.grid = array.copy()
        self._start: Optional[Cell] = None
        self._end: Optional[Cell] = None

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Maze":
        """Build a maze from text rows where ``#`` is blocked and anything else passable.

        No border is enforced, so tests can describe layouts the generator
        would never produce.
        """
        if not rows:
            raise InvalidDimensionsError("at least one row is required")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidDimensionsError("all rows must have the same length")
        grid = np.array(
            [[CellState.BLOCKED if ch == "#" else CellState.PASSABLE for ch in row] for row in rows],
            dtype=np.uint8,
        )
        return cls(width, len(rows), grid)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    # ------------------------------------------------------------------
    # Cell access

    def in_bounds(self, cell: CellLike) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def state(self, cell: CellLike) -> CellState:
        x, y = cell
        return CellState(int(self.grid[y, x]))

    def set_state(self, cell: CellLike, state: CellState) -> None:
        x, y = cell
        self.grid[y, x] = state

    def is_passable(self, cell: CellLike) -> bool:
        return self.in_bounds(cell) and bool(self.grid[cell[1], cell[0]] == CellState.PASSABLE)

    def passable_cells(self) -> List[Cell]:
        ys, xs = np.nonzero(self.grid == CellState.PASSABLE)
        return [Cell(int(x), int(y)) for y, x in zip(ys, xs)]

    def border_cells(self) -> Iterator[Cell]:
        for x in range(self.width):
            yield Cell(x, 0)
            yield Cell(x, self.height - 1)
        for y in range(1, self.height - 1):
            yield Cell(0, y)
            yield Cell(self.width - 1, y)

    def enforce_border(self) -> None:
        self.grid[0, :] = CellState.BLOCKED
        self.grid[-1, :] = CellState.BLOCKED
        self.grid[:, 0] = CellState.BLOCKED
        self.grid[:, -1] = CellState.BLOCKED

    def to_array(self) -> np.ndarray:
        return self.grid.copy()

    # ------------------------------------------------------------------
    # Endpoints

    @property
    def start(self) -> Optional[Cell]:
        return self._start

    @start.setter
    def start(self, value: Optional[CellLike]) -> None:
        self._start = None if value is None else self._checked_endpoint(value, "start")

    @property
    def end(self) -> Optional[Cell]:
        return self._end

    @end.setter
    def end(self, value: Optional[CellLike]) -> None:
        self._end = None if value is None else self._checked_endpoint(value, "end")

    def set_endpoints(self, start: CellLike, end: CellLike) -> None:
        start_cell = self._checked_endpoint(start, "start")
        end_cell = self._checked_endpoint(end, "end")
        if start_cell == end_cell:
            raise InvalidEndpointsError(f"start and end must differ, both are {start_cell}")
        self._start = start_cell
        self._end = end_cell

    def clear_endpoints(self) -> None:
        self._start = None
        self._end = None

    def select(self, cell: CellLike) -> bool:
        """Apply one point selection and report whether the endpoints changed.

        The first selection sets the start, the second the end and a third
        clears both. Blocked or out-of-bounds cells are ignored, as is picking
        the start again as the end.
        """
        target = as_cell(cell)
        if not self.is_passable(target):
            return False
        if self._start is None:
            self._start = target
        elif self._end is None:
            if target == self._start:
                return False
            self._end = target
        else:
            self.clear_endpoints()
        return True

    def _checked_endpoint(self, value: CellLike, name: str) -> Cell:
        cell = as_cell(value)
        if not self.in_bounds(cell):
            raise EndpointNotPassableError(f"{name} {cell} lies outside the {self.width}x{self.height} maze")
        if not self.is_passable(cell):
            raise EndpointNotPassableError(f"{name} {cell} is a blocked cell")
        return cell

    # ------------------------------------------------------------------

    def render_text(self, path: Optional[Sequence[CellLike]] = None) -> str:
        on_path = {as_cell(cell) for cell in path} if path else set()
        lines = []
        for y in range(self.height):
            chars = []
            for x in range(self.width):
                cell = Cell(x, y)
                if cell == self._start:
                    chars.append("S")
                elif cell == self._end:
                    chars.append("E")
                elif cell in on_path:
                    chars.append("*")
                elif self.grid[y, x] == CellState.BLOCKED:
                    chars.append("#")
                else:
                    chars.append(".")
            lines.append("".join(chars))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render_text()

    def __repr__(self) -> str:
        return f"Maze(width={self.width}, height={self.height}, start={self._start}, end={self._end})"


__all__ = ["Cell", "CellState", "CellLike", "Maze", "MIN_SIZE", "as_cell"]
