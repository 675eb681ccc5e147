"""Pillow rendering of a maze, its endpoints and an optional path."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from PIL import Image, ImageDraw

from .grid import Cell, CellLike, CellState, Maze, as_cell

PathLike = Union[str, Path]
Color = Tuple[int, int, int]

WALL_COLOR: Color = (0, 0, 0)
PASSAGE_COLOR: Color = (255, 255, 255)
GRID_COLOR: Color = (221, 221, 221)
START_COLOR: Color = (0, 128, 0)
END_COLOR: Color = (255, 0, 0)
PATH_COLOR: Color = (128, 0, 128)
LINE_COLOR: Color = (220, 0, 0)

DEFAULT_CELL_SIZE = 20


def draw_path_line(
    image: Image.Image,
    points: List[Tuple[float, float]],
    color: Color,
    thickness: int,
) -> None:
    """Draw a polyline through cell centres, or a dot for a single point."""
    draw = ImageDraw.Draw(image)
    if len(points) >= 2:
        draw.line(points, fill=color, width=thickness, joint="curve")
    elif len(points) == 1:
        x, y = points[0]
        r = thickness / 2
        draw.ellipse((x - r, y - r, x + r, y + r), fill=color)


def _cell_box(cell: Cell, cell_size: int) -> Tuple[int, int, int, int]:
    left = cell.x * cell_size
    top = cell.y * cell_size
    return left, top, left + cell_size - 1, top + cell_size - 1


def render_maze(
    maze: Maze,
    path: Optional[Sequence[CellLike]] = None,
    *,
    cell_size: int = DEFAULT_CELL_SIZE,
    grid_lines: bool = True,
    path_line: bool = False,
) -> Image.Image:
    """Paint walls, passages, endpoints and ``path`` onto a new RGB image.

    Path cells are filled in ``PATH_COLOR`` and the endpoints are repainted on
    top so they stay visible. With ``path_line`` a thin line through the cell
    centres is drawn as well.
    """
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    canvas = Image.new("RGB", (maze.width * cell_size, maze.height * cell_size), PASSAGE_COLOR)
    draw = ImageDraw.Draw(canvas)

    for y in range(maze.height):
        for x in range(maze.width):
            if maze.grid[y, x] == CellState.BLOCKED:
                draw.rectangle(_cell_box(Cell(x, y), cell_size), fill=WALL_COLOR)

    if grid_lines:
        for x in range(maze.width + 1):
            draw.line([(x * cell_size, 0), (x * cell_size, canvas.height)], fill=GRID_COLOR)
        for y in range(maze.height + 1):
            draw.line([(0, y * cell_size), (canvas.width, y * cell_size)], fill=GRID_COLOR)

    cells = [as_cell(cell) for cell in path] if path else []
    for cell in cells:
        draw.rectangle(_cell_box(cell, cell_size), fill=PATH_COLOR)
    if cells and path_line:
        points = [((c.x + 0.5) * cell_size, (c.y + 0.5) * cell_size) for c in cells]
        draw_path_line(canvas, points, LINE_COLOR, max(2, cell_size // 5))

    if maze.start is not None:
        draw.rectangle(_cell_box(maze.start, cell_size), fill=START_COLOR)
    if maze.end is not None:
        draw.rectangle(_cell_box(maze.end, cell_size), fill=END_COLOR)
    return canvas


def save_maze_image(
    maze: Maze,
    output_path: PathLike,
    path: Optional[Sequence[CellLike]] = None,
    **kwargs,
) -> Path:
    target = Path(output_path)
    target.parent.mkdir(parents=True, exist_ok=True)
    render_maze(maze, path, **kwargs).save(target)
    return target


__all__ = ["render_maze", "save_maze_image", "draw_path_line", "DEFAULT_CELL_SIZE"]
