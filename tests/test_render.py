import pytest
from PIL import Image

from maze_pathfinder import Maze, find_path
from maze_pathfinder.render import END_COLOR, PATH_COLOR, START_COLOR, WALL_COLOR, render_maze, save_maze_image

ROWS = [
    "#####",
    "#...#",
    "#.#.#",
    "#...#",
    "#####",
]


def _center(cell, cell_size):
    x, y = cell
    return (x * cell_size + cell_size // 2, y * cell_size + cell_size // 2)


def test_render_paints_walls_endpoints_and_path():
    maze = Maze.from_rows(ROWS)
    maze.set_endpoints((1, 1), (3, 3))
    path = find_path(maze, "bfs")
    image = render_maze(maze, path, cell_size=10)

    assert image.size == (50, 50)
    assert image.getpixel(_center((0, 0), 10)) == WALL_COLOR
    assert image.getpixel(_center((2, 2), 10)) == WALL_COLOR
    assert image.getpixel(_center((1, 1), 10)) == START_COLOR
    assert image.getpixel(_center((3, 3), 10)) == END_COLOR
    for cell in path[1:-1]:
        assert image.getpixel(_center(cell, 10)) == PATH_COLOR


def test_render_without_path_leaves_passages_white():
    maze = Maze.from_rows(ROWS)
    image = render_maze(maze, cell_size=8, grid_lines=False)
    assert image.getpixel(_center((2, 1), 8)) == (255, 255, 255)


def test_rejects_non_positive_cell_size():
    with pytest.raises(ValueError):
        render_maze(Maze.from_rows(ROWS), cell_size=0)


def test_save_maze_image_writes_png(tmp_path):
    maze = Maze.from_rows(ROWS)
    maze.set_endpoints((1, 1), (3, 1))
    target = save_maze_image(
        maze,
        tmp_path / "out" / "maze.png",
        find_path(maze, "dfs"),
        cell_size=6,
        path_line=True,
    )
    assert target.exists()
    with Image.open(target) as image:
        assert image.size == (30, 30)
