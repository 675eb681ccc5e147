import random
import unittest
from collections import deque

import numpy as np

from maze_pathfinder import Cell, CellState, InvalidDimensionsError, MazeGenerator, generate_maze
from maze_pathfinder.search import neighbors


def _reachable_from(maze, origin):
    seen = {origin}
    queue = deque([origin])
    while queue:
        cell = queue.popleft()
        for neighbor in neighbors(maze, cell):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


def _passable_edges(maze):
    edges = 0
    for cell in maze.passable_cells():
        for other in (Cell(cell.x + 1, cell.y), Cell(cell.x, cell.y + 1)):
            if maze.is_passable(other):
                edges += 1
    return edges


class MazeGeneratorTests(unittest.TestCase):
    SIZES = [(3, 3), (5, 5), (6, 9), (15, 15), (25, 25), (35, 21), (4, 4)]

    def test_generated_mazes_hold_structural_invariants(self) -> None:
        for seed in range(12):
            for width, height in self.SIZES:
                with self.subTest(seed=seed, width=width, height=height):
                    maze = MazeGenerator(seed=seed).generate(width, height)
                    self.assertEqual((maze.width, maze.height), (width, height))
                    self.assertTrue(all(not maze.is_passable(cell) for cell in maze.border_cells()))
                    self.assertTrue(maze.is_passable(Cell(1, 1)))
                    passable = set(maze.passable_cells())
                    self.assertEqual(_reachable_from(maze, Cell(1, 1)), passable)
                    self.assertIsNone(maze.start)
                    self.assertIsNone(maze.end)

    def test_same_seed_reproduces_the_maze(self) -> None:
        first = MazeGenerator(seed=99).generate(21, 21)
        second = MazeGenerator(rng=random.Random(99)).generate(21, 21)
        np.testing.assert_array_equal(first.grid, second.grid)
        third = generate_maze(21, 21, seed=100)
        self.assertFalse(np.array_equal(first.grid, third.grid))

    def test_without_extra_paths_the_maze_is_a_spanning_tree(self) -> None:
        generator = MazeGenerator(seed=7, extra_path_probability=0.0)
        maze = generator.generate(15, 15)
        lattice_cells = 7 * 7
        self.assertEqual(len(maze.passable_cells()), 2 * lattice_cells - 1)
        self.assertEqual(_passable_edges(maze), len(maze.passable_cells()) - 1)
        for y in range(1, 15, 2):
            for x in range(1, 15, 2):
                self.assertEqual(maze.state((x, y)), CellState.PASSABLE)

    def test_extra_paths_only_add_openings(self) -> None:
        perfect = MazeGenerator(seed=3, extra_path_probability=0.0).generate(25, 25)
        loopy = MazeGenerator(seed=3, extra_path_probability=1.0).generate(25, 25)
        self.assertGreaterEqual(len(loopy.passable_cells()), len(perfect.passable_cells()))
        self.assertEqual(_reachable_from(loopy, Cell(1, 1)), set(loopy.passable_cells()))

    def test_smallest_maze_only_opens_the_origin(self) -> None:
        maze = generate_maze(3, 3, random.Random(0))
        self.assertEqual(maze.passable_cells(), [Cell(1, 1)])

    def test_rejects_invalid_dimensions_and_probability(self) -> None:
        with self.assertRaises(InvalidDimensionsError):
            MazeGenerator(seed=1).generate(2, 10)
        with self.assertRaises(InvalidDimensionsError):
            generate_maze(10, 1)
        with self.assertRaises(ValueError):
            MazeGenerator(extra_path_probability=1.5)

    def test_large_maze_does_not_hit_recursion_limits(self) -> None:
        maze = MazeGenerator(seed=5, extra_path_probability=0.0).generate(401, 401)
        self.assertEqual(len(maze.passable_cells()), 2 * 200 * 200 - 1)


if __name__ == "__main__":
    unittest.main()
