"""Command line front end: generate mazes, run searches, render and report."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from statistics import mean
from typing import Dict, List, Optional, Sequence, Tuple

from tqdm import tqdm

from .config import COMPLEXITY_SIZES, DEFAULT_COMPLEXITY, maze_size_for_complexity
from .errors import MazeError
from .events import LoggingEventSink
from .generator import MazeGenerator
from .grid import Cell, Maze
from .render import DEFAULT_CELL_SIZE, save_maze_image
from .search import SearchResult, available_algorithms, solve

logger = logging.getLogger("maze_pathfinder")

ALL_ALGORITHMS = "all"


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="maze-pathfinder",
        description="Generate a random maze and find a path through it",
    )
    parser.add_argument(
        "--complexity",
        choices=sorted(COMPLEXITY_SIZES),
        default=DEFAULT_COMPLEXITY,
        help="Named maze size tier",
    )
    parser.add_argument("--width", type=int, default=None, help="Maze width; overrides --complexity")
    parser.add_argument("--height", type=int, default=None, help="Maze height; overrides --complexity")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--algorithm",
        choices=available_algorithms() + [ALL_ALGORITHMS],
        default="bfs",
        help="Search algorithm, or 'all' to compare every algorithm",
    )
    parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None)
    parser.add_argument("--end", type=int, nargs=2, metavar=("X", "Y"), default=None)
    parser.add_argument("--depth-limit", type=int, default=None, help="Bound for dfs and depthLimited")
    parser.add_argument("--max-iterations", type=int, default=None, help="Iteration cap for greedyBestFirst")
    parser.add_argument("--max-steps", type=int, default=None, help="Step budget applied to every algorithm")
    parser.add_argument("--count", type=int, default=1, help="Number of mazes to generate and solve")
    parser.add_argument("--image", type=Path, default=None, help="Write a PNG of the first maze and its path")
    parser.add_argument("--cell-size", type=int, default=DEFAULT_CELL_SIZE)
    parser.add_argument("--print", dest="print_maze", action="store_true", help="Print the first maze as text")
    parser.add_argument("--report", type=Path, default=None, help="Write a JSON summary of every search")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every search step")
    return parser.parse_args(argv)


def _maze_dimensions(args: argparse.Namespace) -> Tuple[int, int]:
    side = maze_size_for_complexity(args.complexity)
    width = args.width if args.width is not None else side
    height = args.height if args.height is not None else side
    return width, height


def _default_endpoints(maze: Maze) -> Tuple[Cell, Cell]:
    start = Cell(1, 1)
    end = Cell(maze.width - 2, maze.height - 2)
    if not maze.is_passable(end):
        # Even dimensions can leave the far corner walled in.
        end = maze.passable_cells()[-1]
        logger.info("Default end point is blocked, using %s instead", end)
    return start, end


def _place_endpoints(maze: Maze, args: argparse.Namespace) -> None:
    default_start, default_end = _default_endpoints(maze)
    start = args.start if args.start is not None else default_start
    end = args.end if args.end is not None else default_end
    maze.set_endpoints(start, end)


def _run_searches(maze: Maze, algorithms: List[str], args: argparse.Namespace) -> Dict[str, SearchResult]:
    sink = LoggingEventSink() if args.verbose else None
    return {
        name: solve(
            maze,
            name,
            depth_limit=args.depth_limit,
            max_iterations=args.max_iterations,
            max_steps=args.max_steps,
            events=sink,
        )
        for name in algorithms
    }


def _summarize(runs: List[Dict[str, SearchResult]], algorithms: List[str]) -> None:
    print(f"{'algorithm':<16} {'found':>7} {'avg len':>8} {'avg expanded':>13}")
    for name in algorithms:
        results = [run[name] for run in runs]
        found = [result for result in results if result.found]
        avg_length = f"{mean(r.length for r in found):.1f}" if found else "-"
        avg_expanded = mean(r.expanded for r in results)
        print(f"{name:<16} {len(found):>3}/{len(results):<3} {avg_length:>8} {avg_expanded:>13.1f}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    if args.count < 1:
        logger.error("--count must be at least 1")
        return 2
    algorithms = available_algorithms() if args.algorithm == ALL_ALGORITHMS else [args.algorithm]
    width, height = _maze_dimensions(args)
    generator = MazeGenerator(seed=args.seed)

    runs: List[Dict[str, SearchResult]] = []
    report: List[Dict[str, object]] = []
    try:
        for index in tqdm(range(args.count), desc="Mazes", disable=args.count == 1):
            maze = generator.generate(width, height)
            _place_endpoints(maze, args)
            results = _run_searches(maze, algorithms, args)
            runs.append(results)
            report.append(
                {
                    "maze": index,
                    "width": width,
                    "height": height,
                    "start": list(maze.start),
                    "end": list(maze.end),
                    "results": [result.to_dict() for result in results.values()],
                }
            )
            if index == 0:
                first_path = results[algorithms[0]].path
                if args.print_maze:
                    print(maze.render_text(first_path))
                if args.image is not None:
                    saved = save_maze_image(maze, args.image, first_path, cell_size=args.cell_size)
                    logger.info("Saved maze image to %s", saved)
    except (MazeError, ValueError) as exc:
        logger.error("%s", exc)
        return 2

    if args.count == 1:
        for name, result in runs[0].items():
            if result.found:
                print(f"{name}: path of {result.length} steps ({result.expanded} cells expanded)")
            else:
                reason = "step budget exhausted" if result.budget_exhausted else "no path found"
                print(f"{name}: {reason} ({result.expanded} cells expanded)")
    else:
        _summarize(runs, algorithms)

    if args.report is not None:
        args.report.parent.mkdir(parents=True, exist_ok=True)
        args.report.write_text(json.dumps(report, indent=2), encoding="utf-8")
        logger.info("Wrote report to %s", args.report)
    return 0


__all__ = ["main"]
