"""
Command-line harness: build or load a dungeon, solve it, print the result.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from .bfs_solver import BFSSolver, path_errors
from .dungeon import (
    SAMPLE_DUNGEONS,
    DungeonBuilder,
    DungeonConfig,
    Grid,
    HeadlessVisualizer,
    get_sample,
)
from .logger import logger, set_component_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Dungeon Pathfinder - maze generation and BFS solving",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                               # Random 21x21 dungeon
  python main.py --seed 42 --rows 15 --cols 31 # Reproducible dungeon
  python main.py --door-pairs 2 --keys         # Keys and doors
  python main.py --sample keys --keys          # Built-in sample
  python main.py --file dungeon.txt            # Grid from a text file
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--sample", choices=sorted(SAMPLE_DUNGEONS), help="Solve a built-in sample dungeon"
    )
    source.add_argument(
        "--file", type=Path, help="Read the grid from a text file, one row per line"
    )

    parser.add_argument("--rows", type=int, default=21, help="Rows of a generated dungeon")
    parser.add_argument("--cols", type=int, default=21, help="Columns of a generated dungeon")
    parser.add_argument(
        "--room-rate", type=int, default=20, help="Extra room density percentage (0-100)"
    )
    parser.add_argument(
        "--door-pairs", type=int, default=0, help="Key/door pairs to place (0-5)"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for dungeon generation"
    )
    parser.add_argument(
        "--keys", action="store_true", help="Use the key/door aware solver"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show solver and generator debug logs"
    )
    return parser


def load_grid(args: argparse.Namespace, parser: argparse.ArgumentParser) -> Grid:
    if args.sample:
        return get_sample(args.sample)

    if args.file:
        try:
            return Grid.from_string(args.file.read_text())
        except OSError as e:
            parser.error(f"Cannot read grid file {args.file}: {e}")

    config = DungeonConfig(
        rows=args.rows,
        cols=args.cols,
        room_rate=args.room_rate,
        door_pairs=args.door_pairs,
    )
    try:
        return DungeonBuilder(config, seed=args.seed).generate_grid()
    except ValueError as e:
        parser.error(str(e))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_component_level("bfs_solver", "DEBUG")
        set_component_level("dungeon_builder", "DEBUG")

    log = logger.bind(component="cli")
    grid = load_grid(args, parser)

    for problem in grid.validate():
        log.warning(problem)

    visualizer = HeadlessVisualizer(grid)
    visualizer.print_dungeon("Dungeon")

    solver = BFSSolver(use_keys=args.keys)
    result = solver.solve(grid)

    mode = "key-aware" if args.keys else "plain"
    print(f"Solver: {mode} BFS")
    print(f"Path length: {result.path_length}")
    print(f"Nodes explored: {result.nodes_explored}")
    print(f"States visited: {result.states_visited}")
    print(f"Time: {result.time_taken_ms:.2f}ms")

    if not result.success:
        print("No path found")
        return 1

    errors = path_errors(grid, result.path)
    if errors:
        print("Invalid path:")
        for error in errors:
            print(f"  - {error}")
        return 1

    print("Valid path found")
    visualizer.print_solution(result.path, "Solution")
    return 0
