#!/usr/bin/env python3
"""
Debug script for BFS solver - runs in verbose mode with detailed output.
"""

import argparse
import sys
import time
from pathlib import Path

# Add parent directory to path to import dungeon_pathfinder
sys.path.insert(0, str(Path(__file__).parent.parent))

from dungeon_pathfinder.bfs_solver.path import reconstruct_path
from dungeon_pathfinder.bfs_solver.search import SearchState, augmented_bfs
from dungeon_pathfinder.bfs_solver.spaces import KeyStateGridSpace, PlainGridSpace
from dungeon_pathfinder.bfs_solver.validator import path_errors
from dungeon_pathfinder.dungeon import (
    SAMPLE_DUNGEONS,
    DungeonBuilder,
    DungeonConfig,
    HeadlessVisualizer,
    KeySet,
)
from dungeon_pathfinder.logger import set_component_level


class VerboseSpaceMixin:
    """Prints every transition the search space offers."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Mirrors the traversal's visited set: passable states are marked on discovery
        self.seen = {self.initial_state().key()}

    def neighbors(self, state: SearchState):
        print(
            f"\n--- Expanding {state.coordinate} keys={KeySet(state.keys)} "
            f"symbol={self.grid.get_symbol(state.coordinate)!r} ---"
        )
        for next_state, passable in super().neighbors(state):
            symbol = self.grid.get_symbol(next_state.coordinate)
            if passable and next_state.key() in self.seen:
                verdict = "already visited"
            elif passable:
                self.seen.add(next_state.key())
                verdict = "allowed"
                if next_state.keys != state.keys:
                    verdict += f", picks up key -> {KeySet(next_state.keys)}"
            elif self.grid.is_wall(next_state.coordinate):
                verdict = "wall"
            else:
                verdict = "locked door"
            print(f"  {next_state.coordinate} {symbol!r}: {verdict}")
            yield next_state, passable


class VerboseKeyStateSpace(VerboseSpaceMixin, KeyStateGridSpace):
    pass


class VerbosePlainSpace(VerboseSpaceMixin, PlainGridSpace):
    pass


def main():
    """Run debug BFS solver."""
    parser = argparse.ArgumentParser(description="Debug BFS solver with verbose output")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--rows", type=int, default=9, help="Dungeon rows")
    parser.add_argument("--cols", type=int, default=9, help="Dungeon columns")
    parser.add_argument("--door-pairs", type=int, default=1, help="Key/door pairs")
    parser.add_argument(
        "--sample", choices=sorted(SAMPLE_DUNGEONS), help="Use a sample dungeon instead"
    )
    parser.add_argument("--plain", action="store_true", help="Ignore keys; doors are walls")
    parser.add_argument(
        "--node-limit", type=int, default=None, help="Stop after this many expansions"
    )

    args = parser.parse_args()
    set_component_level("dungeon_builder", "DEBUG")

    if args.sample:
        grid = SAMPLE_DUNGEONS[args.sample]
        print(f"Debugging BFS solver on sample '{args.sample}'")
    else:
        print(f"Debugging BFS solver with seed {args.seed}")
        config = DungeonConfig(
            rows=args.rows, cols=args.cols, room_rate=10, door_pairs=args.door_pairs
        )
        grid = DungeonBuilder(config, seed=args.seed).generate_grid()

    visualizer = HeadlessVisualizer(grid)
    print("=== BFS Solver Debug Session ===")
    visualizer.print_dungeon("Initial dungeon")
    print(f"Start: {grid.start}  Exit: {grid.exit}")

    for problem in grid.validate():
        print(f"WARNING: {problem}")

    if grid.start is None or grid.exit is None:
        print("ERROR: dungeon has no start or no exit")
        return

    space_cls = VerbosePlainSpace if args.plain else VerboseKeyStateSpace
    space = space_cls(grid, grid.start, grid.exit)

    start_time = time.time()
    outcome = augmented_bfs(space, node_limit=args.node_limit)
    elapsed_ms = (time.time() - start_time) * 1000

    print(f"\n=== Final Result ===")
    print(f"Nodes explored: {outcome.nodes_explored}")
    print(f"States visited: {len(outcome.visited)}")
    print(f"Time: {elapsed_ms:.1f}ms")

    if not outcome.found:
        reason = "node limit reached" if outcome.limit_reached else "search space exhausted"
        print(f"No solution found ({reason})")
        return

    path = reconstruct_path(outcome.predecessors, outcome.initial, outcome.terminal)
    print(f"Solution length: {len(path)}")
    print(f"Keys held at exit: {KeySet(outcome.terminal.keys)}")
    errors = path_errors(grid, path)
    print(f"Validator: {'OK' if not errors else errors}")
    visualizer.print_solution(path, "Solution")


if __name__ == "__main__":
    main()
