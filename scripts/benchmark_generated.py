#!/usr/bin/env python3
"""
Solve a batch of generated dungeons with varied configurations.

Checks that every path passes the validator, that the key-aware solver is
never longer than the plain one, and that repeated solves agree, then
prints aggregate statistics.
"""

import argparse
import random
import sys
import time
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

# Add parent directory to path to import dungeon_pathfinder
sys.path.insert(0, str(Path(__file__).parent.parent))

from dungeon_pathfinder.bfs_solver import BFSSolver, path_errors
from dungeon_pathfinder.dungeon import DungeonBuilder, DungeonConfig


def generate_random_config(rng: random.Random) -> DungeonConfig:
    """Generate a random dungeon configuration."""
    rows = rng.choices([7, 9, 15, 21, 31, 41], weights=[10, 20, 25, 25, 15, 5])[0]
    cols = rng.choices([7, 9, 15, 21, 31, 61], weights=[10, 20, 25, 25, 15, 5])[0]
    room_rate = rng.choices([0, 10, 20, 40], weights=[20, 30, 30, 20])[0]
    door_pairs = rng.choices([0, 1, 2, 3, 5], weights=[30, 25, 20, 15, 10])[0]
    return DungeonConfig(rows=rows, cols=cols, room_rate=room_rate, door_pairs=door_pairs)


def mean(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def main():
    parser = argparse.ArgumentParser(description="Benchmark solvers on generated dungeons")
    parser.add_argument("--count", type=int, default=200, help="Dungeons to generate")
    parser.add_argument("--seed", type=int, default=0, help="Base random seed")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    plain_solver = BFSSolver(use_keys=False)
    key_solver = BFSSolver(use_keys=True)

    stats: Dict[str, List[float]] = {
        "plain_length": [],
        "key_length": [],
        "plain_nodes": [],
        "key_nodes": [],
        "key_time_ms": [],
    }
    plain_solved = 0
    key_solved = 0
    violations: List[str] = []

    start_time = time.time()
    for index in tqdm(range(args.count), desc="Solving dungeons"):
        config = generate_random_config(rng)
        grid = DungeonBuilder(config, seed=rng.randrange(2**31)).generate_grid()

        plain = plain_solver.solve(grid)
        keyed = key_solver.solve(grid)

        if plain.success:
            plain_solved += 1
            stats["plain_length"].append(plain.path_length)
            stats["plain_nodes"].append(plain.nodes_explored)
            if path_errors(grid, plain.path):
                violations.append(f"#{index}: plain path rejected by validator")
            if not keyed.success or keyed.path_length > plain.path_length:
                violations.append(f"#{index}: key-aware path longer than plain path")

        if keyed.success:
            key_solved += 1
            stats["key_length"].append(keyed.path_length)
            stats["key_nodes"].append(keyed.nodes_explored)
            stats["key_time_ms"].append(keyed.time_taken_ms)
            if path_errors(grid, keyed.path):
                violations.append(f"#{index}: key-aware path rejected by validator")
        else:
            violations.append(f"#{index}: generated dungeon {config} is unsolvable")

        if key_solver.solve(grid).path != keyed.path:
            violations.append(f"#{index}: repeated key-aware solve differs")

    elapsed = time.time() - start_time

    print(f"\n=== Benchmark ({args.count} dungeons, {elapsed:.1f}s) ===")
    print(f"Plain solver solved:     {plain_solved}/{args.count}")
    print(f"Key-aware solver solved: {key_solved}/{args.count}")
    print(f"Mean plain path length:  {mean(stats['plain_length']):.1f}")
    print(f"Mean key path length:    {mean(stats['key_length']):.1f}")
    print(f"Mean plain nodes:        {mean(stats['plain_nodes']):.1f}")
    print(f"Mean key nodes:          {mean(stats['key_nodes']):.1f}")
    print(f"Mean key solve time:     {mean(stats['key_time_ms']):.2f}ms")

    if violations:
        print(f"\n{len(violations)} violations:")
        for violation in violations:
            print(f"  {violation}")
        sys.exit(1)
    print("\nAll checks passed")


if __name__ == "__main__":
    main()
