"""
BFS solver for finding shortest start-to-exit paths through a dungeon grid.
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional

from ..dungeon.grid import Coord, Grid, GridLike
from ..logger import logger
from .path import reconstruct_path
from .search import augmented_bfs
from .spaces import KeyStateGridSpace, PlainGridSpace


@dataclass
class BFSResult:
    """Result of BFS solving."""

    path: List[Coord] = field(default_factory=list)
    path_length: int = 0
    nodes_explored: int = 0
    states_visited: int = 0
    time_taken_ms: float = 0.0
    success: bool = False
    limit_reached: bool = False


class BFSSolver:
    """BFS solver for dungeon grids, with or without key/door rules."""

    def __init__(self, use_keys: bool = False, node_limit: Optional[int] = None):
        """Initialize BFS solver.

        Args:
            use_keys: Search over (position, keys held) so doors open once
                their key is collected; otherwise doors are walls
            node_limit: Optional cap on dequeued states
        """
        if node_limit is not None and node_limit < 0:
            raise ValueError(f"node_limit must be non-negative, got {node_limit}")
        self.use_keys = use_keys
        self.node_limit = node_limit
        self.logger = logger.bind(
            component="bfs_solver", id="keys" if use_keys else "plain"
        )

    def solve(self, grid: GridLike) -> BFSResult:
        """Find a shortest path from 'S' to 'E'.

        Args:
            grid: Dungeon grid (Grid, multi-line string or list of rows)

        Returns:
            BFSResult; ``path`` is empty when there is no start, no exit,
            or no route between them
        """
        start_time = time.time()
        grid = Grid.coerce(grid)

        start = grid.start
        goal = grid.exit
        if start is None or goal is None:
            self.logger.debug(
                f"Missing marker (start={start}, exit={goal}); nothing to search"
            )
            return BFSResult(time_taken_ms=(time.time() - start_time) * 1000)

        if self.use_keys:
            space = KeyStateGridSpace(grid, start, goal)
        else:
            space = PlainGridSpace(grid, start, goal)

        outcome = augmented_bfs(space, node_limit=self.node_limit)

        path: List[Coord] = []
        if outcome.found:
            path = reconstruct_path(outcome.predecessors, outcome.initial, outcome.terminal)
        elif outcome.limit_reached:
            self.logger.warning(
                f"Node limit of {self.node_limit} reached before the exit was found"
            )

        elapsed_ms = (time.time() - start_time) * 1000
        self.logger.debug(
            f"{'Solved' if path else 'No path'}: length={len(path)} "
            f"nodes={outcome.nodes_explored} states={len(outcome.visited)} "
            f"time={elapsed_ms:.2f}ms"
        )

        return BFSResult(
            path=path,
            path_length=len(path),
            nodes_explored=outcome.nodes_explored,
            states_visited=len(outcome.visited),
            time_taken_ms=elapsed_ms,
            success=bool(path),
            limit_reached=outcome.limit_reached,
        )


def bfs_path(grid: GridLike) -> List[Coord]:
    """Shortest path treating every door as a wall; empty if none exists."""
    return BFSSolver(use_keys=False).solve(grid).path


def bfs_path_with_keys(grid: GridLike) -> List[Coord]:
    """Shortest path where keys 'a'-'f' open doors 'A'-'F'; empty if none exists."""
    return BFSSolver(use_keys=True).solve(grid).path
