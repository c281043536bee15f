"""
Dungeon Pathfinder

Maze dungeon generation and breadth-first shortest paths, including
searches where locked doors need previously collected keys.
"""

from .dungeon import Coord, DungeonBuilder, DungeonConfig, Grid, generate_dungeon
from .bfs_solver import (
    BFSResult,
    BFSSolver,
    PathReconstructionError,
    bfs_path,
    bfs_path_with_keys,
    count_reachable_keys,
    validate_path,
)

__version__ = "0.1.0"

__all__ = [
    "Coord",
    "Grid",
    "DungeonBuilder",
    "DungeonConfig",
    "generate_dungeon",
    "BFSResult",
    "BFSSolver",
    "PathReconstructionError",
    "bfs_path",
    "bfs_path_with_keys",
    "count_reachable_keys",
    "validate_path",
]
