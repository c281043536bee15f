"""
BFS solver for dungeon grids.

Finds shortest start-to-exit paths, optionally honouring key/door rules.
"""

from .path import PathReconstructionError, reconstruct_path
from .reachability import count_reachable_keys, reachable_cells
from .solver import BFSResult, BFSSolver, bfs_path, bfs_path_with_keys
from .validator import path_errors, validate_path

__all__ = [
    "BFSSolver",
    "BFSResult",
    "bfs_path",
    "bfs_path_with_keys",
    "PathReconstructionError",
    "reconstruct_path",
    "count_reachable_keys",
    "reachable_cells",
    "path_errors",
    "validate_path",
]
