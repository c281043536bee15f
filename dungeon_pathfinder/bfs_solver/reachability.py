"""
Flood-fill helpers built on the generic BFS.
"""

from typing import Optional, Set

from ..dungeon.grid import Coord, Grid, GridLike
from ..dungeon.keys import key_identity
from .search import augmented_bfs, unpack_state
from .spaces import PlainGridSpace


def reachable_cells(
    grid: GridLike, start: Optional[Coord] = None, ignore_doors: bool = False
) -> Set[Coord]:
    """Return every cell reachable from ``start`` (default: the 'S' marker).

    Walls always block. Doors block too unless ``ignore_doors`` is set; keys
    are never collected. An empty set is returned when there is no start.
    """
    grid = Grid.coerce(grid)
    if start is None:
        start = grid.start
    if start is None or grid.is_wall(Coord(*start)):
        return set()

    space = PlainGridSpace(grid, Coord(*start), goal=None, ignore_doors=ignore_doors)
    outcome = augmented_bfs(space)
    return {unpack_state(key).coordinate for key in outcome.visited}


def count_reachable_keys(grid: GridLike) -> int:
    """Count distinct key identities reachable from 'S', passing doors freely."""
    grid = Grid.coerce(grid)
    found = 0
    for coord in reachable_cells(grid, ignore_doors=True):
        identity = key_identity(grid.get_symbol(coord))
        if identity is not None:
            found |= 1 << identity
    return bin(found).count("1")
