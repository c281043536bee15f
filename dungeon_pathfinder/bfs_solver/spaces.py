"""
Search spaces over dungeon grids.

Each space answers the three questions the generic BFS asks: where to start,
when to stop, and which transitions leave a state.
"""

from typing import Iterator, Optional, Tuple

from ..dungeon.grid import Coord, Grid
from ..dungeon.keys import KeySet
from .search import MAX_COORDINATE, SearchState


def check_packing_budget(grid: Grid) -> None:
    """Reject grids whose coordinates cannot be packed into a state key."""
    if grid.height > MAX_COORDINATE or grid.width > MAX_COORDINATE:
        raise ValueError(
            f"Grid of {grid.height}x{grid.width} exceeds the supported size of "
            f"{MAX_COORDINATE} rows/columns"
        )


class GridSearchSpace:
    """Shared start/goal handling for searches on a grid.

    ``goal`` may be None, in which case no state is a goal and the search
    runs until the reachable space is exhausted.
    """

    def __init__(self, grid: Grid, start: Coord, goal: Optional[Coord]):
        check_packing_budget(grid)
        self.grid = grid
        self.start = start
        self.goal = goal

    def initial_state(self) -> SearchState:
        return SearchState(self.start[0], self.start[1], 0)

    def is_goal(self, state: SearchState) -> bool:
        if self.goal is None:
            return False
        return state.row == self.goal[0] and state.col == self.goal[1]

    def neighbors(self, state: SearchState) -> Iterator[Tuple[SearchState, bool]]:
        raise NotImplementedError


class PlainGridSpace(GridSearchSpace):
    """Coordinates only; walls block and doors block unless ``ignore_doors``."""

    def __init__(
        self,
        grid: Grid,
        start: Coord,
        goal: Optional[Coord],
        ignore_doors: bool = False,
    ):
        super().__init__(grid, start, goal)
        self.ignore_doors = ignore_doors

    def neighbors(self, state: SearchState) -> Iterator[Tuple[SearchState, bool]]:
        for coord in self.grid.neighbors(state.coordinate):
            if self.ignore_doors:
                passable = not self.grid.is_wall(coord)
            else:
                passable = self.grid.is_passable(coord)
            yield SearchState(coord.row, coord.col, 0), passable


class KeyStateGridSpace(GridSearchSpace):
    """States are (coordinate, collected keys).

    Entering a key cell adds that key to the state. Entering a door cell is
    only allowed when the matching key is already held.
    """

    def neighbors(self, state: SearchState) -> Iterator[Tuple[SearchState, bool]]:
        held = KeySet(state.keys)
        for coord in self.grid.neighbors(state.coordinate):
            symbol = self.grid.get_symbol(coord)
            if self.grid.is_wall(coord) or not held.can_open(symbol):
                yield SearchState(coord.row, coord.col, state.keys), False
                continue
            yield SearchState(coord.row, coord.col, held.collect(symbol).mask), True
