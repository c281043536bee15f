"""
Independent legality checks for a candidate path.

Door/key legality is not checked here: a path produced by the
key-aware solver may pass doors, and this validator only confirms that the
path is a wall-free, 4-connected walk from 'S' to 'E'.
"""

from typing import List, Sequence, Tuple

from ..dungeon.grid import WALL, Coord, Grid, GridLike


def path_errors(grid: GridLike, path: Sequence[Tuple[int, int]]) -> List[str]:
    """List every check ``path`` fails on ``grid``; empty when the path is legal."""
    grid = Grid.coerce(grid)
    errors = []

    if not path:
        errors.append("Path is empty")
        return errors

    start = grid.start
    exit_ = grid.exit
    if start is None:
        errors.append("Grid has no start marker")
    elif tuple(path[0]) != start:
        errors.append(f"Path starts at {tuple(path[0])}, expected start {tuple(start)}")
    if exit_ is None:
        errors.append("Grid has no exit marker")
    elif tuple(path[-1]) != exit_:
        errors.append(f"Path ends at {tuple(path[-1])}, expected exit {tuple(exit_)}")

    previous = None
    for index, (row, col) in enumerate(path):
        coord = Coord(row, col)
        symbol = grid.get_symbol(coord)
        if symbol is None:
            errors.append(f"Step {index} at {tuple(coord)} is out of bounds")
        elif symbol == WALL:
            errors.append(f"Step {index} at {tuple(coord)} is a wall")

        if previous is not None and not previous.is_adjacent(coord):
            errors.append(
                f"Step {index} moves from {tuple(previous)} to {tuple(coord)}, "
                "which are not orthogonally adjacent"
            )
        previous = coord

    return errors


def validate_path(grid: GridLike, path: Sequence[Tuple[int, int]]) -> bool:
    """True when ``path`` is a legal wall-free walk from 'S' to 'E' on ``grid``."""
    return not path_errors(grid, path)
