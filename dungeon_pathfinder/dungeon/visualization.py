"""
Plain-text rendering of dungeons and solution paths.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, Tuple

from .grid import EXIT, START, Coord, Grid

if TYPE_CHECKING:
    from ..bfs_solver.solver import BFSResult

PATH_MARKER = "*"


def render_grid(grid: Grid) -> str:
    return str(grid)


def render_path(
    grid: Grid, path: Sequence[Tuple[int, int]], marker: str = PATH_MARKER
) -> str:
    """Render ``grid`` with every path cell replaced by ``marker``.

    Start and exit markers are kept; coordinates outside the grid are skipped.
    """
    rows = [list(row) for row in grid.rows]
    for row, col in path:
        symbol = grid.get_symbol(Coord(row, col))
        if symbol is None or symbol in (START, EXIT):
            continue
        rows[row][col] = marker
    return "\n".join("".join(row) for row in rows)


class HeadlessVisualizer:
    def __init__(self, grid: Grid):
        self.grid = grid

    def print_dungeon(self, title: str = "") -> None:
        if title:
            print(f"{title}:")
        print(render_grid(self.grid))
        print()

    def print_solution(
        self, path: Sequence[Tuple[int, int]], title: str = ""
    ) -> None:
        if title:
            print(f"{title}:")
        print(render_path(self.grid, path))
        print()

    def summary(self, result: Optional["BFSResult"] = None) -> Dict[str, Any]:
        """Collect grid facts, plus solver statistics when a result is given."""
        info: Dict[str, Any] = {
            "rows": self.grid.height,
            "cols": self.grid.width,
            "start": self.grid.start,
            "exit": self.grid.exit,
        }
        if result is not None:
            info.update(
                {
                    "success": result.success,
                    "path_length": result.path_length,
                    "nodes_explored": result.nodes_explored,
                    "states_visited": result.states_visited,
                    "time_taken_ms": result.time_taken_ms,
                }
            )
        return info
