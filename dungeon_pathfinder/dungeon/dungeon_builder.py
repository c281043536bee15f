"""
DungeonBuilder for generating maze dungeons.

Carves a perfect maze by randomized depth-first backtracking on the odd
cells of a wall-filled canvas, optionally knocks out extra walls to open
loops, places start and exit, and optionally seeds key/door pairs.
"""

import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from ..logger import logger
from .grid import EXIT, OPEN, START, WALL, Coord, Grid
from .keys import DOOR_IDENTITIES, door_symbol, key_symbol

# Two-cell steps so a wall cell always separates neighbouring corridors
CARVE_STEPS = [(-2, 0), (2, 0), (0, -2), (0, 2)]


@dataclass
class DungeonConfig:
    """Configuration for dungeon generation."""

    rows: int = 21
    cols: int = 21
    room_rate: int = 20  # percent of maze cells to try opening as extra links
    door_pairs: int = 0  # key/door pairs to place, at most 5 (door E is the exit)


class DungeonBuilder:
    """Generates maze dungeons in the '#', ' ', 'S', 'E', a-f, A-F alphabet."""

    def __init__(
        self,
        config: DungeonConfig,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize dungeon builder with configuration.

        Args:
            config: Dungeon generation configuration
            seed: Random seed for deterministic generation
            rng: Explicit random source; takes precedence over ``seed``
        """
        if config.rows < 3 or config.cols < 3:
            raise ValueError(
                f"Dungeon must be at least 3x3, got {config.rows}x{config.cols}"
            )
        if not 0 <= config.room_rate <= 100:
            raise ValueError(f"room_rate must be between 0 and 100, got {config.room_rate}")
        if not 0 <= config.door_pairs <= len(DOOR_IDENTITIES):
            raise ValueError(
                f"door_pairs must be between 0 and {len(DOOR_IDENTITIES)}, got {config.door_pairs}"
            )

        self.config = config
        self.rng = rng if rng is not None else random.Random(seed)
        self.logger = logger.bind(component="dungeon_builder")

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid shape after rounding even dimensions up to odd."""
        rows = self.config.rows + (1 - self.config.rows % 2)
        cols = self.config.cols + (1 - self.config.cols % 2)
        return rows, cols

    def generate_grid(self) -> Grid:
        """Generate a complete dungeon.

        Returns:
            Grid: Rectangular dungeon with 'S' at (1, 1) and 'E' at the open
            cell nearest the bottom-right corner
        """
        rows, cols = self.shape
        if (rows, cols) != (self.config.rows, self.config.cols):
            self.logger.debug(
                f"Rounded {self.config.rows}x{self.config.cols} up to odd size {rows}x{cols}"
            )

        canvas = np.full((rows, cols), WALL, dtype="<U1")

        self._carve_maze(canvas)
        self._add_extra_rooms(canvas)
        self._place_markers(canvas)
        if self.config.door_pairs:
            self._place_door_pairs(canvas)

        grid = Grid.from_array(canvas)
        self.logger.debug(f"Generated {rows}x{cols} dungeon")
        return grid

    def _shuffled_steps(self) -> Iterator[Tuple[int, int]]:
        steps = list(CARVE_STEPS)
        self.rng.shuffle(steps)
        return iter(steps)

    @staticmethod
    def _is_carveable(row: int, col: int, rows: int, cols: int) -> bool:
        return (
            0 < row < rows - 1
            and 0 < col < cols - 1
            and row % 2 == 1
            and col % 2 == 1
        )

    def _carve_maze(self, canvas: np.ndarray) -> None:
        """Randomized depth-first carving from (1, 1).

        Each stack entry keeps its own shuffled step iterator, so resuming a
        cell continues with the directions it has not tried yet.
        """
        rows, cols = canvas.shape
        canvas[1, 1] = OPEN
        stack = [((1, 1), self._shuffled_steps())]

        while stack:
            (row, col), steps = stack[-1]
            for dr, dc in steps:
                nr, nc = row + dr, col + dc
                if self._is_carveable(nr, nc, rows, cols) and canvas[nr, nc] == WALL:
                    canvas[row + dr // 2, col + dc // 2] = OPEN
                    canvas[nr, nc] = OPEN
                    stack.append(((nr, nc), self._shuffled_steps()))
                    break
            else:
                stack.pop()

    def _add_extra_rooms(self, canvas: np.ndarray) -> None:
        """Knock out walls between carved cells to create loops.

        Only cells with exactly one odd coordinate separate two maze cells;
        pillars (both even) and the border stay solid.
        """
        rows, cols = canvas.shape
        total_cells = ((rows - 1) // 2) * ((cols - 1) // 2)
        attempts = total_cells * self.config.room_rate // 100

        opened = 0
        for _ in range(attempts):
            row = self.rng.randrange(1, rows - 1)
            col = self.rng.randrange(1, cols - 1)
            if canvas[row, col] == WALL and (row + col) % 2 == 1:
                canvas[row, col] = OPEN
                opened += 1

        self.logger.debug(f"Opened {opened} extra links in {attempts} attempts")

    def _place_markers(self, canvas: np.ndarray) -> None:
        rows, cols = canvas.shape
        canvas[1, 1] = START

        for row in range(rows - 2, 0, -1):
            for col in range(cols - 2, 0, -1):
                if canvas[row, col] == OPEN:
                    canvas[row, col] = EXIT
                    return

        self.logger.warning(f"No open cell left for the exit in a {rows}x{cols} dungeon")

    def _place_door_pairs(self, canvas: np.ndarray) -> None:
        """Place doors on the solution path and their keys behind no door.

        Door k goes on an open cell of the current key-aware shortest path;
        key k goes on an open cell reachable from the start with every door
        treated as a wall. Collecting keys from the last pair back to the
        first therefore always opens the way to the exit. Identity 4 is
        skipped because door 'E' would read as the exit marker.
        """
        # Deferred: the solver package imports the grid model from this package
        from ..bfs_solver.solver import bfs_path_with_keys

        identities = DOOR_IDENTITIES[: self.config.door_pairs]
        for placed_count, identity in enumerate(identities):
            path = bfs_path_with_keys(Grid.from_array(canvas))
            door_candidates = [c for c in path[1:-1] if canvas[c.row, c.col] == OPEN]
            self.rng.shuffle(door_candidates)

            placed = None
            for door in door_candidates:
                key = self._place_pair(canvas, identity, door)
                if key is not None:
                    placed = (door, key)
                    break

            if placed is None:
                self.logger.warning(
                    f"No room for door {door_symbol(identity)} and its key; "
                    f"placed {placed_count} of {self.config.door_pairs} pairs"
                )
                return

            door, key = placed
            self.logger.debug(
                f"Placed door {door_symbol(identity)} at {tuple(door)} "
                f"and key {key_symbol(identity)} at {tuple(key)}"
            )

    def _place_pair(
        self, canvas: np.ndarray, identity: int, door: Coord
    ) -> Optional[Coord]:
        """Try a door at ``door``; place its key or undo the door."""
        from ..bfs_solver.reachability import reachable_cells

        canvas[door.row, door.col] = door_symbol(identity)
        region = reachable_cells(Grid.from_array(canvas))
        key_candidates: List[Coord] = sorted(
            c for c in region if canvas[c.row, c.col] == OPEN
        )
        if not key_candidates:
            canvas[door.row, door.col] = OPEN
            return None

        key = self.rng.choice(key_candidates)
        canvas[key.row, key.col] = key_symbol(identity)
        return key


def generate_dungeon(
    rows: int,
    cols: int,
    room_rate: int = 20,
    rng: Optional[random.Random] = None,
) -> Grid:
    """Generate a dungeon without keys or doors.

    Args:
        rows: Requested row count (even values are rounded up)
        cols: Requested column count (even values are rounded up)
        room_rate: Percentage of maze cells to try opening as extra links
        rng: Random source; a fresh unseeded one is used when omitted

    Returns:
        Generated Grid
    """
    config = DungeonConfig(rows=rows, cols=cols, room_rate=room_rate)
    return DungeonBuilder(config, rng=rng).generate_grid()
