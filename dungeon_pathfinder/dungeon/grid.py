from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np

from .keys import DOOR_SYMBOLS, EXIT_MARKER, KEY_SYMBOLS, is_door

WALL = "#"
OPEN = " "
START = "S"
EXIT = EXIT_MARKER

SYMBOLS = WALL + OPEN + START + EXIT + KEY_SYMBOLS + DOOR_SYMBOLS


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]


class Coord(NamedTuple):
    """Zero-based (row, col) cell coordinate; rows grow downward."""

    row: int
    col: int

    def step(self, direction: Direction) -> "Coord":
        return Coord(self.row + direction.dr, self.col + direction.dc)

    def is_adjacent(self, other: "Coord") -> bool:
        return abs(self.row - other.row) + abs(self.col - other.col) == 1


@dataclass(frozen=True)
class Grid:
    """Immutable dungeon grid: a sequence of rows of single-character symbols.

    Rows are expected to share one length, but every lookup checks the
    length of the row it reads so a ragged grid never indexes out of range.
    """

    rows: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "rows", tuple(self.rows))

    @classmethod
    def from_string(cls, text: str) -> "Grid":
        return cls(tuple(text.splitlines()))

    @classmethod
    def coerce(cls, grid: Union["Grid", str, Sequence[str]]) -> "Grid":
        """Accept a Grid, a multi-line string, or a sequence of row strings."""
        if isinstance(grid, Grid):
            return grid
        if isinstance(grid, str):
            return cls.from_string(grid)
        return cls(tuple(grid))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    @property
    def is_rectangular(self) -> bool:
        return len({len(row) for row in self.rows}) <= 1

    def is_in_bounds(self, coord: Coord) -> bool:
        row, col = coord
        return 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row])

    def get_symbol(self, coord: Coord) -> Optional[str]:
        if not self.is_in_bounds(coord):
            return None
        return self.rows[coord[0]][coord[1]]

    def is_wall(self, coord: Coord) -> bool:
        """Out-of-bounds cells count as walls."""
        symbol = self.get_symbol(coord)
        return symbol is None or symbol == WALL

    def is_passable(self, coord: Coord) -> bool:
        """Passability under plain rules: in bounds, not a wall, not a door."""
        symbol = self.get_symbol(coord)
        if symbol is None or symbol == WALL:
            return False
        return not is_door(symbol)

    def find_marker(self, symbol: str) -> Optional[Coord]:
        """Locate the first cell holding ``symbol``, scanning rows top-down."""
        for row, line in enumerate(self.rows):
            col = line.find(symbol)
            if col >= 0:
                return Coord(row, col)
        return None

    def find_all(self, symbol: str) -> List[Coord]:
        return [
            Coord(row, col)
            for row, line in enumerate(self.rows)
            for col, value in enumerate(line)
            if value == symbol
        ]

    @property
    def start(self) -> Optional[Coord]:
        return self.find_marker(START)

    @property
    def exit(self) -> Optional[Coord]:
        return self.find_marker(EXIT)

    def neighbors(self, coord: Coord) -> List[Coord]:
        """In-bounds 4-neighbours in the fixed order up, down, left, right."""
        neighbors = []
        for direction in Direction:
            neighbor = coord.step(direction)
            if self.is_in_bounds(neighbor):
                neighbors.append(neighbor)
        return neighbors

    def validate(self) -> List[str]:
        errors = []

        if not self.is_rectangular:
            lengths = sorted({len(row) for row in self.rows})
            errors.append(f"Rows have differing lengths: {lengths}")

        for marker in (START, EXIT):
            count = len(self.find_all(marker))
            if count > 1:
                errors.append(f"Grid contains {count} '{marker}' markers, expected at most one")

        for row, line in enumerate(self.rows):
            for col, value in enumerate(line):
                if value not in SYMBOLS:
                    errors.append(f"Unknown symbol {value!r} at ({row}, {col})")

        return errors

    def to_array(self) -> np.ndarray:
        """Return the grid as a 2D numpy array of single characters."""
        if not self.is_rectangular:
            raise ValueError("Only rectangular grids can be converted to an array")
        if not self.rows:
            return np.empty((0, 0), dtype="<U1")
        return np.array([list(row) for row in self.rows], dtype="<U1")

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Grid":
        return cls(tuple("".join(row) for row in array.tolist()))

    def __str__(self) -> str:
        return "\n".join(self.rows)


GridLike = Union[Grid, str, Sequence[str]]
