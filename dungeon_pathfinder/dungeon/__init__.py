"""
Dungeon grid model, sample layouts, rendering and maze generation.
"""

from .grid import EXIT, OPEN, START, WALL, Coord, Direction, Grid, GridLike
from .keys import KeySet, door_identity, key_identity
from .levels import SAMPLE_DUNGEONS, get_sample
from .visualization import HeadlessVisualizer, render_grid, render_path
from .dungeon_builder import DungeonBuilder, DungeonConfig, generate_dungeon

__all__ = [
    "Coord",
    "Direction",
    "Grid",
    "GridLike",
    "KeySet",
    "key_identity",
    "door_identity",
    "WALL",
    "OPEN",
    "START",
    "EXIT",
    "SAMPLE_DUNGEONS",
    "get_sample",
    "HeadlessVisualizer",
    "render_grid",
    "render_path",
    "DungeonBuilder",
    "DungeonConfig",
    "generate_dungeon",
]
