"""
Tests for maze dungeon generation.
"""

import random

import numpy as np
import pytest

from dungeon_pathfinder.bfs_solver import (
    bfs_path,
    bfs_path_with_keys,
    count_reachable_keys,
    reachable_cells,
)
from dungeon_pathfinder.dungeon import (
    WALL,
    DungeonBuilder,
    DungeonConfig,
    generate_dungeon,
)
from dungeon_pathfinder.dungeon.keys import DOOR_IDENTITIES, DOOR_SYMBOLS, KEY_SYMBOLS


def open_cells(grid):
    return int(np.sum(grid.to_array() != WALL))


class TestDungeonBuilder:
    """Test dungeon generation."""

    def test_deterministic_generation(self):
        """The same seed produces the same dungeon."""
        config = DungeonConfig(rows=21, cols=31, room_rate=20, door_pairs=2)
        grid1 = DungeonBuilder(config, seed=42).generate_grid()
        grid2 = DungeonBuilder(config, seed=42).generate_grid()
        assert grid1 == grid2

    def test_different_seeds(self):
        config = DungeonConfig(rows=21, cols=21)
        grids = {DungeonBuilder(config, seed=seed).generate_grid() for seed in range(5)}
        assert len(grids) > 1

    def test_explicit_rng(self):
        config = DungeonConfig(rows=15, cols=15)
        grid1 = DungeonBuilder(config, rng=random.Random(3)).generate_grid()
        grid2 = DungeonBuilder(config, seed=3).generate_grid()
        assert grid1 == grid2

    def test_dimensions_rounded_to_odd(self):
        grid = DungeonBuilder(DungeonConfig(rows=20, cols=10), seed=1).generate_grid()
        assert grid.height == 21
        assert grid.width == 11
        assert grid.is_rectangular

    def test_border_is_wall(self):
        grid = DungeonBuilder(DungeonConfig(rows=15, cols=25, room_rate=100), seed=5).generate_grid()
        array = grid.to_array()
        assert np.all(array[0, :] == WALL)
        assert np.all(array[-1, :] == WALL)
        assert np.all(array[:, 0] == WALL)
        assert np.all(array[:, -1] == WALL)

    def test_markers(self):
        grid = DungeonBuilder(DungeonConfig(rows=21, cols=21), seed=9).generate_grid()
        assert grid.start == (1, 1)
        assert grid.exit is not None
        assert grid.validate() == []

    def test_perfect_maze(self):
        """Without extra rooms every maze cell is carved and linked once."""
        grid = DungeonBuilder(DungeonConfig(rows=21, cols=21, room_rate=0), seed=11).generate_grid()
        assert open_cells(grid) == 199
        assert grid.exit == (19, 19)
        assert len(reachable_cells(grid)) == 199

    def test_pillars_stay_solid(self):
        grid = DungeonBuilder(DungeonConfig(rows=21, cols=21, room_rate=100), seed=2).generate_grid()
        array = grid.to_array()
        assert np.all(array[::2, ::2] == WALL)

    def test_room_rate_opens_loops(self):
        config = DungeonConfig(rows=21, cols=21, room_rate=0)
        perfect = DungeonBuilder(config, seed=4).generate_grid()
        config.room_rate = 100
        looped = DungeonBuilder(config, seed=4).generate_grid()
        assert open_cells(looped) > open_cells(perfect)

    def test_always_solvable(self):
        for seed in range(10):
            config = DungeonConfig(rows=15, cols=21, room_rate=seed * 10)
            grid = DungeonBuilder(config, seed=seed).generate_grid()
            assert bfs_path(grid), f"seed {seed} produced an unsolvable dungeon"

    def test_minimum_size_has_no_exit(self):
        grid = DungeonBuilder(DungeonConfig(rows=3, cols=3), seed=0).generate_grid()
        assert grid.rows == ("###", "#S#", "###")
        assert grid.exit is None
        assert bfs_path(grid) == []

    def test_invalid_config(self):
        with pytest.raises(ValueError):
            DungeonBuilder(DungeonConfig(rows=2, cols=21))
        with pytest.raises(ValueError):
            DungeonBuilder(DungeonConfig(room_rate=101))
        with pytest.raises(ValueError):
            DungeonBuilder(DungeonConfig(room_rate=-1))
        with pytest.raises(ValueError):
            DungeonBuilder(DungeonConfig(door_pairs=6))


class TestDoorPairs:
    """Test key/door placement."""

    def test_no_pairs_by_default(self):
        grid = DungeonBuilder(DungeonConfig(), seed=6).generate_grid()
        text = str(grid)
        assert not any(symbol in text for symbol in KEY_SYMBOLS)
        assert not any(DOOR_SYMBOLS[identity] in text for identity in DOOR_IDENTITIES)
        assert text.count("E") == 1

    def test_single_pair_blocks_perfect_maze(self):
        """A door on the only route makes the key mandatory."""
        for seed in range(5):
            config = DungeonConfig(rows=21, cols=21, room_rate=0, door_pairs=1)
            grid = DungeonBuilder(config, seed=seed).generate_grid()
            assert len(grid.find_all("a")) == 1
            assert len(grid.find_all("A")) == 1
            assert bfs_path(grid) == []
            assert bfs_path_with_keys(grid)

    def test_pairs_solvable(self):
        for seed in range(8):
            config = DungeonConfig(rows=21, cols=21, room_rate=10, door_pairs=3)
            grid = DungeonBuilder(config, seed=seed).generate_grid()
            path = bfs_path_with_keys(grid)
            assert path, f"seed {seed} produced an unsolvable dungeon"
            assert count_reachable_keys(grid) == len(grid.find_all("a") + grid.find_all("b") + grid.find_all("c"))

    def test_each_key_matches_a_door(self):
        """Door 'E' is never placed, so the largest request leaves one exit."""
        config = DungeonConfig(rows=31, cols=31, room_rate=0, door_pairs=len(DOOR_IDENTITIES))
        for seed in (13, 14, 15):
            grid = DungeonBuilder(config, seed=seed).generate_grid()
            assert grid.find_all("E") == [(29, 29)]
            assert grid.find_all("e") == []
            for identity in DOOR_IDENTITIES:
                key, door = KEY_SYMBOLS[identity], DOOR_SYMBOLS[identity]
                assert len(grid.find_all(key)) == len(grid.find_all(door)) <= 1
            assert grid.validate() == []
            assert bfs_path_with_keys(grid)

    def test_no_room_for_pairs(self):
        grid = DungeonBuilder(DungeonConfig(rows=3, cols=3, door_pairs=2), seed=0).generate_grid()
        assert grid.rows == ("###", "#S#", "###")


class TestGenerateDungeon:
    def test_generate_dungeon(self):
        grid = generate_dungeon(11, 11, room_rate=0, rng=random.Random(1))
        assert grid.height == 11
        assert grid.start == (1, 1)
        assert grid.exit == (9, 9)
        assert bfs_path(grid)

    def test_generate_dungeon_without_rng(self):
        grid = generate_dungeon(9, 9)
        assert grid.width == 9
        assert bfs_path(grid)
