from typing import Dict, List

from .grid import Grid

SAMPLE_LAYOUTS: Dict[str, List[str]] = {
    "corridor": [
        "#######",
        "#S   E#",
        "#######",
    ],
    "winding": [
        "#########",
        "#S#     #",
        "# # ### #",
        "#   #  E#",
        "#########",
    ],
    "keys": [
        "###########",
        "#S   a    #",
        "#A#########",
        "#       b #",
        "# #B#######",
        "# #     E #",
        "###########",
    ],
    "unsolvable": [
        "#######",
        "#S###E#",
        "#######",
    ],
}

SAMPLE_DUNGEONS: Dict[str, Grid] = {
    name: Grid(tuple(rows)) for name, rows in SAMPLE_LAYOUTS.items()
}


def get_sample(name: str) -> Grid:
    if name not in SAMPLE_DUNGEONS:
        valid = ", ".join(sorted(SAMPLE_DUNGEONS))
        raise ValueError(f"Unknown sample dungeon {name!r}; choose one of: {valid}")
    return SAMPLE_DUNGEONS[name]
