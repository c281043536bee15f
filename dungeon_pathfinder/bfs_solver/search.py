"""
Generic breadth-first search over an augmented grid state space.

A search state is a grid coordinate plus an integer "extra" component
(always 0 for plain search, the collected-key bitmask for key-aware search).
The traversal itself knows nothing about walls, doors or keys: it asks a
search space object for the initial state, the goal test and the
neighbours of each state.

A search space must provide:

    initial_state() -> SearchState
    is_goal(state) -> bool
    neighbors(state) -> iterable of (next_state, passable)

Visited tracking and predecessor links are keyed on a single packed integer
(see ``pack_state``) rather than on the tuple itself.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, NamedTuple, Optional, Set

from ..dungeon.grid import Coord
from ..dungeon.keys import MAX_KEYS

# Packed layout, high to low: row (20 bits) | col (20 bits) | keys (6 bits)
COORD_BITS = 20
KEY_BITS = MAX_KEYS
MAX_COORDINATE = 1 << COORD_BITS

_KEY_MASK = (1 << KEY_BITS) - 1
_COORD_MASK = MAX_COORDINATE - 1


def pack_state(row: int, col: int, keys: int = 0) -> int:
    """Pack a state into one integer: row << 26 | col << 6 | keys."""
    if not (0 <= row < MAX_COORDINATE and 0 <= col < MAX_COORDINATE):
        raise ValueError(
            f"Coordinate ({row}, {col}) is outside the packing range [0, {MAX_COORDINATE})"
        )
    return (row << (COORD_BITS + KEY_BITS)) | (col << KEY_BITS) | (keys & _KEY_MASK)


def unpack_state(key: int) -> "SearchState":
    return SearchState(
        (key >> (COORD_BITS + KEY_BITS)) & _COORD_MASK,
        (key >> KEY_BITS) & _COORD_MASK,
        key & _KEY_MASK,
    )


class SearchState(NamedTuple):
    row: int
    col: int
    keys: int = 0

    @property
    def coordinate(self) -> Coord:
        return Coord(self.row, self.col)

    def key(self) -> int:
        return pack_state(self.row, self.col, self.keys)


@dataclass
class SearchOutcome:
    """Everything a finished traversal leaves behind."""

    initial: SearchState
    terminal: Optional[SearchState]
    predecessors: Dict[int, SearchState] = field(default_factory=dict)
    visited: Set[int] = field(default_factory=set)
    nodes_explored: int = 0
    limit_reached: bool = False

    @property
    def found(self) -> bool:
        return self.terminal is not None


def augmented_bfs(space, node_limit: Optional[int] = None) -> SearchOutcome:
    """Run BFS over ``space`` until a goal state is dequeued.

    Args:
        space: Search space exposing initial_state / is_goal / neighbors
        node_limit: Optional cap on dequeued states; None searches exhaustively

    Returns:
        SearchOutcome whose ``terminal`` is the goal state, or None on failure
    """
    initial = space.initial_state()
    frontier = deque([initial])
    visited: Set[int] = {initial.key()}
    predecessors: Dict[int, SearchState] = {}
    nodes_explored = 0

    while frontier:
        if node_limit is not None and nodes_explored >= node_limit:
            return SearchOutcome(
                initial, None, predecessors, visited, nodes_explored, limit_reached=True
            )

        state = frontier.popleft()
        nodes_explored += 1

        if space.is_goal(state):
            return SearchOutcome(initial, state, predecessors, visited, nodes_explored)

        for next_state, passable in space.neighbors(state):
            if not passable:
                continue
            next_key = next_state.key()
            if next_key in visited:
                continue
            visited.add(next_key)
            predecessors[next_key] = state
            frontier.append(next_state)

    return SearchOutcome(initial, None, predecessors, visited, nodes_explored)
