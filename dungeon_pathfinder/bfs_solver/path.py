"""
Path reconstruction from BFS predecessor links.
"""

from typing import List, Mapping

from ..dungeon.grid import Coord
from .search import SearchState


class PathReconstructionError(RuntimeError):
    """The predecessor chain from a terminal state does not reach the start.

    A reachable terminal state always has an unbroken chain back to the
    initial state, so this signals a bookkeeping bug in the search rather
    than an unsolvable dungeon.
    """


def reconstruct_path(
    predecessors: Mapping[int, SearchState],
    initial: SearchState,
    terminal: SearchState,
) -> List[Coord]:
    """Walk predecessor links from ``terminal`` back to ``initial``.

    Args:
        predecessors: Packed state key -> state it was discovered from
        initial: The state the search started from
        terminal: The goal state that was dequeued

    Returns:
        Coordinates from start to exit inclusive; key sets are dropped

    Raises:
        PathReconstructionError: If a link is missing or the chain loops
    """
    path = [terminal.coordinate]
    current = terminal
    steps = 0

    while current != initial:
        previous = predecessors.get(current.key())
        if previous is None:
            raise PathReconstructionError(
                f"No predecessor recorded for state {tuple(current)} "
                f"while tracing back to {tuple(initial)}"
            )
        steps += 1
        if steps > len(predecessors):
            raise PathReconstructionError(
                f"Predecessor chain from {tuple(terminal)} loops without reaching {tuple(initial)}"
            )
        path.append(previous.coordinate)
        current = previous

    path.reverse()
    return path
