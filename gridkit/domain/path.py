"""Path post-processing for search results."""

from typing import Callable, Iterable, List, Sequence

from .directions import Cardinal
from .location import Location
from .priority_queue import DEdge
from .types import Number

_STEP_DIRECTIONS = {
    (-1, 0): Cardinal.NORTH,
    (1, 0): Cardinal.SOUTH,
    (0, 1): Cardinal.EAST,
    (0, -1): Cardinal.WEST,
}


def get_direction(from_loc: Location, to_loc: Location) -> Cardinal:
    """Direction of a single orthogonal step."""
    delta = (to_loc.row - from_loc.row, to_loc.col - from_loc.col)
    try:
        return _STEP_DIRECTIONS[delta]
    except KeyError:
        raise ValueError(f"Invalid movement from ({from_loc}) to ({to_loc})") from None


def path_directions(path: Sequence[Location]) -> List[Cardinal]:
    """
    Get the direction of each segment of the path.
    Every consecutive pair must be orthogonally adjacent.
    """
    return [get_direction(path[i - 1], path[i]) for i in range(1, len(path))]


def path_cost(path: Sequence, edges_fn: Callable[[object], Iterable[DEdge]]) -> Number:
    """
    Re-cost a path using the edge function that produced it.

    Takes the cheapest edge for each step. Raises ValueError if a step has no
    matching edge.
    """
    total = 0
    for i in range(1, len(path)):
        costs = [cost for node, cost in edges_fn(path[i - 1]) if node == path[i]]
        if not costs:
            raise ValueError(f"No edge from {path[i - 1]} to {path[i]}")
        total += min(costs)
    return total
