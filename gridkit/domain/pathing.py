"""Dijkstra shortest-path search over caller-defined graphs.

The search knows nothing about grids. Callers supply:

* a start and goal node (any hashable, totally ordered value)
* a ``CostCache`` able to hold a cost for every node the search can reach
* an edge function mapping a node to its outgoing ``(node, cost)`` edges

Edge costs must be non-negative; this is assumed, not checked.

Example::

    grid = digit_grid(lines)
    cache = DenseLocationCache.for_grid(grid)
    risk = dijkstra_cost(grid.top_left(), grid.bottom_right(), cache, grid_edges(grid))
"""

import logging
from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

from .cost_cache import CostCache
from .priority_queue import DEdge, DNode, DPNode, Frontier
from .types import Number

logger = logging.getLogger(__name__)

T = TypeVar("T")

EdgeFn = Callable[[T], Iterable[DEdge]]


def _search(start_entry: DNode, goal, cache: CostCache, edges_fn: EdgeFn) -> Optional[DNode]:
    """
    Run the relaxation loop until ``goal`` is popped or the frontier empties.

    Returns the goal's frontier entry, or None if the goal is unreachable.
    Path entries are extended on every relaxation, so DPNode in gives DPNode out.
    """
    track_path = isinstance(start_entry, DPNode)
    cache.set(start_entry.id, start_entry.cost)

    open_set = Frontier()
    open_set.put(start_entry)
    nodes_explored = 0

    logger.debug("Searching from %s to %s", start_entry.id, goal)

    while not open_set.is_empty():
        current = open_set.get()

        if current.id == goal:
            logger.debug(
                "Reached %s with cost %s after expanding %d nodes",
                goal, current.cost, nodes_explored,
            )
            return current

        # Skip stale entries superseded by a cheaper path
        if current.cost > cache.get(current.id):
            continue

        nodes_explored += 1
        for edge_id, edge_cost in edges_fn(current.id):
            next_cost = current.cost + edge_cost
            if next_cost < cache.get(edge_id):
                cache.set(edge_id, next_cost)
                if track_path:
                    open_set.put(DPNode(edge_id, next_cost, current.path + [edge_id]))
                else:
                    open_set.put(DNode(edge_id, next_cost))

    logger.debug("Exhausted frontier after expanding %d nodes; %s is unreachable", nodes_explored, goal)
    return None


def dijkstra_cost(start: T, goal: T, cache: CostCache, edges_fn: EdgeFn) -> Optional[Number]:
    """
    Minimal cost from ``start`` to ``goal``, or None if the goal is unreachable.

    Args:
        start: Starting node
        goal: Target node
        cache: Fresh cost cache covering every node ``edges_fn`` can name
        edges_fn: Maps a node to its outgoing edges (DEdge or (node, cost) pairs)

    Returns:
        The minimal total cost, or None
    """
    found = _search(DNode(start, cache.cost_type.zero), goal, cache, edges_fn)
    return None if found is None else found.cost


def dijkstra_path(start: T, goal: T, cache: CostCache, edges_fn: EdgeFn) -> Optional[Tuple[Number, List[T]]]:
    """
    Minimal cost and the route taken from ``start`` to ``goal``.

    The route includes both endpoints. Among several equal-cost routes the one
    returned is fixed by the frontier's tie-break on node identity. Copies the
    path on every relaxation; use ``dijkstra_cost`` when only the cost matters.

    Returns:
        ``(cost, path)``, or None if the goal is unreachable
    """
    found = _search(DPNode(start, cache.cost_type.zero, [start]), goal, cache, edges_fn)
    if found is None:
        return None
    return found.cost, found.path
