"""Edge functions for running the search over grids and hex spaces."""

from typing import Callable, Collection, List, Optional

from .bound import Bound2D
from .grid import Scalable
from .location import Location
from .priority_queue import DEdge
from .types import Number, SearchConfig

# cost_fn(from_location, to_location, to_value) -> cost, or None if impassable
CostFn = Callable[[Location, Location, object], Optional[Number]]
ScaleFn = Callable[[object, int, int], object]


def wrap_risk(value: int, r_fac: int, c_fac: int) -> int:
    """
    Scale function for tiled risk grids.
    Each tile step adds one; values past 9 wrap back around to 1.
    """
    v = value + r_fac + c_fac
    if v > 9:
        v = v % 10 + 1
    return v


def _destination_value(src: Location, dst: Location, value) -> Number:
    return value


def grid_edges(
    grid: Scalable,
    config: Optional[SearchConfig] = None,
    cost_fn: Optional[CostFn] = None,
    scale_fn: Optional[ScaleFn] = None,
) -> Callable[[Location], List[DEdge]]:
    """
    Build an edge function over the cells of ``grid``.

    Args:
        grid: Grid to search in
        config: Movement rules and tiling; defaults to 4-directional, unscaled
        cost_fn: Cost of moving between two cells given the destination's
            value. Returning None marks the move impassable. Defaults to the
            destination value itself.
        scale_fn: Transform for tiled lookups, required when ``config.scale > 1``

    Returns:
        A function mapping a Location to its outgoing edges
    """
    config = config or SearchConfig()
    cost_fn = cost_fn or _destination_value

    if config.scale > 1:
        if scale_fn is None:
            raise ValueError(f"A scale function is required for scale {config.scale}")

        def lookup(location: Location):
            return grid.get_scaled(location, config.scale, scale_fn)
    else:
        lookup = grid.get

    def edges(location: Location) -> List[DEdge]:
        if config.allow_diagonal:
            candidates = location.neighbors()
        else:
            candidates = location.orthogonal_neighbors()

        result = []
        for neighbor in candidates:
            value = lookup(neighbor)
            # Out of bounds
            if value is None:
                continue
            cost = cost_fn(location, neighbor, value)
            if cost is None:
                continue
            result.append(DEdge(neighbor, cost))
        return result

    return edges


def hex_edges(
    bound: Optional[Bound2D] = None,
    step_cost: Number = 1,
    blocked: Collection = (),
):
    """
    Build an edge function over an unbounded hex space.

    Every step costs ``step_cost``. With ``bound``, neighbors whose (q, r) fall
    outside it are dropped; cells in ``blocked`` are never entered.
    """

    def edges(hex_location) -> List[DEdge]:
        result = []
        for neighbor in hex_location.neighbors():
            if bound is not None and not bound.contains(neighbor.q, neighbor.r):
                continue
            if neighbor in blocked:
                continue
            result.append(DEdge(neighbor, step_cost))
        return result

    return edges
