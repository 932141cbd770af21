"""Best-known-cost storage for the shortest-path search.

The search never stores distances itself; it reads and writes them through a
``CostCache``. That keeps the algorithm independent of how nodes are laid out:
dense grids use a flat numpy array indexed by row-major position, while
combinatorial state spaces can use a dict keyed by any hashable state.

Any node that has never been set reads as ``cost_type.max_value``.
"""

import logging
from typing import Dict, Hashable, Protocol, TypeVar, runtime_checkable

import numpy as np

from .errors import CacheBoundsError
from .grid import GridLike
from .location import Location
from .types import INT_COST, CostType, Number

logger = logging.getLogger(__name__)

N = TypeVar("N", contravariant=True)


@runtime_checkable
class CostCache(Protocol[N]):
    """
    Responsibilities:
      • Report the best cost found so far for a node (the sentinel if none).
      • Record an improved cost for a node.
    """

    cost_type: CostType

    def get(self, node: N) -> Number: ...
    def set(self, node: N, cost: Number) -> None: ...


class DenseLocationCache:
    """
    Array-backed cache for Location nodes.

    Sized up front for ``size`` cells of a grid ``col_count`` columns wide.
    Asking about a location outside that space raises CacheBoundsError rather
    than aliasing some other cell.
    """

    def __init__(self, size: int, col_count: int, cost_type: CostType = INT_COST):
        if size < 0:
            raise ValueError(f"Cache size must be non-negative, got {size}")
        if col_count <= 0:
            raise ValueError(f"Column count must be positive, got {col_count}")
        self.cost_type = cost_type
        self.col_count = col_count
        self._costs = np.full(size, cost_type.max_value, dtype=cost_type.dtype)

    @classmethod
    def for_grid(cls, grid: GridLike, cost_type: CostType = INT_COST, scale: int = 1) -> "DenseLocationCache":
        """A cache covering every cell of ``grid`` tiled ``scale x scale`` times."""
        rows, cols = grid.rows * scale, grid.cols * scale
        return cls(rows * cols, cols, cost_type)

    @property
    def size(self) -> int:
        return int(self._costs.shape[0])

    def _index(self, node: Location) -> int:
        index = node.as_rm_index(self.col_count)
        if node.col >= self.col_count or index >= self.size:
            logger.warning(
                "Location %s is outside cost cache of %d cells (%d columns)",
                node, self.size, self.col_count,
            )
            raise CacheBoundsError(
                f"Location ({node}) is outside a cache of {self.size} cells "
                f"with {self.col_count} columns"
            )
        return index

    def get(self, node: Location) -> Number:
        return self.cost_type.coerce(self._costs[self._index(node)])

    def set(self, node: Location, cost: Number) -> None:
        """
        Store ``cost`` for ``node``.

        Raises TypeError if ``cost`` does not survive conversion to the cache
        dtype unchanged, e.g. a fractional cost in an ``INT_COST`` cache.
        """
        index = self._index(node)
        try:
            stored = self._costs.dtype.type(cost)
        except (OverflowError, ValueError):
            stored = None
        if stored is None or stored != cost:
            raise TypeError(
                f"cost {cost!r} cannot be stored exactly in a "
                f"{self.cost_type.name} cost cache"
            )
        self._costs[index] = stored

    def as_array(self, rows: int) -> np.ndarray:
        """Costs reshaped to ``rows x col_count``; unreached cells hold the sentinel."""
        return self._costs.reshape(rows, self.col_count).copy()


class SparseCostCache:
    """Dict-backed cache for arbitrary hashable nodes."""

    def __init__(self, cost_type: CostType = INT_COST):
        self.cost_type = cost_type
        self._costs: Dict[Hashable, Number] = {}

    def get(self, node: Hashable) -> Number:
        return self._costs.get(node, self.cost_type.max_value)

    def set(self, node: Hashable, cost: Number) -> None:
        self._costs[node] = cost

    def __len__(self) -> int:
        return len(self._costs)

    def __contains__(self, node: Hashable) -> bool:
        return node in self._costs
