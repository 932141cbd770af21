"""Core domain types and the shortest-path search."""

from .bound import Bound2D
from .cost_cache import CostCache, DenseLocationCache, SparseCostCache
from .directions import Cardinal, Direction, HorizHexDir, VertHexDir
from .errors import (
    CacheBoundsError,
    DirectionParseError,
    GridConstructionError,
    GridkitError,
    LocationParseError,
)
from .grid import Grid, GridLike, Scalable
from .hex import HorizHexLocation, VertHexLocation
from .location import Location
from .pathing import dijkstra_cost, dijkstra_path
from .priority_queue import DEdge, DNode, DPNode, Frontier
from .types import FLOAT_COST, INT_COST, CostType, SearchConfig

__all__ = [
    "Bound2D",
    "CacheBoundsError",
    "Cardinal",
    "CostCache",
    "CostType",
    "DEdge",
    "DNode",
    "DPNode",
    "DenseLocationCache",
    "Direction",
    "DirectionParseError",
    "FLOAT_COST",
    "Frontier",
    "Grid",
    "GridConstructionError",
    "GridLike",
    "GridkitError",
    "HorizHexDir",
    "HorizHexLocation",
    "INT_COST",
    "Location",
    "LocationParseError",
    "Scalable",
    "SearchConfig",
    "SparseCostCache",
    "VertHexDir",
    "VertHexLocation",
    "dijkstra_cost",
    "dijkstra_path",
]
