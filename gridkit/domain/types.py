"""Core type definitions and configuration for grid searches."""

import math
from dataclasses import dataclass
from typing import Any, Literal, Union

import numpy as np


# Movement types
MovementType = Literal["4-dir", "8-dir"]

Number = Union[int, float]


@dataclass(frozen=True)
class CostType:
    """
    Arithmetic strategy for search costs.

    Supplies the additive identity and the sentinel that stands for
    "no path found yet". ``dtype`` is the numpy dtype used by array-backed
    caches, so the sentinel must be representable in it.
    """
    name: str
    zero: Number
    max_value: Number
    dtype: Any

    def is_unset(self, value: Number) -> bool:
        """Whether ``value`` is the unreached sentinel."""
        return value == self.max_value

    def coerce(self, value: Number) -> Number:
        """Convert a numpy scalar (or any number) to this cost type's Python type."""
        return type(self.zero)(value)


INT_COST = CostType("int", 0, int(np.iinfo(np.int64).max), np.int64)
FLOAT_COST = CostType("float", 0.0, math.inf, np.float64)


@dataclass
class SearchConfig:
    """Configuration for building edge functions over a grid."""
    movement: MovementType = "4-dir"
    scale: int = 1  # Tile the grid scale x scale times

    def __post_init__(self):
        if self.movement not in ("4-dir", "8-dir"):
            raise ValueError(f"Unknown movement type: {self.movement}")
        if self.scale < 1:
            raise ValueError(f"Scale must be at least 1, got {self.scale}")

    @property
    def allow_diagonal(self) -> bool:
        """Whether diagonal movement is allowed."""
        return self.movement == "8-dir"
