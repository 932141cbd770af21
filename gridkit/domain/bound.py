"""Inclusive two-dimensional bounds."""

from dataclasses import dataclass
from typing import Iterable, Tuple

from .types import Number


@dataclass(frozen=True)
class Bound2D:
    """Inclusive bounds over x and y: ``min_x <= x <= max_x`` and ``min_y <= y <= max_y``."""
    min_x: Number
    max_x: Number
    min_y: Number
    max_y: Number

    @classmethod
    def enclosing(cls, points: Iterable[Tuple[Number, Number]]) -> "Bound2D":
        """Smallest bound containing every (x, y) point."""
        points = list(points)
        if not points:
            raise ValueError("Cannot compute bounds of zero points")
        xs = [x for x, _ in points]
        ys = [y for _, y in points]
        return cls(min(xs), max(xs), min(ys), max(ys))

    def contains(self, x: Number, y: Number) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    @property
    def width(self) -> Number:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> Number:
        return self.max_y - self.min_y + 1

    @property
    def area(self) -> Number:
        return self.width * self.height

    def __str__(self) -> str:
        return (
            f"Bounds: min (x: {self.min_x}, y: {self.min_y}), "
            f"max (x: {self.max_x}, y: {self.max_y})"
        )
