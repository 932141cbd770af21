"""Rectangular grid containers indexed by Location."""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterator, List, Optional, Sequence, TypeVar

from .errors import GridConstructionError
from .location import Location

T = TypeVar("T")


class GridLike(ABC, Generic[T]):
    """
    Anything that can be indexed by Location as a ``rows x cols`` table.

    Subclasses provide ``rows``, ``cols``, ``get`` and ``set``. Every access is
    bounds-checked: out-of-range reads give None and out-of-range writes
    return False, neither raises.
    """

    @property
    @abstractmethod
    def rows(self) -> int:
        ...

    @property
    @abstractmethod
    def cols(self) -> int:
        ...

    @abstractmethod
    def get(self, location: Location) -> Optional[T]:
        ...

    @abstractmethod
    def set(self, location: Location, value: T) -> bool:
        """Store ``value`` at ``location``; returns True if the write happened."""

    def update(self, location: Location, func: Callable[[T], T]) -> bool:
        """Replace the value at ``location`` with ``func(value)``; False if out of bounds."""
        if not self.in_bounds(location):
            return False
        return self.set(location, func(self.get(location)))

    def in_bounds(self, location: Location) -> bool:
        return location.row < self.rows and location.col < self.cols

    def top_left(self) -> Location:
        """The first cell of the grid, always (0, 0)."""
        return Location(0, 0)

    def bottom_right(self) -> Location:
        """The last cell of the grid."""
        if self.is_empty():
            raise ValueError("An empty grid has no bottom-right location")
        return Location(self.rows - 1, self.cols - 1)

    def size(self) -> int:
        """Total number of cells."""
        return self.rows * self.cols

    def is_empty(self) -> bool:
        return self.size() == 0

    def locations(self) -> Iterator[Location]:
        """Yield every location in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Location(row, col)


class Scalable(GridLike[T]):
    """
    A grid that can be read as if tiled ``scale x scale`` times.

    A location in the enlarged grid maps back to the base cell
    ``(row % rows, col % cols)``; the base value is passed to ``scale_fn``
    along with the tile offsets ``(row // rows, col // cols)``.
    """

    def scaled_bottom_right(self, scale: int) -> Location:
        if self.is_empty():
            raise ValueError("An empty grid has no bottom-right location")
        return Location(self.rows * scale - 1, self.cols * scale - 1)

    def get_scaled(
        self,
        location: Location,
        scale: int,
        scale_fn: Callable[[T, int, int], T],
    ) -> Optional[T]:
        if self.is_empty():
            return None

        r_fac, row = divmod(location.row, self.rows)
        c_fac, col = divmod(location.col, self.cols)
        if r_fac >= scale or c_fac >= scale:
            return None

        value = self.get(Location(row, col))
        if value is None:
            return None
        return scale_fn(value, r_fac, c_fac)


class Grid(Scalable[T]):
    """A rectangular table of values, stored as a list of equal-length rows."""

    def __init__(self, cells: Sequence[Sequence[T]] = ()):
        rows = [list(row) for row in cells]
        cols = len(rows[0]) if rows else 0

        for index, row in enumerate(rows):
            if len(row) != cols:
                raise GridConstructionError(
                    f"unable to construct Grid: row {index} has {len(row)} columns, "
                    f"expected {cols} (from row 0)"
                )

        self._cells: List[List[T]] = rows
        self._rows = len(rows)
        self._cols = cols

    @classmethod
    def filled(cls, rows: int, cols: int, value: T) -> "Grid[T]":
        """A ``rows x cols`` grid with every cell set to ``value``."""
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")
        return cls([[value] * cols for _ in range(rows)])

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def get(self, location: Location) -> Optional[T]:
        if not self.in_bounds(location):
            return None
        return self._cells[location.row][location.col]

    def set(self, location: Location, value: T) -> bool:
        if not self.in_bounds(location):
            return False
        self._cells[location.row][location.col] = value
        return True

    def to_lists(self) -> List[List[T]]:
        """A copy of the whole table as nested lists."""
        return [list(row) for row in self._cells]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols})"

    def __str__(self) -> str:
        return "\n".join("".join(str(item) for item in row) for row in self._cells)
