"""Row/column locations on a rectangular grid."""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .directions import Cardinal
from .errors import LocationParseError

# Orthogonal offsets in east, south, west, north order
ORTH_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))

# Moore neighborhood offsets, row-major
MOORE_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


@dataclass(frozen=True, order=True)
class Location:
    """
    A non-negative (row, col) pair identifying a cell in a rectangular grid.

    Locations order row-major (row first, then column) and hash by value, so
    they can be used as search node identities and dict keys. Neither
    coordinate can go below zero: moves that would underflow report ``None``
    instead of wrapping.
    """
    row: int
    col: int

    def __post_init__(self):
        if self.row < 0 or self.col < 0:
            raise ValueError(f"Location coordinates must be non-negative, got ({self.row}, {self.col})")

    @classmethod
    def parse(cls, text: str) -> "Location":
        """
        Parse ``"<row>, <col>"`` into a Location.

        Whitespace around each field is ignored. Raises LocationParseError
        carrying the offending text if a field is missing, extra, or not a
        non-negative integer.
        """
        parts = text.split(",")
        if len(parts) < 2:
            raise LocationParseError(text, "missing col")
        if len(parts) > 2:
            raise LocationParseError(text, "too many fields")

        values = []
        for name, part in zip(("row", "col"), parts):
            field = part.strip()
            if not field:
                raise LocationParseError(text, f"missing {name}")
            try:
                value = int(field)
            except ValueError:
                raise LocationParseError(text, f"{name} is not an integer: {field!r}") from None
            if value < 0:
                raise LocationParseError(text, f"{name} is negative: {value}")
            values.append(value)

        return cls(values[0], values[1])

    def as_rm_index(self, width: int) -> int:
        """Index of this location in a row-major grid ``width`` columns wide."""
        return self.row * width + self.col

    @classmethod
    def from_rm_index(cls, index: int, width: int) -> "Location":
        """Build a location from an index into a row-major grid ``width`` columns wide."""
        row, col = divmod(index, width)
        return cls(row, col)

    def manhattan_dist(self, other: "Location") -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def neighbors(self) -> Iterator["Location"]:
        """
        Yield the up to eight surrounding locations, skipping any that would
        need a negative row or column.
        """
        return self._offset_all(MOORE_OFFSETS)

    def orthogonal_neighbors(self) -> Iterator["Location"]:
        """
        Yield the up to four orthogonal neighbors in east, south, west, north
        order, skipping any that would need a negative row or column.
        """
        return self._offset_all(ORTH_OFFSETS)

    def _offset_all(self, offsets) -> Iterator["Location"]:
        for dr, dc in offsets:
            row, col = self.row + dr, self.col + dc
            if row >= 0 and col >= 0:
                yield Location(row, col)

    def north(self) -> Optional["Location"]:
        if self.row == 0:
            return None
        return Location(self.row - 1, self.col)

    def south(self) -> Optional["Location"]:
        return Location(self.row + 1, self.col)

    def west(self) -> Optional["Location"]:
        if self.col == 0:
            return None
        return Location(self.row, self.col - 1)

    def east(self) -> Optional["Location"]:
        return Location(self.row, self.col + 1)

    def step(self, direction: Cardinal) -> Optional["Location"]:
        """Move one cell in ``direction``; None if that leaves the non-negative quadrant."""
        if direction is Cardinal.NORTH:
            return self.north()
        if direction is Cardinal.SOUTH:
            return self.south()
        if direction is Cardinal.EAST:
            return self.east()
        return self.west()

    def __str__(self) -> str:
        return f"{self.row}, {self.col}"
