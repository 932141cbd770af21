"""Axial (q, r) coordinates for hexagonal grids.

Two orientations are supported, each as its own type so coordinates computed
under one neighbor convention can never be mixed with the other:

* ``HorizHexLocation``: flat edges north and south (moves use ``HorizHexDir``)
* ``VertHexLocation``: flat edges east and west (moves use ``VertHexDir``)

Offsets follow the usual axial layout where ``s = -q - r`` is the implicit
third cube coordinate.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple, TypeVar

from .directions import Direction, HorizHexDir, VertHexDir

H = TypeVar("H", bound="_AxialOps")


class _AxialOps:
    """
    Operations shared by both hex orientations.

    Subclasses are frozen dataclasses with ``q`` and ``r`` fields that provide
    ``DIRECTION_TYPE`` and ``OFFSETS`` (in canonical neighbor order).
    """
    q: int
    r: int
    DIRECTION_TYPE: type
    OFFSETS: Dict[object, Tuple[int, int]]

    @property
    def s(self) -> int:
        """The implicit third cube coordinate."""
        return -self.q - self.r

    def get_neighbor(self: H, direction) -> H:
        """
        The coordinate one step away in ``direction``.

        ``direction`` is this orientation's direction enum; a general
        ``Direction`` is accepted if it names a face of this hexagon.
        """
        if isinstance(direction, Direction):
            direction = self.DIRECTION_TYPE.from_direction(direction)
        elif not isinstance(direction, self.DIRECTION_TYPE):
            raise TypeError(
                f"{type(self).__name__} moves take {self.DIRECTION_TYPE.__name__}, "
                f"got {type(direction).__name__}"
            )
        dq, dr = self.OFFSETS[direction]
        return type(self)(self.q + dq, self.r + dr)

    def neighbors(self: H) -> Iterator[H]:
        """Yield the six neighbors in this orientation's canonical order."""
        for dq, dr in self.OFFSETS.values():
            yield type(self)(self.q + dq, self.r + dr)

    def distance(self: H, other: H) -> int:
        """Number of hex steps between the two coordinates."""
        if type(other) is not type(self):
            raise TypeError(
                f"cannot measure distance between {type(self).__name__} "
                f"and {type(other).__name__}"
            )
        dq = self.q - other.q
        dr = self.r - other.r
        return (abs(dq) + abs(dq + dr) + abs(dr)) // 2


@dataclass(frozen=True, order=True)
class HorizHexLocation(_AxialOps):
    """Axial coordinate on a grid of hexagons with flat north and south edges."""
    q: int
    r: int

    DIRECTION_TYPE = HorizHexDir
    # Clockwise from north
    OFFSETS = {
        HorizHexDir.NORTH: (0, -1),
        HorizHexDir.NORTH_EAST: (1, -1),
        HorizHexDir.SOUTH_EAST: (1, 0),
        HorizHexDir.SOUTH: (0, 1),
        HorizHexDir.SOUTH_WEST: (-1, 1),
        HorizHexDir.NORTH_WEST: (-1, 0),
    }


@dataclass(frozen=True, order=True)
class VertHexLocation(_AxialOps):
    """Axial coordinate on a grid of hexagons with flat east and west edges."""
    q: int
    r: int

    DIRECTION_TYPE = VertHexDir
    # Clockwise from east
    OFFSETS = {
        VertHexDir.EAST: (1, 0),
        VertHexDir.SOUTH_EAST: (0, 1),
        VertHexDir.SOUTH_WEST: (-1, 1),
        VertHexDir.WEST: (-1, 0),
        VertHexDir.NORTH_WEST: (0, -1),
        VertHexDir.NORTH_EAST: (1, -1),
    }
