"""Compass direction enums for square and hexagonal grids.

``Direction`` holds all eight cardinal and ordinal directions. The other enums
are subsets of it: ``Cardinal`` for 4-connected square grids, and one enum per
hexagon orientation.

Flat edges north and south (``HorizHexDir``)::

           n
         +---+
    nw  /     \\  ne
       +       +
    sw  \\     /  se
         +---+
           s

Flat edges east and west (``VertHexDir``)::

          +
         / \\
    nw  /   \\  ne
       +     +
     w |     | e
       +     +
    sw  \\   /  se
         \\ /
          +
"""

from enum import Enum

from .errors import DirectionParseError


class Direction(Enum):
    """The eight cardinal and ordinal directions."""

    NORTH = "North"
    NORTH_EAST = "NorthEast"
    EAST = "East"
    SOUTH_EAST = "SouthEast"
    SOUTH = "South"
    SOUTH_WEST = "SouthWest"
    WEST = "West"
    NORTH_WEST = "NorthWest"

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """
        Parse a direction from its full name or abbreviation, ignoring case.

        ``"North"``, ``"north"``, ``"N"`` and ``"n"`` all give ``NORTH``;
        ``"NorthEast"``, ``"northeast"``, ``"NE"`` and ``"ne"`` give
        ``NORTH_EAST``, and so on.
        """
        try:
            return _DIRECTION_NAMES[text.strip().lower()]
        except KeyError:
            raise DirectionParseError(text, cls.__name__) from None

    def opposite(self) -> "Direction":
        """The direction rotated by 180 degrees."""
        members = list(Direction)
        return members[(members.index(self) + 4) % 8]

    def __str__(self) -> str:
        return self.value


_DIRECTION_NAMES = {}
for _direction in Direction:
    _abbrev = "".join(ch for ch in _direction.value if ch.isupper()).lower()
    _DIRECTION_NAMES[_direction.value.lower()] = _direction
    _DIRECTION_NAMES[_abbrev] = _direction
del _direction, _abbrev


class _SubsetDirection(Enum):
    """Shared behaviour for enums whose members are a subset of Direction."""

    @classmethod
    def parse(cls, text: str):
        try:
            direction = Direction.parse(text)
        except DirectionParseError:
            raise DirectionParseError(text, cls.__name__) from None
        try:
            return cls[direction.name]
        except KeyError:
            raise DirectionParseError(text, cls.__name__) from None

    @classmethod
    def from_direction(cls, direction: Direction):
        """Narrow a Direction to this enum; ValueError if it has no such member."""
        try:
            return cls[direction.name]
        except KeyError:
            raise ValueError(f"{direction} is not a valid {cls.__name__}") from None

    def to_direction(self) -> Direction:
        return Direction[self.name]

    def opposite(self):
        return type(self)[self.to_direction().opposite().name]

    def __str__(self) -> str:
        return self.value


class Cardinal(_SubsetDirection):
    """North, South, East and West."""

    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"

    @classmethod
    def from_char(cls, char: str) -> "Cardinal":
        """Parse a single character ('n', 'S', ...) into a Cardinal."""
        if len(char) != 1:
            raise DirectionParseError(char, cls.__name__)
        return cls.parse(char)

    def right(self) -> "Cardinal":
        """Turn 90 degrees clockwise."""
        return _RIGHT_TURNS[self]

    def left(self) -> "Cardinal":
        """Turn 90 degrees counter-clockwise."""
        return _RIGHT_TURNS[self].opposite()


_RIGHT_TURNS = {
    Cardinal.NORTH: Cardinal.EAST,
    Cardinal.EAST: Cardinal.SOUTH,
    Cardinal.SOUTH: Cardinal.WEST,
    Cardinal.WEST: Cardinal.NORTH,
}


class HorizHexDir(_SubsetDirection):
    """Faces of a hexagon with flat edges to the north and south."""

    NORTH = "North"
    NORTH_EAST = "NorthEast"
    SOUTH_EAST = "SouthEast"
    SOUTH = "South"
    SOUTH_WEST = "SouthWest"
    NORTH_WEST = "NorthWest"


class VertHexDir(_SubsetDirection):
    """Faces of a hexagon with flat edges to the east and west."""

    EAST = "East"
    SOUTH_EAST = "SouthEast"
    SOUTH_WEST = "SouthWest"
    WEST = "West"
    NORTH_WEST = "NorthWest"
    NORTH_EAST = "NorthEast"
