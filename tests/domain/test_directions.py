# tests/domain/test_directions.py
import pytest

from gridkit.domain.directions import Cardinal, Direction, HorizHexDir, VertHexDir
from gridkit.domain.errors import DirectionParseError


@pytest.mark.parametrize("text,expected", [
    ("North", Direction.NORTH),
    ("north", Direction.NORTH),
    ("N", Direction.NORTH),
    ("n", Direction.NORTH),
    ("NorthEast", Direction.NORTH_EAST),
    ("northeast", Direction.NORTH_EAST),
    ("NE", Direction.NORTH_EAST),
    ("sw", Direction.SOUTH_WEST),
    ("West", Direction.WEST),
])
def test_direction_parse(text, expected):
    assert Direction.parse(text) == expected


def test_direction_parse_error():
    with pytest.raises(DirectionParseError) as excinfo:
        Direction.parse("up")
    assert excinfo.value.text == "up"


def test_direction_display():
    assert str(Direction.NORTH_EAST) == "NorthEast"
    assert str(Cardinal.WEST) == "West"
    assert str(VertHexDir.SOUTH_EAST) == "SouthEast"


def test_direction_opposite():
    assert Direction.NORTH.opposite() == Direction.SOUTH
    assert Direction.NORTH_WEST.opposite() == Direction.SOUTH_EAST
    for direction in Direction:
        assert direction.opposite().opposite() == direction


@pytest.mark.parametrize("names,expected", [
    (["North", "north", "N", "n"], Cardinal.NORTH),
    (["South", "south", "S", "s"], Cardinal.SOUTH),
    (["East", "east", "E", "e"], Cardinal.EAST),
    (["West", "west", "W", "w"], Cardinal.WEST),
])
def test_cardinal_parse(names, expected):
    for name in names:
        assert Cardinal.parse(name) == expected


def test_cardinal_rejects_ordinals():
    with pytest.raises(DirectionParseError):
        Cardinal.parse("ne")


def test_cardinal_from_char():
    assert Cardinal.from_char("n") == Cardinal.NORTH
    assert Cardinal.from_char("N") == Cardinal.NORTH
    with pytest.raises(DirectionParseError):
        Cardinal.from_char("x")
    with pytest.raises(DirectionParseError):
        Cardinal.from_char("no")


def test_cardinal_turns():
    assert Cardinal.NORTH.right() == Cardinal.EAST
    assert Cardinal.EAST.right() == Cardinal.SOUTH
    assert Cardinal.NORTH.left() == Cardinal.WEST
    assert Cardinal.SOUTH.left() == Cardinal.EAST
    for direction in Cardinal:
        assert direction.right().left() == direction


def test_hex_direction_subsets():
    assert HorizHexDir.parse("n") == HorizHexDir.NORTH
    assert VertHexDir.parse("e") == VertHexDir.EAST
    with pytest.raises(DirectionParseError):
        HorizHexDir.parse("east")
    with pytest.raises(DirectionParseError):
        VertHexDir.parse("north")


def test_subset_conversion_to_direction():
    assert HorizHexDir.NORTH_EAST.to_direction() == Direction.NORTH_EAST
    assert Cardinal.from_direction(Direction.SOUTH) == Cardinal.SOUTH
    with pytest.raises(ValueError):
        Cardinal.from_direction(Direction.SOUTH_EAST)
