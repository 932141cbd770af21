# tests/domain/test_grid.py
import pytest

from gridkit.domain.errors import GridConstructionError
from gridkit.domain.grid import Grid, GridLike
from gridkit.domain.location import Location
from gridkit.domain.neighbors import wrap_risk

VALUES = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]


def test_general():
    empty = Grid()
    assert empty.is_empty()
    assert (empty.rows, empty.cols) == (0, 0)

    grid = Grid(VALUES)
    assert not grid.is_empty()
    assert grid.size() == 12
    assert grid.rows == 3
    assert grid.cols == 4

    assert grid.get(Location(0, 0)) == 1
    assert grid.get(Location(2, 3)) == 12
    assert grid.get(Location(1, 2)) == 7

    assert grid.top_left() == Location(0, 0)
    assert grid.bottom_right() == Location(2, 3)


def test_every_cell_reads_back():
    grid = Grid(VALUES)
    assert grid.rows * grid.cols == sum(len(row) for row in VALUES)
    for r in range(grid.rows):
        for c in range(grid.cols):
            assert grid.get(Location(r, c)) == VALUES[r][c]


def test_jagged_rows_rejected():
    with pytest.raises(GridConstructionError) as excinfo:
        Grid([[1, 2, 3], [4, 5], [6, 7, 8]])
    assert "row 1" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_construction_copies_input():
    rows = [[1, 2], [3, 4]]
    grid = Grid(rows)
    rows[0][0] = 99
    assert grid.get(Location(0, 0)) == 1


def test_out_of_range_access():
    grid = Grid(VALUES)
    assert grid.get(Location(3, 0)) is None
    assert grid.get(Location(0, 4)) is None
    assert grid.set(Location(5, 5), 0) is False
    assert grid.update(Location(0, 9), lambda v: v + 1) is False


def test_mutating():
    grid = Grid(VALUES)
    assert grid.get(Location(0, 0)) == 1
    assert grid.set(Location(0, 0), 222)
    assert grid.get(Location(0, 0)) == 222
    assert grid.update(Location(2, 3), lambda v: v * 2)
    assert grid.get(Location(2, 3)) == 24


def test_empty_grid_has_no_bottom_right():
    with pytest.raises(ValueError):
        Grid().bottom_right()


def test_locations_row_major():
    grid = Grid([[0, 0], [0, 0]])
    assert list(grid.locations()) == [Location(0, 0), Location(0, 1), Location(1, 0), Location(1, 1)]


def test_filled_and_display():
    grid = Grid.filled(2, 3, ".")
    assert str(grid) == "...\n..."
    grid.set(Location(1, 2), "#")
    assert str(grid) == "...\n..#"
    assert grid == Grid([list("..."), list("..#")])


def test_scale():
    grid = Grid([[8]])
    scale = 5

    assert grid.get_scaled(Location(0, 0), scale, wrap_risk) == 8
    assert grid.get_scaled(Location(1, 1), scale, wrap_risk) == 1
    assert grid.get_scaled(Location(1, 4), scale, wrap_risk) == 4
    assert grid.get_scaled(Location(2, 2), scale, wrap_risk) == 3
    assert grid.get_scaled(Location(3, 3), scale, wrap_risk) == 5
    assert grid.get_scaled(Location(4, 4), scale, wrap_risk) == 7
    assert grid.get_scaled(Location(5, 0), scale, wrap_risk) is None
    assert grid.scaled_bottom_right(scale) == Location(4, 4)


def test_scale_decomposes_into_base_cell_and_tile():
    grid = Grid([[1, 2, 3], [4, 5, 6]])
    seen = []

    def record(value, r_fac, c_fac):
        seen.append((value, r_fac, c_fac))
        return value

    # one full tile down and right of (1, 2)
    assert grid.get_scaled(Location(1 + 2, 2 + 3), 5, record) == 6
    assert seen == [(grid.get(Location(1, 2)), 1, 1)]


def test_incomplete_grid_like_cannot_be_built():
    class ReadOnlySquare(GridLike):
        rows = cols = 2

        def get(self, location):
            return 0 if self.in_bounds(location) else None

    with pytest.raises(TypeError):
        ReadOnlySquare()

    class Square(ReadOnlySquare):
        def set(self, location, value):
            return False

    square = Square()
    assert square.size() == 4
    assert square.get(Location(1, 1)) == 0
    assert not square.update(Location(1, 1), lambda v: v + 1)
