# tests/utils/test_grid_factory.py
import pytest

from gridkit.domain.errors import GridConstructionError
from gridkit.domain.location import Location
from gridkit.utils.grid_factory import digit_grid, grid_from_lines, grid_from_text


def test_grid_from_lines():
    grid = grid_from_lines(["#.#\n", "...\n", "\n"])
    assert (grid.rows, grid.cols) == (2, 3)
    assert grid.get(Location(0, 0)) == "#"
    assert grid.get(Location(1, 1)) == "."


def test_digit_grid():
    grid = digit_grid(["123", "456"])
    assert grid.get(Location(1, 2)) == 6
    assert str(grid) == "123\n456"


def test_digit_grid_rejects_non_digits():
    with pytest.raises(ValueError) as excinfo:
        digit_grid(["12", "3x"])
    assert "row 1" in str(excinfo.value)


def test_jagged_lines():
    with pytest.raises(GridConstructionError):
        grid_from_lines(["abc", "ab"])


def test_grid_from_text_strips_indentation():
    grid = grid_from_text("""
        ab
        cd
    """)
    assert grid.to_lists() == [["a", "b"], ["c", "d"]]


def test_empty_input():
    grid = grid_from_lines([])
    assert grid.is_empty()
