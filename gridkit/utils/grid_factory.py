"""Grid factory for building grids from puzzle text."""

from typing import Callable, Iterable, TypeVar

from ..domain.grid import Grid

T = TypeVar("T")


def grid_from_lines(lines: Iterable[str], cell_fn: Callable[[str], T] = str) -> Grid[T]:
    """
    Create a grid with one row per line and one cell per character.

    Args:
        lines: Input lines; trailing newlines and trailing blank lines are ignored
        cell_fn: Converts each character into a cell value

    Returns:
        New Grid instance

    Raises:
        GridConstructionError: If the lines are not all the same length
        ValueError: If ``cell_fn`` rejects a character
    """
    rows = [line.rstrip("\r\n") for line in lines]
    while rows and not rows[-1].strip():
        rows.pop()

    cells = []
    for row_idx, row in enumerate(rows):
        try:
            cells.append([cell_fn(ch) for ch in row])
        except ValueError as e:
            raise ValueError(f"Invalid cell in row {row_idx}: {row!r} ({e})") from e

    return Grid(cells)


def digit_grid(lines: Iterable[str]) -> Grid[int]:
    """Create a grid of single-digit integers, e.g. a risk or height map."""
    return grid_from_lines(lines, int)


def grid_from_text(text: str, cell_fn: Callable[[str], T] = str) -> Grid[T]:
    """Like grid_from_lines, but splits a block of text, stripping indentation."""
    return grid_from_lines((line.strip() for line in text.strip().splitlines()), cell_fn)
