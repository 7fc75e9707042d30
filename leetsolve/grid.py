"""Algorithms over two-dimensional grids."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")

_DIGITS = frozenset("123456789")
_LAND = "1"
_WATER = "0"


def _has_duplicate(cells: Iterable[str]) -> bool:
    counts = Counter(cell for cell in cells if cell in _DIGITS)
    return any(count > 1 for count in counts.values())


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether no digit repeats in any row, column or 3x3 box.

    Cells other than the digits 1 to 9 are treated as empty.
    """
    rows = (board[r][:9] for r in range(9))
    columns = ((board[r][c] for r in range(9)) for c in range(9))
    boxes = (
        (board[br + r][bc + c] for r in range(3) for c in range(3))
        for bc in range(0, 9, 3)
        for br in range(0, 9, 3)
    )
    return not any(
        _has_duplicate(unit) for group in (rows, columns, boxes) for unit in group
    )


def rotate(matrix: list[list[T]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    matrix[:] = [list(row) for row in zip(*reversed(matrix))]


def _neighbours(grid: Sequence[Sequence[object]], row: int, col: int):
    for r, c in ((row, col - 1), (row, col + 1), (row - 1, col), (row + 1, col)):
        if 0 <= r < len(grid) and 0 <= c < len(grid[0]):
            yield r, c


def num_islands(grid: list[list[str]]) -> int:
    """Count groups of ``"1"`` cells joined side to side.

    The grid is modified: every land cell is turned into ``"0"``.
    """
    count = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell != _LAND:
                continue
            count += 1
            grid[i][j] = _WATER
            stack = [(i, j)]
            while stack:
                r, c = stack.pop()
                for nr, nc in _neighbours(grid, r, c):
                    if grid[nr][nc] == _LAND:
                        grid[nr][nc] = _WATER
                        stack.append((nr, nc))
    return count


def flood_fill(image: list[list[int]], sr: int, sc: int, color: int) -> list[list[int]]:
    """Repaint the region around (sr, sc) sharing its colour, in place."""
    original = image[sr][sc]
    image[sr][sc] = color
    if original == color:
        return image
    stack = [(sr, sc)]
    while stack:
        r, c = stack.pop()
        for nr, nc in _neighbours(image, r, c):
            if image[nr][nc] == original:
                image[nr][nc] = color
                stack.append((nr, nc))
    return image


def transpose(matrix: Sequence[Sequence[T]]) -> list[list[T]]:
    """Return the transpose of a matrix as a new list of lists."""
    return [list(column) for column in zip(*matrix)]