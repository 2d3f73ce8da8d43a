"""Matrix transpose, product and saddle point search on nested lists."""

from collections.abc import Sequence

__all__ = ["transpose", "multiply", "saddle_point"]

Matrix = Sequence[Sequence[int]]


def _width(matrix: Matrix) -> int:
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("rows have different lengths")
    return widths.pop() if widths else 0


def transpose(matrix: Matrix) -> list[list[int]]:
    """Return the transpose of a rectangular matrix."""
    _width(matrix)
    return [list(column) for column in zip(*matrix)]


def multiply(a: Matrix, b: Matrix) -> list[list[int]]:
    """Return the matrix product ``a`` times ``b``."""
    inner = _width(a)
    _width(b)
    if inner != len(b):
        raise ValueError(f"cannot multiply {len(a)}x{inner} by {len(b)}x{_width(b)}")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def saddle_point(matrix: Matrix) -> tuple[int, int] | None:
    """Find an element that is the unique maximum of its row and the strict
    minimum of its column; return its (row, column) or None."""
    _width(matrix)
    for i, row in enumerate(matrix):
        if not row:
            continue
        peak = max(row)
        if row.count(peak) != 1:
            continue
        col = row.index(peak)
        if all(other[col] > peak for k, other in enumerate(matrix) if k != i):
            return i, col
    return None