"""Text patterns: a star triangle and Pascal's triangle."""

__all__ = ["star_triangle", "pascal_triangle"]


def star_triangle(n: int) -> list[str]:
    """Return ``n`` centred rows of 1, 3, 5, ... stars."""
    if n < 0:
        raise ValueError("n must not be negative")
    return [" " * (n - i) + "*" * (2 * i - 1) for i in range(1, n + 1)]


def pascal_triangle(rows: int = 7) -> list[list[int]]:
    """Return the first ``rows`` rows of Pascal's triangle."""
    if rows < 0:
        raise ValueError("rows must not be negative")
    triangle: list[list[int]] = []
    row = [1]
    for _ in range(rows):
        triangle.append(row)
        row = [1, *(left + right for left, right in zip(row, row[1:])), 1]
    return triangle