"""The eight queens puzzle and its text board."""

from collections.abc import Sequence

__all__ = ["eight_queens", "render_board"]


def eight_queens(size: int = 8) -> list[tuple[int, ...]]:
    """Every placement of ``size`` non-attacking queens.

    Each solution gives the queen's column for every row, rows top to bottom;
    solutions come with columns tried in ascending order row by row.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    solutions: list[tuple[int, ...]] = []
    columns: list[int] = []

    def safe(row: int, col: int) -> bool:
        return all(
            col != other and abs(col - other) != row - placed
            for placed, other in enumerate(columns)
        )

    def place(row: int) -> None:
        if row == size:
            solutions.append(tuple(columns))
            return
        for col in range(size):
            if safe(row, col):
                columns.append(col)
                place(row + 1)
                columns.pop()

    place(0)
    return solutions


def render_board(solution: Sequence[int]) -> str:
    """Draw a placement as rows of two-character cells, 1 for a queen."""
    n = len(solution)
    return "\n".join(
        "".join(f"{1 if c == col else 0:2d}" for c in range(n)) for col in solution
    )