"""Three-by-three magic squares filled with the numbers 1 to 9."""

from collections.abc import Sequence
from itertools import permutations

__all__ = ["is_magic", "magic_squares"]

_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def is_magic(cells: Sequence[int]) -> bool:
    """Return True if nine distinct cells, read row by row, have equal sums
    along every row, column and both diagonals."""
    if len(cells) != 9:
        raise ValueError(f"expected 9 cells, got {len(cells)}")
    if len(set(cells)) != 9:
        return False
    sums = {sum(cells[i] for i in line) for line in _LINES}
    return len(sums) == 1


def magic_squares() -> list[tuple[tuple[int, int, int], ...]]:
    """All 3x3 magic squares using 1 to 9, as tuples of rows."""
    return [
        (cells[0:3], cells[3:6], cells[6:9])
        for cells in permutations(range(1, 10))
        if is_magic(cells)
    ]