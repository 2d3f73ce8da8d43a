"""Sorting eight numbers around a ring through an empty centre cell."""

from collections.abc import Sequence

__all__ = ["sort_ring", "render_ring"]

_RING_SIZE = 8


def _check(values: Sequence[int]) -> None:
    if len(values) != _RING_SIZE:
        raise ValueError(f"expected {_RING_SIZE} values, got {len(values)}")


def sort_ring(values: Sequence[int]) -> tuple[list[int], list[tuple[int, int]]]:
    """Bubble-sort the ring, returning the sorted values and the moves.

    Each move is ``(from, to)`` between cells numbered 1 to 8 and the centre 0;
    a swap of neighbours takes three moves through the centre.
    """
    _check(values)
    cells = list(values)
    moves: list[tuple[int, int]] = []
    for done in range(_RING_SIZE - 1):
        for j in range(_RING_SIZE - 1 - done):
            if cells[j] >= cells[j + 1]:
                cells[j], cells[j + 1] = cells[j + 1], cells[j]
                moves += [(j + 1, 0), (j + 2, j + 1), (0, j + 2)]
    return cells, moves


def render_ring(values: Sequence[int]) -> str:
    """Draw the ring clockwise from the top-left corner around an empty centre."""
    _check(values)
    m = values
    links = "  |  \\  |  /  |"
    return "\n".join(
        [
            f"  [{m[0]}]--[{m[1]}]--[{m[2]}]",
            links,
            f"  [{m[7]}]--[ ]--[{m[3]}]",
            links,
            f"  [{m[6]}]--[{m[5]}]--[{m[4]}]",
        ]
    )