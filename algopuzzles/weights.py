"""The merchant's broken weight: four pieces that weigh every whole amount."""

from collections.abc import Sequence
from itertools import combinations, product

__all__ = ["can_weigh", "broken_weights"]

_PIECES = 4


def _reachable(pieces: Sequence[int]) -> set[int]:
    """Every amount a balance can show with each piece on either pan or off it."""
    return {
        sum(sign * piece for sign, piece in zip(signs, pieces))
        for signs in product((-1, 0, 1), repeat=len(pieces))
    }


def can_weigh(pieces: Sequence[int], weight: int) -> bool:
    """True if ``weight`` can be balanced with ``pieces`` on either pan."""
    return weight in _reachable(pieces)


def broken_weights(total: int = 40) -> list[tuple[int, ...]]:
    """Sets of four different whole weights summing to ``total`` that can
    balance every whole amount from 1 to ``total``, smallest pieces first."""
    if total < 1:
        raise ValueError("total must be positive")
    found: list[tuple[int, ...]] = []
    for pieces in combinations(range(1, total + 1), _PIECES):
        if sum(pieces) != total:
            continue
        reachable = _reachable(pieces)
        if all(weight in reachable for weight in range(1, total + 1)):
            found.append(pieces)
    return found