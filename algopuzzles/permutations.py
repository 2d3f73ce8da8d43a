"""All orderings of a sequence of numbers."""

from collections.abc import Sequence
from itertools import permutations as _orderings
from typing import TypeVar

__all__ = ["permutations"]

T = TypeVar("T")


def permutations(values: Sequence[T]) -> list[tuple[T, ...]]:
    """Every arrangement of ``values`` by position, first element varying slowest."""
    return list(_orderings(values))