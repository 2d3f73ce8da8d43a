"""Checks of classic number-theory statements on concrete numbers."""

from itertools import combinations_with_replacement
from math import isqrt

__all__ = [
    "consecutive_sums",
    "two_square_sums",
    "special_numbers",
    "collatz_steps",
    "four_squares",
    "nicomachus",
]

_COLLATZ_LIMIT = 999


def consecutive_sums(n: int) -> list[tuple[int, int]]:
    """Runs ``(first, last)`` of at least two consecutive integers summing to ``n``."""
    runs: list[tuple[int, int]] = []
    for first in range(1, n):
        total = 0
        last = first - 1
        while total < n:
            last += 1
            total += last
        if total == n:
            runs.append((first, last))
    return runs


def _roots_below(n: int) -> range:
    """Positive integers whose square is below ``n``."""
    return range(1, isqrt(n - 1) + 1) if n > 0 else range(0)


def two_square_sums(n: int) -> list[tuple[int, int]]:
    """Pairs ``x <= y`` of positive integers with ``x**2 + y**2 == n``."""
    return [
        (x, y)
        for x, y in combinations_with_replacement(_roots_below(n), 2)
        if x * x + y * y == n
    ]


def special_numbers() -> list[int]:
    """Four-digit numbers ``abcd`` equal to ``(ab + cd) ** 2``."""
    return [n for n in range(1000, 9999) if (n // 100 + n % 100) ** 2 == n]


def collatz_steps(n: int) -> list[int]:
    """The 3n+1 sequence from ``n`` down to 1.

    Raises RuntimeError if 1 is not reached within 998 steps.
    """
    if n < 1:
        raise ValueError("n must be a positive integer")
    sequence = [n]
    while n != 1 and len(sequence) <= _COLLATZ_LIMIT:
        n = n // 2 if n % 2 == 0 else n * 3 + 1
        sequence.append(n)
    if n != 1 or len(sequence) > _COLLATZ_LIMIT:
        raise RuntimeError("sequence did not reach 1 within the step limit")
    return sequence


def four_squares(n: int) -> tuple[int, ...]:
    """Write ``n`` as a sum of at most four squares, using as few as possible.

    Returns the roots in non-decreasing order, the first such tuple found.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    root = isqrt(n)
    if root * root == n:
        return (root,)
    roots = _roots_below(n)
    for count in (2, 3, 4):
        for terms in combinations_with_replacement(roots, count):
            if sum(t * t for t in terms) == n:
                return terms
    raise ValueError(f"no representation found for {n}")


def nicomachus(n: int) -> list[int]:
    """Consecutive odd numbers, each below ``n**3``, that sum to ``n**3``.

    Returns the first run found, or an empty list if there is none.
    """
    cube = n * n * n
    for first in range(1, cube, 2):
        total = 0
        for last in range(first, cube, 2):
            total += last
            if total == cube:
                return list(range(first, last + 1, 2))
            if total > cube:
                break
    return []