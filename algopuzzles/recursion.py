"""Divide-and-conquer and recursive classics: minimum, false coin, C(m, n),
powers and the towers of Hanoi."""

from collections.abc import Iterator, Sequence
from functools import lru_cache

__all__ = [
    "recursive_min",
    "find_false_coin",
    "combinations",
    "power",
    "fast_power",
    "hanoi",
]


def _min_of(values: Sequence[int], low: int, count: int) -> int:
    if count == 1:
        return values[low]
    half = count // 2
    left = _min_of(values, low, half)
    if count % 2 == 0:
        right = _min_of(values, low + half, half)
        return min(left, right)
    right = _min_of(values, low + half + 1, half)
    return min(left, right, values[low + half])


def recursive_min(values: Sequence[int]) -> int:
    """Smallest element, found by splitting the sequence in halves."""
    if not values:
        raise ValueError("cannot take the minimum of an empty sequence")
    return _min_of(values, 0, len(values))


def _search(coins: Sequence[int], low: int, high: int) -> int:
    if low + 1 == high:
        return low + 1 if coins[low] < coins[high] else high + 1
    middle = low + (high - low) // 2
    if (high - low + 1) % 2 == 0:
        left = sum(coins[low : middle + 1])
        right = sum(coins[middle + 1 : high + 1])
        if left < right:
            return _search(coins, low, middle)
        if left > right:
            return _search(coins, middle + 1, high)
        raise ValueError("no lighter coin among the coins")
    left = sum(coins[low:middle])
    right = sum(coins[middle + 1 : high + 1])
    if left < right:
        return _search(coins, low, middle - 1)
    if left > right:
        return _search(coins, middle + 1, high)
    return middle + 1


def find_false_coin(coins: Sequence[int]) -> int:
    """1-based position of the single lighter coin, found by weighing halves.

    With an odd number of coins and balanced halves the middle coin is taken
    to be the false one.
    """
    if not coins:
        raise ValueError("no coins to weigh")
    return _search(coins, 0, len(coins) - 1)


@lru_cache(maxsize=None)
def _choose(m: int, n: int) -> int:
    if n == 0 or n == m:
        return 1
    return _choose(m - 1, n) + _choose(m - 1, n - 1)


def combinations(m: int, n: int) -> int:
    """Number of ways to choose ``n`` of ``m`` things, via C(m-1, n) + C(m-1, n-1)."""
    if n < 0:
        raise ValueError("n must not be negative")
    if m < n:
        raise ValueError(f"cannot choose {n} of {m}")
    return _choose(m, n)


def power(m: int, n: int) -> int:
    """``m`` to the ``n``-th power by repeated multiplication."""
    if n < 0:
        raise ValueError("n must not be negative")
    result = 1
    for _ in range(n):
        result *= m
    return result


def fast_power(m: int, n: int) -> int:
    """``m`` to the ``n``-th power by repeated squaring."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 1
    if n == 1:
        return m
    if n % 2 == 0:
        half = fast_power(m, n // 2)
        return half * half
    return m * fast_power(m, n - 1)


def _moves(n: int, source: str, spare: str, target: str) -> Iterator[tuple[str, str]]:
    if n == 0:
        return
    yield from _moves(n - 1, source, target, spare)
    yield source, target
    yield from _moves(n - 1, spare, source, target)


def hanoi(
    n: int, source: str = "A", spare: str = "B", target: str = "C"
) -> list[tuple[str, str]]:
    """Moves ``(from, to)`` that carry ``n`` discs from ``source`` to ``target``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(_moves(n, source, spare, target))