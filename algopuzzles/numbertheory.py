"""Classic number puzzles: primes, divisors, Fibonacci and friends."""

from math import gcd as _math_gcd
from math import sqrt

__all__ = [
    "chessboard_grains",
    "gcd",
    "lcm",
    "is_prime",
    "goldbach_pair",
    "verify_goldbach",
    "einstein_staircase",
    "fibonacci",
    "prime_factors",
    "approximate_pi",
    "factor_sum",
    "perfect_numbers",
    "amicable_pairs",
]


def chessboard_grains(squares: int = 64) -> int:
    """Grains on a board where square ``k`` holds ``2**(k - 1)`` grains."""
    if squares < 0:
        raise ValueError("squares must not be negative")
    return sum(2 ** (k - 1) for k in range(1, squares + 1))


def _require_positive(a: int, b: int) -> None:
    if a <= 0 or b <= 0:
        raise ValueError("both numbers must be positive")


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers."""
    _require_positive(a, b)
    return _math_gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple of two positive integers."""
    _require_positive(a, b)
    return a // _math_gcd(a, b) * b


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


def goldbach_pair(n: int) -> tuple[int, int] | None:
    """Return the primes ``(p, n - p)`` with the smallest ``p``, or None."""
    for p in range(1, n // 2 + 1):
        if is_prime(p) and is_prime(n - p):
            return p, n - p
    return None


def verify_goldbach(low: int, high: int) -> list[tuple[int, int, int]]:
    """Decompose every even number above 2 in ``[low, high]`` into two primes.

    Returns ``(n, p, q)`` triples; raises ValueError on a counterexample.
    """
    result: list[tuple[int, int, int]] = []
    for n in range(low, high + 1):
        if n % 2 == 0 and n > 2:
            pair = goldbach_pair(n)
            if pair is None:
                raise ValueError(f"{n} is not the sum of two primes")
            result.append((n, *pair))
    return result


def einstein_staircase() -> int | None:
    """Smallest multiple of 7 leaving remainders 1, 2, 4, 5 modulo 2, 3, 5, 6."""
    for x in range(7, 7 * 1000, 7):
        if x % 2 == 1 and x % 3 == 2 and x % 5 == 4 and x % 6 == 5:
            return x
    return None


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, counting F(1) = F(2) = 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def prime_factors(n: int) -> list[int]:
    """Prime factors of ``n`` in ascending order; a prime yields itself."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return [1]
    factors: list[int] = []
    d = 2
    while d * d <= n:
        while n % d == 0:
            factors.append(d)
            n //= d
        d += 1
    if n > 1:
        factors.append(n)
    return factors


def approximate_pi(n: int) -> float:
    """Approximate pi by ``n`` side doublings of an inscribed polygon."""
    if n < 0:
        raise ValueError("n must not be negative")
    sides = 4
    half_chord = sqrt(2) / 2.0
    for _ in range(n):
        half_chord = sqrt(2.0 - 2.0 * sqrt(1.0 - half_chord * half_chord)) * 0.5
        sides *= 2
    return half_chord * sides


def factor_sum(n: int) -> int:
    """Sum of the divisors of ``n`` below ``n`` itself."""
    if n < 2:
        return 0
    total = 1
    d = 2
    while d * d <= n:
        if n % d == 0:
            total += d
            other = n // d
            if other != d:
                total += other
        d += 1
    return total


def perfect_numbers(limit: int = 1000) -> list[int]:
    """Numbers from 1 to ``limit`` equal to the sum of their proper divisors."""
    return [a for a in range(1, limit + 1) if factor_sum(a) == a]


def amicable_pairs(limit: int = 3000) -> list[tuple[int, int]]:
    """Pairs ``(a, b)`` with ``a < b <= limit`` whose divisor sums swap."""
    sums = {i: factor_sum(i) for i in range(1, limit + 1)}
    pairs: list[tuple[int, int]] = []
    for i, partner in sums.items():
        if i < partner <= limit and sums[partner] == i:
            pairs.append((i, partner))
    return pairs