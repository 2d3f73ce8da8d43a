"""Small introductory problems: grading, decoding, leap years and more."""

from math import factorial

__all__ = [
    "grade",
    "decode_prefix",
    "is_leap_year",
    "xor_swap",
    "to_binary",
    "series_sum",
    "legendre",
    "day_of_year",
]

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def grade(score: int) -> str:
    """Map a score to a level from ``"A"`` (90 and up) to ``"E"`` (below 60)."""
    if score >= 90:
        return "A"
    if score >= 80:
        return "B"
    if score >= 70:
        return "C"
    if score >= 60:
        return "D"
    return "E"


def decode_prefix(bits: str) -> str:
    """Decode a string in the prefix code a=1, b=01, c=001.

    Characters that do not complete a code word are skipped.
    """
    decoded: list[str] = []
    chars = iter(bits)
    for ch in chars:
        if ch == "1":
            decoded.append("a")
        elif ch == "0":
            second = next(chars, "")
            if second == "1":
                decoded.append("b")
            elif second == "0":
                if next(chars, "") == "1":
                    decoded.append("c")
    return "".join(decoded)


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers using exclusive-or only."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def to_binary(n: int) -> str:
    """Return the binary digits of a non-negative integer."""
    if n < 0:
        raise ValueError("n must not be negative")
    digits: list[str] = []
    while True:
        n, remainder = divmod(n, 2)
        digits.append(str(remainder))
        if n == 0:
            break
    return "".join(reversed(digits))


def series_sum(terms: int = 10) -> float:
    """Sum of ``i! / 2**i`` for ``i`` from 1 to ``terms``."""
    if terms < 0:
        raise ValueError("terms must not be negative")
    return sum(factorial(i) * 0.5**i for i in range(1, terms + 1))


def legendre(n: int, x: float) -> float:
    """Evaluate the recursive polynomial P(n, x).

    P(0) = 1, P(1) = x and
    P(n) = ((2n - 1) * x - P(n - 1) - (n - 1) * P(n - 2)) / n.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 1.0
    older, previous = 1.0, float(x)
    for k in range(2, n + 1):
        older, previous = previous, ((2 * k - 1) * x - previous - (k - 1) * older) / k
    return previous


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the ordinal day of the given date within its year."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    days = list(_MONTH_DAYS)
    if is_leap_year(year):
        days[1] = 29
    return sum(days[: month - 1]) + day