"""Puzzles about the decimal digits of numbers."""

__all__ = [
    "reverse_digits",
    "is_palindrome_number",
    "is_narcissistic",
    "narcissistic_numbers",
    "number_to_words",
    "binary_to_decimal",
    "is_automorphic",
    "automorphic_numbers",
    "triple_palindromes",
]

_ONES = (
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
_TENS = ("twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")


def reverse_digits(n: int) -> int:
    """Return ``n`` with its decimal digits reversed, keeping the sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_palindrome_number(n: int) -> bool:
    """Return True if ``n`` reads the same backwards."""
    return n == reverse_digits(n)


def is_narcissistic(n: int) -> bool:
    """Return True if ``n`` equals the sum of the cubes of its digits."""
    return n == sum(int(d) ** 3 for d in str(abs(n)) if n)


def narcissistic_numbers() -> list[int]:
    """All three-digit numbers equal to the sum of their digits' cubes."""
    return [n for n in range(100, 1000) if is_narcissistic(n)]


def _below_hundred(n: int) -> list[str]:
    if n <= 19:
        return [_ONES[n - 1]]
    words = [_TENS[n // 10 - 2]]
    if n % 10:
        words.append(_ONES[n % 10 - 1])
    return words


def _below_thousand(n: int) -> list[str]:
    words: list[str] = []
    if n // 100:
        words += _below_hundred(n // 100) + ["hundred"]
    if n % 100:
        words += _below_hundred(n % 100)
    return words


def number_to_words(n: int) -> str:
    """Spell out an integer from 0 to 999999 in English words."""
    if not 0 <= n <= 999_999:
        raise ValueError(f"number out of range: {n}")
    if n == 0:
        return "zero"
    words: list[str] = []
    if n // 1000:
        words += _below_thousand(n // 1000) + ["thousand"]
    if n % 1000:
        words += _below_thousand(n % 1000)
    return " ".join(words)


def binary_to_decimal(bits: str) -> int:
    """Value of a string of binary digits; an empty string is zero."""
    total = 0
    for ch in bits:
        if ch not in "01":
            raise ValueError(f"not a binary digit: {ch!r}")
        total = total * 2 + (ch == "1")
    return total


def is_automorphic(n: int) -> bool:
    """Return True if ``n`` is the tail of its own square."""
    if n < 0:
        raise ValueError("n must not be negative")
    return (n * n) % 10 ** len(str(n)) == n


def automorphic_numbers(limit: int = 1000) -> list[int]:
    """Automorphic numbers from 1 to ``limit``."""
    return [n for n in range(1, limit + 1) if is_automorphic(n)]


def triple_palindromes(low: int = 11, high: int = 999) -> list[int]:
    """Numbers ``a`` in range whose ``a``, ``a**2`` and ``a**3`` are palindromes."""
    return [
        k
        for k in range(low, high + 1)
        if all(is_palindrome_number(k**p) for p in (1, 2, 3))
    ]