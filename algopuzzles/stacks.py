"""Stack-flavoured puzzles: reversal, base conversion, brackets, a recursion
unrolled and addition of arbitrarily long integers."""

from collections.abc import MutableSequence
from itertools import zip_longest
from typing import TypeVar

__all__ = [
    "reverse_in_place",
    "binary_to_octal",
    "brackets_match",
    "halving_product",
    "add_big",
]

T = TypeVar("T")

_PAIRS = {"(": ")", "[": "]"}


def reverse_in_place(items: MutableSequence[T]) -> MutableSequence[T]:
    """Reverse ``items`` within its own storage by swapping ends; return it."""
    low, high = 0, len(items) - 1
    while low < high:
        items[low], items[high] = items[high], items[low]
        low += 1
        high -= 1
    return items


def binary_to_octal(bits: str) -> str:
    """Octal digits of a binary string, ignoring anything but 0 and 1.

    Bits are grouped in threes from the right; leading zero groups are kept.
    """
    digits = "".join(ch for ch in bits if ch in "01")
    if not digits:
        return ""
    padded = digits.zfill(-(-len(digits) // 3) * 3)
    groups = zip(*[iter(padded)] * 3)
    return "".join(str(int("".join(group), 2)) for group in groups)


def brackets_match(text: str) -> bool:
    """True if every character pairs off as nested ``()`` and ``[]``.

    Each character is compared with the top of the stack; a closing bracket
    that matches removes it, anything else is pushed.
    """
    stack: list[str] = []
    for ch in text:
        if stack and _PAIRS.get(stack[-1]) == ch:
            stack.pop()
        else:
            stack.append(ch)
    return not stack


def halving_product(n: int) -> int:
    """f(0) = 1 and f(n) = n * f(n // 2), computed with an explicit stack."""
    if n < 0:
        raise ValueError("n must not be negative")
    stack: list[int] = []
    while n:
        stack.append(n)
        n //= 2
    result = 1
    while stack:
        result *= stack.pop()
    return result


def add_big(a: str, b: str) -> str:
    """Sum of two non-negative decimal strings of any length, digit by digit."""
    for number in (a, b):
        if number and not (number.isascii() and number.isdigit()):
            raise ValueError(f"not a decimal number: {number!r}")
    result: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, digit = divmod(int(x) + int(y) + carry, 10)
        result.append(str(digit))
    if carry:
        result.append("1")
    return "".join(reversed(result))