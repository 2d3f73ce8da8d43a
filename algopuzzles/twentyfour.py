"""The game of 24: combine four numbers with + - * / and brackets."""

from collections.abc import Callable, Sequence
from fractions import Fraction
from itertools import permutations, product
from operator import add, mul, sub

__all__ = ["solve_24", "solve_24_any_order"]

_TARGET = 24
_LOW, _HIGH = 1, 50

Value = Fraction | None


def _div(x: Fraction, y: Fraction) -> Value:
    return None if y == 0 else x / y


_OPERATIONS: dict[str, Callable[[Fraction, Fraction], Value]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": _div,
}


def _apply(symbol: str, x: Value, y: Value) -> Value:
    if x is None or y is None:
        return None
    return _OPERATIONS[symbol](x, y)


# Each bracketing: a template for the text and how to evaluate it.
_SHAPES: tuple[tuple[str, Callable[..., Value]], ...] = (
    (
        "(({a}{p}{b}){q}{c}){r}{d}",
        lambda a, b, c, d, p, q, r: _apply(r, _apply(q, _apply(p, a, b), c), d),
    ),
    (
        "({a}{p}({b}{q}{c})){r}{d}",
        lambda a, b, c, d, p, q, r: _apply(r, _apply(p, a, _apply(q, b, c)), d),
    ),
    (
        "{a}{p}({b}{q}({c}{r}{d}))",
        lambda a, b, c, d, p, q, r: _apply(p, a, _apply(q, b, _apply(r, c, d))),
    ),
    (
        "{a}{p}(({b}{q}{c}){r}{d})",
        lambda a, b, c, d, p, q, r: _apply(p, a, _apply(r, _apply(q, b, c), d)),
    ),
    (
        "({a}{p}{b}){q}({c}{r}{d})",
        lambda a, b, c, d, p, q, r: _apply(q, _apply(p, a, b), _apply(r, c, d)),
    ),
)


def _check(numbers: Sequence[int]) -> None:
    for number in numbers:
        if not _LOW <= number <= _HIGH:
            raise ValueError(f"numbers must lie between {_LOW} and {_HIGH}: {number}")


def solve_24(a: int, b: int, c: int, d: int) -> list[str]:
    """Every expression over ``a, b, c, d`` in this order that makes 24.

    Operators run over ``+ - * /`` for each gap and all five bracketings are
    tried; a division by zero rules an expression out.
    """
    _check((a, b, c, d))
    values = [Fraction(n) for n in (a, b, c, d)]
    found: list[str] = []
    for p, q, r in product(_OPERATIONS, repeat=3):
        for template, evaluate in _SHAPES:
            if evaluate(*values, p, q, r) == _TARGET:
                found.append(template.format(a=a, b=b, c=c, d=d, p=p, q=q, r=r))
    return found


def solve_24_any_order(
    numbers: Sequence[int],
) -> list[tuple[tuple[int, ...], list[str]]]:
    """Solutions for every ordering of four numbers that has at least one.

    Orderings are taken by position, so repeated numbers give repeated orderings.
    """
    if len(numbers) != 4:
        raise ValueError(f"expected 4 numbers, got {len(numbers)}")
    _check(numbers)
    results: list[tuple[tuple[int, ...], list[str]]] = []
    for ordering in permutations(numbers):
        expressions = solve_24(*ordering)
        if expressions:
            results.append((ordering, expressions))
    return results