"""Puzzles solved by trying every candidate: balls, fowls, digits, weddings, liars."""

from itertools import permutations, product

from algopuzzles.digits import reverse_digits

__all__ = [
    "ball_combinations",
    "hundred_fowls",
    "reverse_multiples",
    "wedding_pairs",
    "liars",
]

_RED, _YELLOW, _GREEN = 3, 3, 6
_DRAWN = 8


def ball_combinations() -> list[tuple[int, int, int]]:
    """Colour mixes ``(red, yellow, green)`` of 8 balls drawn from 3 red,
    3 yellow and 6 green ones."""
    return [
        (red, yellow, green)
        for red, yellow, green in product(
            range(_RED + 1), range(_YELLOW + 1), range(_GREEN + 1)
        )
        if red + yellow + green == _DRAWN
    ]


def hundred_fowls() -> list[tuple[int, int, int]]:
    """Ways ``(cocks, hens, chicks)`` to buy 100 fowls for 100 coins.

    A cock costs 5, a hen 3, and three chicks cost 1.
    """
    plans: list[tuple[int, int, int]] = []
    for cocks in range(101):
        for hens in range(101 - cocks):
            chicks = 100 - cocks - hens
            if chicks % 3 == 0 and 5 * cocks + 3 * hens + chicks // 3 == 100:
                plans.append((cocks, hens, chicks))
    return plans


def _distinct_digits(number: int, multiplier: int) -> bool:
    digits = [int(d) for d in str(number)] + [multiplier]
    return len(set(digits)) == len(digits)


def reverse_multiples() -> list[tuple[int, int, int]]:
    """Solutions of ABCD * E = DCBA with five different digits.

    Returns ``(ABCD, E, DCBA)`` triples.
    """
    return [
        (number, multiplier, number * multiplier)
        for number in range(1000, 10000)
        for multiplier in range(1, 10)
        if number * multiplier == reverse_digits(number)
        and _distinct_digits(number, multiplier)
    ]


def wedding_pairs() -> list[dict[str, str]]:
    """Marriages of grooms A, B, C to brides X, Y, Z where all three claims
    "A marries X", "X marries C" and "C marries Z" are false."""
    matches: list[dict[str, str]] = []
    for brides in permutations("XYZ"):
        couples = dict(zip("ABC", brides))
        if couples["A"] == "X" or couples["C"] in ("X", "Z"):
            continue
        matches.append(couples)
    return matches


def liars() -> list[tuple[bool, bool, bool]]:
    """Truth values for three suspects where the first says the second lies,
    the second says the third lies, and the third says both others lie."""
    return [
        (a, b, c)
        for a, b, c in product((False, True), repeat=3)
        if a != b and b != c and c == (not a and not b)
    ]