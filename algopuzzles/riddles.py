"""Word problems: the diners in the manuscript, the fishermen and the contest ranks."""

from collections.abc import Sequence
from itertools import product

__all__ = ["marx_diners", "fishermen", "dense_ranks"]

_PEOPLE = 30
_SHILLINGS = 50
_FISHERMEN = 5
_SEARCH_LIMIT = 10000


def marx_diners() -> list[tuple[int, int, int]]:
    """Groups ``(men, women, children)`` of 30 people, each at least one,
    who spend 50 shillings at 3, 2 and 1 shilling a head."""
    counts = range(1, _PEOPLE)
    return [
        (men, women, children)
        for men, women, children in product(counts, counts, counts)
        if men + women + children == _PEOPLE
        and 3 * men + 2 * women + children == _SHILLINGS
    ]


def fishermen() -> int | None:
    """Fewest fish five fishermen could have caught if each in turn threw one
    away and took a fifth of the rest."""
    for n in range(1, _SEARCH_LIMIT):
        fish = 5 * n + 1
        for _ in range(_FISHERMEN - 1):
            if (fish * 5) % 4:
                break
            fish = fish * 5 // 4 + 1
        else:
            return fish
    return None


def dense_ranks(scores: Sequence[int]) -> list[int]:
    """Rank of each score in its original order; the lowest score ranks 1,
    equal scores share a rank and ranks have no gaps."""
    ranking = {score: rank for rank, score in enumerate(sorted(set(scores)), 1)}
    return [ranking[score] for score in scores]