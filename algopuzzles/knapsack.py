"""The 0-1 knapsack problem solved by exhaustive search."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

__all__ = ["Item", "best_value", "best_selection"]


@dataclass(frozen=True)
class Item:
    """A thing that can go in the knapsack."""

    weight: int
    value: int


def _check(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def best_value(items: Sequence[Item], capacity: int = 13) -> int:
    """Largest total value of items whose total weight fits ``capacity``."""
    _check(capacity)

    def search(index: int, room: int) -> int:
        if index == len(items):
            return 0
        best = search(index + 1, room)
        item = items[index]
        if item.value and item.weight <= room:
            best = max(best, item.value + search(index + 1, room - item.weight))
        return best

    return search(0, capacity)


def _selections(
    items: Sequence[Item], start: int, room: int
) -> Iterator[tuple[int, ...]]:
    """Feasible index sets in lexicographic order, growing from the left."""
    for index in range(start, len(items)):
        item = items[index]
        if item.value and item.weight <= room:
            yield (index,)
            for rest in _selections(items, index + 1, room - item.weight):
                yield (index, *rest)


def best_selection(items: Sequence[Item], capacity: int = 13) -> list[Item]:
    """The first selection, by item order, that reaches the best value.

    Returns the chosen items in their original order; empty if nothing fits.
    """
    target = best_value(items, capacity)
    if target == 0:
        return []
    for chosen in _selections(items, 0, capacity):
        if sum(items[i].value for i in chosen) == target:
            return [items[i] for i in chosen]
    return []