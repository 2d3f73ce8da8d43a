"""The Josephus circle in which each removed person's password sets the next count."""

from collections.abc import Sequence

__all__ = ["josephus"]


def josephus(passwords: Sequence[int], first_limit: int) -> tuple[list[int], int]:
    """Play the circle of people numbered 1 to ``len(passwords)``.

    Counting starts at person 1; whoever says ``first_limit`` leaves and
    their password becomes the next limit, counting on from the next person.
    Returns the numbers in the order they left and the number of the last one.
    """
    if not passwords:
        raise ValueError("the circle needs at least one person")
    circle = list(enumerate(passwords, 1))
    order: list[int] = []
    limit = first_limit
    position = 0
    while len(circle) > 1:
        position = (position + max(limit - 1, 0)) % len(circle)
        number, limit = circle.pop(position)
        order.append(number)
        position %= len(circle)
    return order, circle[0][0]