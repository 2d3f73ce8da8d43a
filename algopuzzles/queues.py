"""Queue puzzles: palindrome checking and the sign triangle."""

from collections import deque

__all__ = ["is_palindrome", "sign_triangle"]


def is_palindrome(text: str) -> bool:
    """True if ``text`` reads the same forwards and backwards.

    Characters are taken from the back as from a stack and from the front
    as from a queue, and compared pairwise over half the length.
    """
    stack = list(text)
    queue = deque(text)
    return all(stack.pop() == queue.popleft() for _ in range(len(text) // 2))


def sign_triangle(first_row: str) -> list[str]:
    """Rows of the sign triangle built from ``first_row``.

    Each next row has one symbol fewer: ``+`` under two equal neighbours
    and ``-`` under two different ones.
    """
    queue = deque(first_row)
    rows: list[str] = []
    for length in range(len(first_row), 0, -1):
        row = [queue.popleft() for _ in range(length)]
        rows.append("".join(row))
        queue.extend("+" if a == b else "-" for a, b in zip(row, row[1:]))
    return rows