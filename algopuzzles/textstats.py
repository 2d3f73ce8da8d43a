"""Character statistics and simple parsing of typed-in text."""

from dataclasses import dataclass

__all__ = [
    "WhitespaceCounts",
    "count_whitespace",
    "ascii_codes",
    "read_integers",
    "reverse_until",
]


@dataclass(frozen=True)
class WhitespaceCounts:
    """Number of spaces, tabs and newlines seen in a piece of text."""

    spaces: int = 0
    tabs: int = 0
    newlines: int = 0


def _before(text: str, stop: str | None) -> str:
    if stop is None:
        return text
    return text.partition(stop)[0]


def count_whitespace(text: str, stop: str | None = "A") -> WhitespaceCounts:
    """Count spaces, tabs and newlines in ``text`` up to the first ``stop``."""
    body = _before(text, stop)
    return WhitespaceCounts(
        spaces=body.count(" "),
        tabs=body.count("\t"),
        newlines=body.count("\n"),
    )


def ascii_codes(text: str, stop: str | None = "A") -> list[tuple[str, int]]:
    """Pair every character with its code, up to and including ``stop``."""
    pairs: list[tuple[str, int]] = []
    for ch in text:
        pairs.append((ch, ord(ch)))
        if ch == stop:
            break
    return pairs


def read_integers(text: str, count: int) -> list[int]:
    """Read the first ``count`` whitespace-separated integers from ``text``."""
    if count < 0:
        raise ValueError("count must not be negative")
    tokens = text.split()
    if len(tokens) < count:
        raise ValueError(f"expected {count} integers, found {len(tokens)}")
    try:
        return [int(token) for token in tokens[:count]]
    except ValueError as exc:
        raise ValueError(f"not an integer: {exc}") from None


def reverse_until(text: str, terminator: str = "#") -> str:
    """Return the characters before ``terminator`` in reverse order."""
    return _before(text, terminator)[::-1]