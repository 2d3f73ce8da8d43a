"""A list that moves often-visited values towards its front."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

__all__ = ["FrequencyList"]


@dataclass(slots=True)
class _Entry:
    value: Any
    freq: int = 0


class FrequencyList:
    """Values kept in non-increasing order of how often they were visited."""

    def __init__(self, values: Iterable[Any]) -> None:
        self._entries = [_Entry(value) for value in values]

    def visit(self, value: Any) -> int:
        """Count a visit to the first entry holding ``value`` and move it
        ahead of every entry visited less often. Returns its new count."""
        for index, entry in enumerate(self._entries):
            if entry.value == value:
                break
        else:
            raise KeyError(value)
        entry.freq += 1
        entries = self._entries
        while index > 0 and entry.freq > entries[index - 1].freq:
            entries[index - 1], entries[index] = entries[index], entries[index - 1]
            index -= 1
        return entry.freq

    def items(self) -> list[tuple[Any, int]]:
        """Pairs ``(value, visits)`` from the front of the list to the back."""
        return [(entry.value, entry.freq) for entry in self._entries]