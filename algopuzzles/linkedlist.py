"""A singly linked list of values with in-place sorting and merging."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["LinkedList"]


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """A chain of nodes that keeps its values in insertion order."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def sort(self) -> None:
        """Sort the values in ascending order, keeping the nodes in place."""
        ordered = sorted(self)
        for node, value in zip(self._nodes(), ordered):
            node.value = value

    def merge(self, other: LinkedList) -> None:
        """Merge the nodes of ``other`` into this list.

        Both lists must already be in non-decreasing order; the result is too.
        Values of ``other`` go before equal values of this list, and ``other``
        is left empty.
        """
        if other is self:
            raise ValueError("cannot merge a list into itself")
        anchor = _Node(None)
        cursor = anchor
        mine, theirs = self._head, other._head
        while mine is not None and theirs is not None:
            if theirs.value <= mine.value:
                cursor.next, theirs = theirs, theirs.next
            else:
                cursor.next, mine = mine, mine.next
            cursor = cursor.next
        cursor.next = mine if mine is not None else theirs
        while cursor.next is not None:
            cursor = cursor.next
        self._head = anchor.next
        self._tail = cursor if self._head is not None else None
        self._size += other._size
        other._head = other._tail = None
        other._size = 0

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"