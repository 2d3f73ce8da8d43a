"""Binary trees read in preorder, with depth and completeness checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["TreeNode", "parse_preorder", "tree_depth", "is_complete"]

_EMPTY = "#"


@dataclass
class TreeNode:
    """A node holding one character and two optional children."""

    value: str
    left: TreeNode | None = None
    right: TreeNode | None = None


def _build(chars: Iterator[str]) -> TreeNode | None:
    ch = next(chars, None)
    if ch is None:
        raise ValueError("preorder text ends before the tree is complete")
    if ch == _EMPTY:
        return None
    node = TreeNode(ch)
    node.left = _build(chars)
    node.right = _build(chars)
    return node


def parse_preorder(text: str) -> TreeNode | None:
    """Build a tree from its preorder listing, ``#`` marking an empty subtree.

    Characters after the tree is complete are ignored.
    """
    return _build(iter(text))


def tree_depth(root: TreeNode | None) -> int:
    """Number of levels in the tree; an empty tree has none."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [child for node in level for child in (node.left, node.right) if child]
    return depth


def is_complete(root: TreeNode | None) -> bool:
    """True if every level but the last is full and the last is filled from the left."""
    queue: deque[TreeNode | None] = deque([root])
    seen_gap = False
    while queue:
        node = queue.popleft()
        if node is None:
            seen_gap = True
            continue
        if seen_gap:
            return False
        queue.append(node.left)
        queue.append(node.right)
    return True