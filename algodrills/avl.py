"""Building a balanced search tree from a sorted sequence."""

from __future__ import annotations

from collections.abc import Sequence

from algodrills.binary_tree import BinaryTreeNode


def _build(
    values: Sequence[int], start: int, end: int, parent: BinaryTreeNode | None
) -> BinaryTreeNode | None:
    if start > end:
        return None
    mid = (start + end) // 2
    node = BinaryTreeNode(values[mid], parent)
    node.left = _build(values, start, mid - 1, node)
    node.right = _build(values, mid + 1, end, node)
    return node


def sorted_array_to_avl(values: Sequence[int]) -> BinaryTreeNode | None:
    """Return the root of a height-balanced tree of ``values``, or None if empty."""
    if not values:
        return None
    return _build(values, 0, len(values) - 1, None)