"""Insertion into a max binary heap built from linked tree nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from algodrills.binary_tree import BinaryTreeNode


def _sift_up(node: BinaryTreeNode) -> None:
    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent


def heap_insert(
    root: BinaryTreeNode | None, value: int
) -> tuple[BinaryTreeNode, BinaryTreeNode]:
    """Insert ``value`` into the heap rooted at ``root``.

    Returns ``(root, node)`` where ``node`` is the node that was created; after
    sifting up it may hold a different value than the one inserted.
    """
    new_node = BinaryTreeNode(value)
    if root is None:
        return new_node, new_node

    queue = deque([root])
    while queue:
        parent = queue.popleft()
        if parent.left is None:
            parent.left = new_node
            break
        if parent.right is None:
            parent.right = new_node
            break
        queue.append(parent.left)
        queue.append(parent.right)
    new_node.parent = parent

    _sift_up(new_node)
    return root, new_node


class MaxHeap:
    """A max heap stored as a complete binary tree of linked nodes."""

    def __init__(self) -> None:
        self.root: BinaryTreeNode | None = None
        self._size = 0

    def insert(self, value: int) -> BinaryTreeNode:
        """Insert ``value`` and return the node created for it."""
        self.root, node = heap_insert(self.root, value)
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Yield the values in level order."""
        if self.root is None:
            return
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            yield node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)