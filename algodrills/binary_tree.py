"""Binary tree nodes, height measurement and a text rendering of trees."""

from __future__ import annotations

from collections.abc import Iterator


class BinaryTreeNode:
    """A node of a binary tree holding an integer and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: BinaryTreeNode | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: BinaryTreeNode | None = None
        self.right: BinaryTreeNode | None = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values of the subtree in in-order sequence."""
        if self.left is not None:
            yield from self.left
        yield self.value
        if self.right is not None:
            yield from self.right

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.value!r})"


def tree_height(tree: BinaryTreeNode | None) -> int:
    """Return the number of edges on the longest path from ``tree`` to a leaf."""
    if tree is None:
        return 0
    left = 1 + tree_height(tree.left) if tree.left is not None else 0
    right = 1 + tree_height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _put(row: list[str], pos: int, char: str) -> None:
    if pos >= len(row):
        row.extend(" " * (pos + 1 - len(row)))
    row[pos] = char


def _layout(node: BinaryTreeNode | None, offset: int, depth: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _layout(node.left, offset, depth + 1, rows)
    right = _layout(node.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(label):
        _put(rows[depth], offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            start = offset + left + width // 2
            for i in range(width + right):
                _put(above, start + i, "-")
        else:
            start = offset - width // 2
            for i in range(left + width):
                _put(above, start + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render_tree(tree: BinaryTreeNode | None) -> str:
    """Draw the tree as text, one line per level, each line ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree_height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    lines = []
    for row in rows:
        lines.append("".join(row).rstrip(" ").ljust(2))
    return "".join(line + "\n" for line in lines)