"""A sorted singly linked list with an express lane, and a search over it."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from math import isqrt

Reporter = Callable[[str], None]


@dataclass(eq=False)
class SkipNode:
    """One element of a skip list, linked to its successor and its express stop."""

    value: int
    index: int
    next: SkipNode | None = None
    express: SkipNode | None = None


def linear_skip(
    head: SkipNode | None, value: int, report: Reporter | None = None
) -> SkipNode | None:
    """Find the first node holding ``value``, riding the express lane first.

    Every node inspected is described through ``report``, one line each.
    Returns None when the value is absent or the list is empty.
    """
    if head is None:
        return None

    def emit(line: str) -> None:
        if report is not None:
            report(line)

    prev = current = head
    while current.value < value and current.express is not None:
        prev = current
        current = current.express
        emit(f"Value checked at index [{current.index}] = [{current.value}]")

    emit(f"Value found between indexes [{prev.index}] and [{current.index}]")

    while prev.next is not None and prev.value < value:
        emit(f"Value checked at index [{prev.index}] = [{prev.value}]")
        prev = prev.next

    emit(f"Value checked at index [{prev.index}] = [{prev.value}]")
    return prev if prev.value == value else None


class SkipList:
    """A skip list whose express lane stops every ``isqrt(len)`` nodes."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        nodes = [SkipNode(value, index) for index, value in enumerate(values)]
        for node, following in zip(nodes, nodes[1:]):
            node.next = following
        if nodes:
            lane = nodes[:: isqrt(len(nodes))]
            for stop, following in zip(lane, lane[1:]):
                stop.express = following
        self.head: SkipNode | None = nodes[0] if nodes else None
        self._size = len(nodes)

    def _nodes(self) -> Iterator[SkipNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def express_lane(self) -> Iterator[SkipNode]:
        """Yield the nodes met by following the express links from the head."""
        node = self.head
        while node is not None:
            yield node
            node = node.express

    def render(self) -> str:
        """Describe the list and its express lane as text."""
        parts = ["List :\n"]
        parts.extend(f"Index[{node.index}] = [{node.value}]\n" for node in self._nodes())
        parts.append("\nExpress lane :\n")
        parts.extend(f"Index[{node.index}] = [{node.value}]\n" for node in self.express_lane())
        parts.append("\n")
        return "".join(parts)

    def search(self, value: int, report: Reporter | None = None) -> SkipNode | None:
        """Find the first node holding ``value``; see :func:`linear_skip`."""
        return linear_skip(self.head, value, report)