"""A singly linked list of integers with sorted insertion and checks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """One element of a singly linked list."""

    value: int
    next: ListNode | None = None


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` links from ``head`` ever loops."""
    if head is None or head.next is None:
        return False
    slow: ListNode = head
    fast: ListNode | None = head.next
    while fast is not None and fast.next is not None:
        if slow is fast:
            return True
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    return False


class LinkedList:
    """A singly linked list; iteration and length assume it has no cycle."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: ListNode | None = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: int) -> ListNode:
        """Add ``value`` at the end and return its node."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
        else:
            last = self.head
            while last.next is not None:
                last = last.next
            last.next = node
        return node

    def prepend(self, value: int) -> ListNode:
        """Add ``value`` at the front and return its node."""
        self.head = ListNode(value, self.head)
        return self.head

    def insert_sorted(self, number: int) -> ListNode:
        """Insert ``number`` into an ascending list, keeping it sorted."""
        if self.head is None or number < self.head.value:
            return self.prepend(number)
        current = self.head
        while current.next is not None and current.next.value < number:
            current = current.next
        node = ListNode(number, current.next)
        current.next = node
        return node

    def is_palindrome(self) -> bool:
        """Tell whether the values read the same in both directions."""
        values = list(self)
        return values == values[::-1]

    def has_cycle(self) -> bool:
        """Tell whether the list loops back on itself."""
        return has_cycle(self.head)

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())