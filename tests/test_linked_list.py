import pytest

from algodrills.linked_list import LinkedList, ListNode, has_cycle


def test_append_keeps_order():
    lst = LinkedList([0, 1, 2, 3, 4, 98, 402, 1024])
    assert list(lst) == [0, 1, 2, 3, 4, 98, 402, 1024]
    assert len(lst) == 8


def test_prepend_builds_reversed():
    lst = LinkedList()
    for v in (0, 1, 2, 3, 4, 98, 402, 1024):
        lst.prepend(v)
    assert list(lst) == [1024, 402, 98, 4, 3, 2, 1, 0]


def test_insert_sorted_sample():
    lst = LinkedList([0, 1, 2, 3, 4, 98, 402, 1024])
    node = lst.insert_sorted(27)
    assert node.value == 27
    assert list(lst) == [0, 1, 2, 3, 4, 27, 98, 402, 1024]


@pytest.mark.parametrize(
    "start, number",
    [([], 5), ([3, 7], 1), ([3, 7], 9), ([1, 2, 2, 4], 2), ([5], 5)],
)
def test_insert_sorted_keeps_sorted(start, number):
    lst = LinkedList(start)
    lst.insert_sorted(number)
    assert list(lst) == sorted(start + [number])


def test_insert_before_head_becomes_head():
    lst = LinkedList([10, 20])
    node = lst.insert_sorted(5)
    assert lst.head is node


def test_palindrome_sample():
    lst = LinkedList([1, 17, 972, 50, 98, 98, 50, 972, 17, 1])
    assert lst.is_palindrome() is True


@pytest.mark.parametrize(
    "values, expected",
    [([], True), ([1], True), ([1, 2, 1], True), ([1, 2], False), ([1, 2, 3, 1], False)],
)
def test_palindrome_cases(values, expected):
    assert LinkedList(values).is_palindrome() is expected


def test_cycle_detection_sample():
    lst = LinkedList()
    for v in (0, 1, 2, 3, 4, 98, 402, 1024):
        lst.prepend(v)
    assert lst.has_cycle() is False

    current = lst.head
    for _ in range(4):
        current = current.next
    saved = current.next
    current.next = lst.head
    assert lst.has_cycle() is True

    current.next = saved
    assert lst.has_cycle() is False
    assert len(lst) == 8


def test_has_cycle_edge_cases():
    assert has_cycle(None) is False
    assert has_cycle(ListNode(1)) is False
    loop = ListNode(1)
    loop.next = loop
    assert has_cycle(loop) is True