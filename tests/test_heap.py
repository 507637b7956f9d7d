import pytest

from algodrills.heap import MaxHeap, heap_insert


def _check_heap(node):
    if node is None:
        return
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
            assert child.value <= node.value
            _check_heap(child)


def test_insert_into_empty_returns_new_root():
    root, node = heap_insert(None, 5)
    assert root is node
    assert root.value == 5
    assert root.parent is None


def test_sample_sequence():
    heap = MaxHeap()
    reported = [heap.insert(v).value for v in (98, 110, 43)]
    assert reported == [98, 98, 43]
    assert heap.root.value == 110
    assert list(heap) == [110, 98, 43]
    assert len(heap) == 3


@pytest.mark.parametrize(
    "values",
    [
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10],
        [10, 9, 8, 7, 6, 5, 4, 3, 2, 1],
        [5, 5, 5, 1, 9, 3, 9, 0, -4, 12, 7],
    ],
)
def test_heap_property_and_contents(values):
    heap = MaxHeap()
    for v in values:
        heap.insert(v)
    _check_heap(heap.root)
    assert sorted(heap) == sorted(values)
    assert heap.root.value == max(values)
    assert len(heap) == len(values)


def test_empty_heap_iterates_nothing():
    heap = MaxHeap()
    assert list(heap) == []
    assert len(heap) == 0