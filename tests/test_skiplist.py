import pytest

from algodrills.skiplist import SkipList, linear_skip

VALUES = [0, 1, 2, 3, 4, 7, 12, 15, 18, 19, 23, 53, 61, 62, 76, 99]


@pytest.fixture
def skiplist():
    return SkipList(VALUES)


def test_iteration_and_length(skiplist):
    assert list(skiplist) == VALUES
    assert len(skiplist) == len(VALUES)


def test_indexes_follow_positions(skiplist):
    node = skiplist.head
    positions = []
    while node is not None:
        positions.append(node.index)
        node = node.next
    assert positions == list(range(len(VALUES)))


def test_express_lane_stops_every_fourth_node(skiplist):
    lane = list(skiplist.express_lane())
    assert [node.index for node in lane] == list(range(0, len(VALUES), 4))
    assert [node.value for node in lane] == VALUES[::4]
    assert lane[-1].express is None


def test_search_finds_each_value(skiplist):
    for index, value in enumerate(VALUES):
        found = skiplist.search(value)
        assert found.value == value
        assert found.index == index


def test_search_reports_path(skiplist):
    lines = []
    found = skiplist.search(53, lines.append)
    assert found.index == 11
    assert "Value found between indexes [8] and [12]" in lines
    assert lines[-1] == "Value checked at index [11] = [53]"


def test_missing_value_gives_none(skiplist):
    lines = []
    assert skiplist.search(999, lines.append) is None
    assert lines[-1] == f"Value checked at index [15] = [{VALUES[-1]}]"


def test_empty_list():
    empty = SkipList([])
    assert len(empty) == 0
    assert empty.search(3) is None
    assert linear_skip(None, 3) is None
    assert empty.render() == "List :\n\nExpress lane :\n\n"


def test_single_element_list_terminates():
    single = SkipList([5])
    assert single.search(5).index == 0
    assert single.search(9) is None
    assert [node.value for node in single.express_lane()] == [5]


def test_render_lists_nodes_then_lane():
    text = SkipList([10, 20, 30, 40]).render()
    assert text.startswith("List :\nIndex[0] = [10]\n")
    list_part, lane_part = text.split("\nExpress lane :\n")
    assert list_part.count("Index[") == 4
    assert lane_part.count("Index[") == 2
    assert "Index[2] = [30]" in lane_part
    assert text.endswith("\n\n")