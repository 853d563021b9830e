import pytest
from hypothesis import given
from hypothesis import strategies as st

from utilkit.compare import compare_int
from utilkit.doubly_linked_list import DoublyLinkedList, DoublyLinkedNode


def backwards(dll):
    out = []
    node = dll.tail
    while node is not None:
        out.append(node.data)
        node = node.prev
    return out


@given(st.lists(st.integers()))
def test_construction_round_trip(items):
    dll = DoublyLinkedList(items)
    assert list(dll) == items
    assert len(dll) == len(items)
    assert backwards(dll) == items[::-1]


@given(st.lists(st.integers()))
def test_add_head_reverses(items):
    dll = DoublyLinkedList()
    for item in items:
        dll.add_head(item)
    assert list(dll) == items[::-1]
    assert backwards(dll) == items


@given(st.lists(st.integers(), min_size=1))
def test_node_at_matches_index(items):
    dll = DoublyLinkedList(items)
    assert [dll.node_at(i).data for i in range(len(items))] == items


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_node_at_out_of_range(index):
    dll = DoublyLinkedList(["a", "b", "c"])
    with pytest.raises(IndexError):
        dll.node_at(index)


def test_add_returns_node_holding_data():
    dll = DoublyLinkedList()
    node = dll.add_tail("x")
    assert isinstance(node, DoublyLinkedNode)
    assert node.data == "x"
    assert dll.head is node and dll.tail is node


@pytest.mark.parametrize("index", [0, 2, 4])
def test_remove_keeps_links(index):
    items = ["a", "b", "c", "d", "e"]
    dll = DoublyLinkedList(items)
    node = dll.node_at(index)
    assert dll.remove(node) == items[index]
    expected = items[:index] + items[index + 1 :]
    assert list(dll) == expected
    assert backwards(dll) == expected[::-1]
    assert len(dll) == len(expected)


def test_remove_last_node_empties_list():
    dll = DoublyLinkedList(["only"])
    dll.remove(dll.head)
    assert dll.head is None and dll.tail is None
    assert len(dll) == 0


def test_remove_foreign_node_raises():
    first = DoublyLinkedList(["a"])
    second = DoublyLinkedList(["a"])
    with pytest.raises(ValueError):
        second.remove(first.head)


def test_remove_twice_raises():
    dll = DoublyLinkedList(["a", "b"])
    node = dll.head
    dll.remove(node)
    with pytest.raises(ValueError):
        dll.remove(node)


def test_insert_before_none_appends():
    dll = DoublyLinkedList(["a", "b"])
    node = dll.insert_before(None, "c")
    assert list(dll) == ["a", "b", "c"]
    assert dll.tail is node


def test_insert_before_node():
    dll = DoublyLinkedList(["a", "c"])
    dll.insert_before(dll.node_at(1), "b")
    dll.insert_before(dll.head, "start")
    assert list(dll) == ["start", "a", "b", "c"]
    assert backwards(dll) == ["c", "b", "a", "start"]


def test_insert_before_foreign_node_raises():
    other = DoublyLinkedList(["z"])
    dll = DoublyLinkedList(["a"])
    with pytest.raises(ValueError):
        dll.insert_before(other.head, "b")


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_insert_sorted_keeps_order(items):
    dll = DoublyLinkedList()
    for item in items:
        dll.insert_sorted(item, compare_int)
    assert list(dll) == sorted(items)
    assert backwards(dll) == sorted(items, reverse=True)


def test_find_returns_node_or_none():
    dll = DoublyLinkedList(["a", "b", "b"])
    found = dll.find("b")
    assert found is dll.node_at(1)
    assert dll.find("z") is None


def test_find_with_compare():
    dll = DoublyLinkedList([(1, "one"), (2, "two")])
    node = dll.find(2, lambda item, key: item[0] - key)
    assert node.data == (2, "two")


def test_clear_empties_and_detaches():
    dll = DoublyLinkedList([1, 2, 3])
    node = dll.head
    dll.clear()
    assert list(dll) == []
    assert len(dll) == 0
    with pytest.raises(ValueError):
        dll.remove(node)


def test_nodes_survive_removal_during_iteration():
    dll = DoublyLinkedList([1, 2, 3, 4])
    for node in dll.nodes():
        if node.data % 2 == 0:
            dll.remove(node)
    assert list(dll) == [1, 3]