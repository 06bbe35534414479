import pytest
from hypothesis import given, strategies as st

from libft.linkedlist import LinkedList, Node


def _build(values):
    lst = LinkedList()
    for value in values:
        lst.push_back(Node(value))
    return lst


def test_new_node_has_no_next():
    node = Node("x")
    assert node.content == "x"
    assert node.next is None


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_back_keeps_order():
    lst = _build([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList()
    for value in ["a", "b", "c"]:
        lst.push_front(Node(value))
    assert list(lst) == ["c", "b", "a"]


def test_push_none_is_ignored():
    lst = _build([1])
    lst.push_back(None)
    lst.push_front(None)
    assert list(lst) == [1]


def test_last_returns_final_node():
    lst = _build([1, 2])
    tail = Node(3)
    lst.push_back(tail)
    assert lst.last() is tail


def test_release_calls_delete_and_detaches():
    seen = []
    first = Node("a", Node("b"))
    first.release(seen.append)
    assert seen == ["a"]
    assert first.next is None


def test_release_without_delete_does_nothing():
    second = Node("b")
    first = Node("a", second)
    first.release(None)
    assert first.next is second


def test_clear_deletes_every_value_in_order():
    seen = []
    lst = _build([1, 2, 3])
    lst.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_keeps_list():
    lst = _build([1, 2])
    lst.clear(None)
    assert list(lst) == [1, 2]


def test_for_each_visits_in_order():
    seen = []
    lst = _build(["x", "y"])
    lst.for_each(seen.append)
    assert seen == ["x", "y"]


def test_for_each_none_leaves_list():
    lst = _build([5])
    lst.for_each(None)
    assert list(lst) == [5]


def test_map_builds_new_list():
    lst = _build([1, 2, 3])
    mapped = lst.map(lambda v: v * 10, lambda v: None)
    assert list(mapped) == [10, 20, 30]
    assert list(lst) == [1, 2, 3]


@pytest.mark.parametrize("func, delete", [(None, print), (str, None), (None, None)])
def test_map_missing_callable_gives_empty(func, delete):
    lst = _build([1, 2])
    assert len(lst.map(func, delete)) == 0


def test_map_failure_releases_partial_results():
    released = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value

    lst = _build([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        lst.map(func, released.append)
    assert released == [1, 2]


@given(st.lists(st.integers()))
def test_len_and_iteration_match_input(values):
    lst = _build(values)
    assert len(lst) == len(values)
    assert list(lst) == values
    tail = lst.last()
    if values:
        assert tail.content == values[-1]
    else:
        assert tail is None


@given(st.lists(st.text()))
def test_map_identity_round_trip(values):
    lst = _build(values)
    assert list(lst.map(lambda v: v, lambda v: None)) == values