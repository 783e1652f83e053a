import pytest

from pushswap.linked_list import LinkedList, ListNode


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.last() is None


def test_append_keeps_order():
    items = LinkedList()
    items.append("a")
    items.append("b")
    items.append("c")
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_prepend_puts_in_front():
    items = LinkedList([2, 3])
    items.prepend(1)
    assert list(items) == [1, 2, 3]
    assert items.head.content == 1


def test_prepend_on_empty_sets_last():
    items = LinkedList()
    node = items.prepend("x")
    assert items.last() is node
    assert list(items) == ["x"]


def test_last_returns_tail_node():
    items = LinkedList(["hello", "Hello1"])
    last = items.last()
    assert isinstance(last, ListNode)
    assert last.content == "Hello1"
    assert last.next is None


def test_append_after_prepend_goes_to_end():
    items = LinkedList()
    items.prepend(2)
    items.append(3)
    items.prepend(1)
    assert list(items) == [1, 2, 3]
    assert items.last().content == 3


def test_size_counts_nodes():
    items = LinkedList(["hello", "hello"])
    assert len(items) == 2


def test_clear_calls_delete_in_order_and_empties():
    deleted = []
    items = LinkedList([1, 2, 3])
    items.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(items) == 0
    assert list(items) == []
    assert items.last() is None


def test_clear_without_delete():
    items = LinkedList([1, 2])
    items.clear()
    assert len(items) == 0


def test_for_each_visits_every_content():
    seen = []
    items = LinkedList(["a", "b"])
    items.for_each(seen.append)
    assert seen == ["a", "b"]


def test_map_returns_new_list_and_leaves_original():
    items = LinkedList([1, 2, 3])
    doubled = items.map(lambda x: x * 2)
    assert list(doubled) == [x * 2 for x in items]
    assert list(items) == [1, 2, 3]
    assert len(doubled) == len(items)


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return x + 10

    items = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        items.map(func, deleted.append)
    assert deleted == [11, 12]


def test_nodes_are_linked():
    items = LinkedList([1, 2])
    assert items.head.next is items.last()