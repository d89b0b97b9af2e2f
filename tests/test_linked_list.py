import pytest

from drillbook.linked_list import ListNode, delete_node, remove_nth_from_end


def _nodes(head):
    node = head
    while node is not None:
        yield node
        node = node.next


def test_from_values_round_trip():
    values = [3, 1, 4, 1, 5]
    head = ListNode.from_values(values)
    assert list(head) == values


def test_from_values_empty_is_none():
    assert ListNode.from_values([]) is None


def test_from_values_links_in_order():
    head = ListNode.from_values(range(4))
    assert [node.val for node in _nodes(head)] == [0, 1, 2, 3]
    assert list(_nodes(head))[-1].next is None


def test_delete_node_example():
    head = ListNode.from_values([4, 5, 1, 9])
    delete_node(head.next)
    assert list(head) == [4, 1, 9]


def test_delete_node_keeps_head_identity():
    head = ListNode.from_values([7, 8])
    delete_node(head)
    assert list(head) == [8]
    assert head.next is None


def test_delete_last_node_raises():
    head = ListNode.from_values([1, 2])
    with pytest.raises(ValueError):
        delete_node(head.next)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_remove_nth_from_end_drops_right_element(n):
    values = [10, 20, 30, 40, 50]
    head = ListNode.from_values(values)
    result = remove_nth_from_end(head, n)
    expected = values[: len(values) - n] + values[len(values) - n + 1 :]
    assert list(result) == expected
    assert len(list(result)) == len(values) - 1


def test_remove_nth_from_end_head_returns_second_node():
    head = ListNode.from_values([1, 2, 3])
    second = head.next
    assert remove_nth_from_end(head, 3) is second


def test_remove_only_node_gives_empty_list():
    head = ListNode.from_values([1])
    assert remove_nth_from_end(head, 1) is None


def test_remove_nth_from_end_keeps_head_when_not_first():
    head = ListNode.from_values([1, 2, 3])
    assert remove_nth_from_end(head, 1) is head


@pytest.mark.parametrize("n", [0, -1, 4])
def test_remove_nth_from_end_rejects_bad_n(n):
    head = ListNode.from_values([1, 2, 3])
    with pytest.raises(ValueError):
        remove_nth_from_end(head, n)


def test_remove_from_empty_list_raises():
    with pytest.raises(ValueError):
        remove_nth_from_end(None, 1)