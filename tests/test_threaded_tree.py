import pytest

from algonotes.threaded_tree import (
    ThreadedNode,
    first_in_order,
    in_order,
    insert_left,
    insert_right,
    last_in_order,
    next_in_order,
    previous_in_order,
    reverse_in_order,
    thread_inorder,
)

VALUES = [1, 2, 3, 4, 5, 6, 7]


@pytest.fixture
def nodes():
    n = {v: ThreadedNode(v) for v in VALUES}
    n[4].left, n[4].right = n[2], n[6]
    n[2].left, n[2].right = n[1], n[3]
    n[6].left, n[6].right = n[5], n[7]
    thread_inorder(n[4])
    return n


def test_in_order_is_sorted(nodes):
    assert list(in_order(nodes[4])) == VALUES


def test_reverse_in_order(nodes):
    assert list(reverse_in_order(nodes[4])) == VALUES[::-1]


def test_end_threads(nodes):
    first = first_in_order(nodes[4])
    last = last_in_order(nodes[4])
    assert first is nodes[1]
    assert last is nodes[7]
    assert first.left is None and first.left_thread
    assert last.right is None and last.right_thread


def test_neighbours(nodes):
    assert next_in_order(nodes[3]) is nodes[4]
    assert next_in_order(nodes[4]) is nodes[5]
    assert previous_in_order(nodes[5]) is nodes[4]
    assert previous_in_order(nodes[4]) is nodes[3]
    assert next_in_order(nodes[7]) is None


def test_insert_left_on_inner_node(nodes):
    insert_left(nodes[4], ThreadedNode(10))
    assert list(in_order(nodes[4])) == [1, 2, 3, 10, 4, 5, 6, 7]
    assert list(reverse_in_order(nodes[4])) == [7, 6, 5, 4, 10, 3, 2, 1]


def test_insert_right_on_inner_node(nodes):
    insert_right(nodes[2], ThreadedNode(20))
    assert list(in_order(nodes[4])) == [1, 2, 20, 3, 4, 5, 6, 7]
    assert list(reverse_in_order(nodes[4])) == [7, 6, 5, 4, 3, 20, 2, 1]


def test_insert_on_leaves(nodes):
    insert_left(nodes[1], ThreadedNode(0))
    insert_right(nodes[7], ThreadedNode(8))
    assert list(in_order(nodes[4])) == [0, *VALUES, 8]
    assert first_in_order(nodes[4]).value == 0
    assert last_in_order(nodes[4]).value == 8


def test_empty_tree():
    assert thread_inorder(None) is None
    assert list(in_order(None)) == []


def test_single_node():
    root = thread_inorder(ThreadedNode(5))
    assert list(in_order(root)) == [5]
    assert next_in_order(root) is None and previous_in_order(root) is None