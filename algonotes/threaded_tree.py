"""In-order threaded binary trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ThreadedNode:
    """A node whose empty links may be threads to its in-order neighbours."""

    value: int
    left: ThreadedNode | None = None
    right: ThreadedNode | None = None
    left_thread: bool = False
    right_thread: bool = False

    def __repr__(self) -> str:
        return f"ThreadedNode({self.value!r})"


def _plain_inorder(node: ThreadedNode | None) -> list[ThreadedNode]:
    if node is None:
        return []
    return [*_plain_inorder(node.left), node, *_plain_inorder(node.right)]


def thread_inorder(root: ThreadedNode | None) -> ThreadedNode | None:
    """Turn the empty links of a plain tree into in-order threads and return the root.

    The first node's left thread and the last node's right thread are None.
    """
    previous: ThreadedNode | None = None
    for node in _plain_inorder(root):
        if node.left is None:
            node.left = previous
            node.left_thread = True
        if previous is not None and previous.right is None:
            previous.right = node
            previous.right_thread = True
        previous = node
    if previous is not None:
        previous.right = None
        previous.right_thread = True
    return root


def first_in_order(node: ThreadedNode) -> ThreadedNode:
    """The first node in order within the subtree of node."""
    while not node.left_thread:
        node = node.left
    return node


def last_in_order(node: ThreadedNode) -> ThreadedNode:
    """The last node in order within the subtree of node."""
    while not node.right_thread:
        node = node.right
    return node


def next_in_order(node: ThreadedNode) -> ThreadedNode | None:
    """The in-order successor of node, or None."""
    if node.right_thread:
        return node.right
    return first_in_order(node.right)


def previous_in_order(node: ThreadedNode) -> ThreadedNode | None:
    """The in-order predecessor of node, or None."""
    if node.left_thread:
        return node.left
    return last_in_order(node.left)


def insert_left(node: ThreadedNode, new: ThreadedNode) -> None:
    """Insert new as node's left child, placing it just before node in order."""
    new.left = node.left
    new.left_thread = node.left_thread
    new.right = node
    new.right_thread = True
    node.left = new
    node.left_thread = False
    if not new.left_thread:
        last_in_order(new.left).right = new


def insert_right(node: ThreadedNode, new: ThreadedNode) -> None:
    """Insert new as node's right child, placing it just after node in order."""
    new.right = node.right
    new.right_thread = node.right_thread
    new.left = node
    new.left_thread = True
    node.right = new
    node.right_thread = False
    if not new.right_thread:
        first_in_order(new.right).left = new


def in_order(root: ThreadedNode | None) -> Iterator[int]:
    """Values of a threaded tree in order."""
    node = first_in_order(root) if root is not None else None
    while node is not None:
        yield node.value
        node = next_in_order(node)


def reverse_in_order(root: ThreadedNode | None) -> Iterator[int]:
    """Values of a threaded tree in reverse order."""
    node = last_in_order(root) if root is not None else None
    while node is not None:
        yield node.value
        node = previous_in_order(node)