"""Singly linked lists of integers and splitting off their odd values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class ListNode:
    """A node of a singly linked list."""

    value: int
    next: ListNode | None = None

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> ListNode | None:
        """A list holding the values in order, or None when there are none."""
        head: ListNode | None = None
        tail: ListNode | None = None
        for value in values:
            node = cls(value)
            if tail is None:
                head = node
            else:
                tail.next = node
            tail = node
        return head

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.value
            node = node.next


def split_odd(head: ListNode | None) -> tuple[ListNode | None, ListNode | None]:
    """Copy the odd values into a new list and unlink them from the original.

    Returns ``(odd_list, remaining_list)``; both keep the original order and
    the remaining list is made of the original even nodes.
    """
    odd_anchor = ListNode(0)
    odd_tail = odd_anchor
    keep_anchor = ListNode(0, head)
    previous = keep_anchor
    node = head
    while node is not None:
        if node.value % 2:
            odd_tail.next = ListNode(node.value)
            odd_tail = odd_tail.next
            previous.next = node.next
        else:
            previous = node
        node = node.next
    return odd_anchor.next, keep_anchor.next