"""Singly linked lists: building, merging sorted lists and removing from the end."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list of integers."""

    value: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.value
            node = node.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def merge_two_lists(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Merge two ascending lists by relinking their nodes and return the new head.

    On equal values the node from ``second`` comes first.
    """
    anchor = ListNode(0)
    tail = anchor
    while first is not None and second is not None:
        if first.value < second.value:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def merge_k_lists(lists: Sequence[ListNode | None]) -> ListNode | None:
    """Merge any number of ascending lists, pairing them off round by round."""
    pending = list(lists)
    if not pending:
        return None

    while len(pending) > 1:
        merged = [
            merge_two_lists(pending[i], pending[i + 1]) for i in range(0, len(pending) - 1, 2)
        ]
        if len(pending) % 2:
            merged.append(pending[-1])
        pending = merged
    return pending[0]


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node from the end and return the (possibly new) head.

    A non-positive ``n``, or one larger than the list, leaves the list unchanged.
    """
    if n <= 0:
        return head

    fast = head
    remaining = n
    while remaining > 0 and fast is not None:
        fast = fast.next
        remaining -= 1
    if remaining > 0 or head is None:
        return head

    if fast is None:
        return head.next

    slow = head
    while fast.next is not None:
        fast = fast.next
        assert slow.next is not None
        slow = slow.next
    assert slow.next is not None
    slow.next = slow.next.next
    return head