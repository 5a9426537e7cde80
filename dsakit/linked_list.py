"""Singly linked lists: building, reversing, merging, pruning and adding."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "ListNode",
    "from_iterable",
    "to_list",
    "append",
    "reverse_list",
    "remove_nodes",
    "merge_two_lists",
    "add_two_numbers",
]


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def from_iterable(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def append(head: Optional[ListNode], value: int) -> ListNode:
    """Add a node holding ``value`` at the end and return the head."""
    node = ListNode(value)
    if head is None:
        return node
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = node
    return head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev: Optional[ListNode] = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def remove_nodes(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every node that has a strictly greater value somewhere after it.

    The list is modified in place; the returned head starts what is left.
    """
    reversed_head = reverse_list(head)
    if reversed_head is None:
        return None
    largest = reversed_head
    for node in _nodes(reversed_head.next):
        if node.val >= largest.val:
            largest.next = node
            largest = node
    largest.next = None
    return reverse_list(reversed_head)


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list.

    On equal values the node from ``list1`` comes first.
    """
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10) if total > 9 else (0, total)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next