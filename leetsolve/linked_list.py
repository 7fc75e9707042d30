"""Singly linked list node and algorithms over linked lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None


def _build(values: list[int]) -> Optional[ListNode]:
    head: Optional[ListNode] = None
    for value in reversed(values):
        head = ListNode(value, head)
    return head


def add_two_numbers(l1: ListNode, l2: ListNode) -> ListNode:
    """Add two numbers stored as little-endian digit lists.

    A missing tail on the shorter list counts as zeros. The result always
    holds at least one digit.
    """
    digits: list[int] = []
    carry = 0
    a: Optional[ListNode] = l1
    b: Optional[ListNode] = l2
    while True:
        total = (a.val if a else 0) + (b.val if b else 0) + carry
        carry, digit = divmod(total, 10)
        digits.append(digit)
        a = a.next if a else None
        b = b.next if b else None
        if a is None and b is None and carry == 0:
            break
    result = _build(digits)
    assert result is not None
    return result


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists into a new sorted list.

    On equal values the node from ``list2`` comes first. Once one list runs
    out, the rest of the other list is attached as it is.
    """
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None

    def append(value: int) -> None:
        nonlocal head, tail
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node

    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            append(list1.val)
            list1 = list1.next
        else:
            append(list2.val)
            list2 = list2.next

    rest = list1 if list1 is not None else list2
    if tail is None:
        return rest
    tail.next = rest
    return head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a linked list in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous, current = current, following
    return previous