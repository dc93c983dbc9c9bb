"""Read-only questions about the shape and contents of linked lists."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import pairwise
from typing import Optional

from .nodes import ListNode, list_values


def _walk(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """True when following ``next`` from ``head`` never reaches the end."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """The node where a cycle begins, or None when the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            entry = head
            while entry is not slow:
                entry = entry.next
                slow = slow.next
            return entry
    return None


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """The first node shared by both lists, or None."""
    seen = set(_walk(head_a))
    return next((node for node in _walk(head_b) if node in seen), None)


def middle_node(head: Optional[ListNode]) -> ListNode:
    """The middle node; for an even length, the second of the two middles."""
    if head is None:
        raise ValueError("list must not be empty")
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """True when the list's values read the same in both directions."""
    values = list_values(head)
    return values == values[::-1]


def nodes_between_critical_points(head: Optional[ListNode]) -> list[int]:
    """``[min_distance, max_distance]`` between local extrema, or ``[-1, -1]``.

    A critical point is a node strictly greater or strictly smaller than both
    of its neighbours; at least two are needed for a result.
    """
    values = list_values(head)
    critical = [
        index
        for index, (pre, cur, nxt) in enumerate(
            zip(values, values[1:], values[2:]), start=1
        )
        if pre < cur > nxt or pre > cur < nxt
    ]
    if len(critical) < 2:
        return [-1, -1]
    closest = min(b - a for a, b in pairwise(critical))
    return [closest, critical[-1] - critical[0]]