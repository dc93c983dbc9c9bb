"""Removing nodes from singly linked lists."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from .nodes import ListNode


def _walk(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list in place, given only that node."""
    if node.next is None:
        raise ValueError("cannot delete the tail node")
    node.val = node.next.val
    node.next = node.next.next


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove the node at index ``len // 2``; a list of one node becomes empty."""
    nodes = list(_walk(head))
    if len(nodes) <= 1:
        return None
    middle = len(nodes) // 2
    nodes[middle - 1].next = nodes[middle].next
    return head


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Keep one node of each run of equal values in a sorted list."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def delete_all_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every node whose value is repeated in a sorted list."""
    dummy = ListNode(0, head)
    prev = dummy
    node = head
    while node is not None:
        if node.next is not None and node.next.val == node.val:
            repeated = node.val
            while node is not None and node.val == repeated:
                node = node.next
            prev.next = node
        else:
            prev = node
            node = node.next
    return dummy.next


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Remove every node holding ``val``."""
    dummy = ListNode(0, head)
    node = dummy
    while node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the ``n``-th node counted from the end (1 is the tail).

    When the list is shorter than ``n`` the result is None.
    """
    if n <= 0:
        raise ValueError("n must be positive")
    nodes = list(_walk(head))
    length = len(nodes)
    if n > length:
        return None
    if n == length:
        return head.next
    prev = nodes[length - n - 1]
    prev.next = prev.next.next
    return head


def remove_zero_sum_sublists(head: Optional[ListNode]) -> Optional[ListNode]:
    """Repeatedly cut runs of consecutive nodes whose values sum to zero."""
    dummy = ListNode(0, head)
    start: Optional[ListNode] = dummy
    while start is not None:
        total = 0
        scan = start.next
        while scan is not None:
            total += scan.val
            if total == 0:
                start.next = scan.next
            scan = scan.next
        start = start.next
    return dummy.next