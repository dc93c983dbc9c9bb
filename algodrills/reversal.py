"""Reversing and swapping parts of singly linked lists."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import chain, pairwise
from typing import Optional

from .nodes import ListNode


def _walk(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _link(nodes: list[ListNode]) -> Optional[ListNode]:
    """Chain ``nodes`` in the given order and return the first."""
    for a, b in pairwise(nodes):
        a.next = b
    if not nodes:
        return None
    nodes[-1].next = None
    return nodes[0]


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    prev: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def reverse_between(
    head: Optional[ListNode], left: int, right: int
) -> Optional[ListNode]:
    """Reverse the nodes at 1-based positions ``left`` through ``right``."""
    if left == right:
        return head
    nodes = list(_walk(head))
    if not 1 <= left < right <= len(nodes):
        raise ValueError("positions out of range")
    return _link(nodes[: left - 1] + nodes[left - 1 : right][::-1] + nodes[right:])


def reverse_even_length_groups(head: Optional[ListNode]) -> Optional[ListNode]:
    """Split into groups of 1, 2, 3, ... nodes and reverse those of even length."""
    nodes = list(_walk(head))
    order: list[ListNode] = []
    start, size = 0, 1
    while start < len(nodes):
        group = nodes[start : start + size]
        if len(group) % 2 == 0:
            group.reverse()
        order.extend(group)
        start += size
        size += 1
    return _link(order)


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse each full group of ``k`` nodes; a shorter tail stays as it is."""
    if k < 0:
        raise ValueError("k must not be negative")
    if k <= 1:
        return head
    nodes = list(_walk(head))
    full = len(nodes) - len(nodes) % k
    groups = (nodes[i : i + k][::-1] for i in range(0, full, k))
    return _link(list(chain.from_iterable(groups)) + nodes[full:])


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes; an odd last node stays in place."""
    nodes = list(_walk(head))
    order = list(chain.from_iterable(zip(nodes[1::2], nodes[0::2])))
    if len(nodes) % 2:
        order.append(nodes[-1])
    return _link(order)


def swap_nodes(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Swap the values of the ``k``-th node from the start and from the end."""
    nodes = list(_walk(head))
    if not 1 <= k <= len(nodes):
        raise ValueError("k out of range")
    front, back = nodes[k - 1], nodes[-k]
    front.val, back.val = back.val, front.val
    return head