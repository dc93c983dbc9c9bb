"""Reordering, merging and splitting singly linked lists."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import chain, pairwise, zip_longest
from operator import attrgetter
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


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list ``k`` places to the right."""
    if k < 0:
        raise ValueError("k must not be negative")
    nodes = list(_walk(head))
    if not nodes:
        return head
    shift = k % len(nodes)
    if shift == 0:
        return head
    return _link(nodes[-shift:] + nodes[:-shift])


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder in place to first, last, second, second to last, and so on."""
    nodes = list(_walk(head))
    if len(nodes) < 3:
        return
    half = (len(nodes) + 1) // 2
    front, back = nodes[:half], nodes[half:][::-1]
    _link([n for n in chain.from_iterable(zip_longest(front, back)) if n is not None])


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Group the nodes at odd positions before those at even positions."""
    nodes = list(_walk(head))
    return _link(nodes[0::2] + nodes[1::2])


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Move nodes below ``x`` before the others, keeping relative order."""
    nodes = list(_walk(head))
    return _link([n for n in nodes if n.val < x] + [n for n in nodes if n.val >= x])


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list's nodes by value; equal values keep their order."""
    return _link(sorted(_walk(head), key=attrgetter("val")))


def merge_in_between(
    list1: Optional[ListNode], a: int, b: int, list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Replace the nodes at 0-based positions ``a`` to ``b`` of ``list1`` by ``list2``.

    ``a`` must be at least 1, so the head of ``list1`` is kept.
    """
    nodes = list(_walk(list1))
    if not 1 <= a <= b < len(nodes):
        raise ValueError("positions out of range")
    tail = nodes[b + 1] if b + 1 < len(nodes) else None
    inserted = list(_walk(list2))
    nodes[a - 1].next = list2 if list2 is not None else tail
    if inserted:
        inserted[-1].next = tail
    return list1


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists; on equal values the node of ``list2`` comes first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def split_list_to_parts(head: Optional[ListNode], k: int) -> list[Optional[ListNode]]:
    """Split into ``k`` consecutive parts whose sizes differ by at most one.

    Earlier parts are the larger ones; missing parts are None.
    """
    if k <= 0:
        raise ValueError("k must be positive")
    nodes = list(_walk(head))
    base, extra = divmod(len(nodes), k)
    parts: list[Optional[ListNode]] = []
    start = 0
    for i in range(k):
        size = base + (1 if i < extra else 0)
        parts.append(_link(nodes[start : start + size]))
        start += size
    return parts