"""Lists whose nodes carry extra links: random pointers and child levels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class RandomNode:
    """A list node with an extra pointer to any node of the list, or None."""

    val: int = 0
    next: Optional["RandomNode"] = None
    random: Optional["RandomNode"] = None

    def __repr__(self) -> str:
        return f"RandomNode(val={self.val!r})"


@dataclass(eq=False, repr=False)
class MultilevelNode:
    """A doubly linked node that may lead to a child list one level down."""

    val: int = 0
    prev: Optional["MultilevelNode"] = None
    next: Optional["MultilevelNode"] = None
    child: Optional["MultilevelNode"] = None

    def __repr__(self) -> str:
        return f"MultilevelNode(val={self.val!r})"


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep copy of a list with random pointers."""
    if head is None:
        return None
    copies: dict[RandomNode, RandomNode] = {}
    node: Optional[RandomNode] = head
    while node is not None:
        copies[node] = RandomNode(node.val)
        node = node.next
    for original, copy in copies.items():
        copy.next = copies.get(original.next) if original.next else None
        copy.random = copies.get(original.random) if original.random else None
    return copies[head]


def _flatten_tail(node: MultilevelNode) -> MultilevelNode:
    """Flatten the level starting at ``node`` in place and return its tail."""
    tail = node
    current: Optional[MultilevelNode] = node
    while current is not None:
        if current.child is None:
            tail = current
            current = current.next
            continue
        child = current.child
        child_tail = _flatten_tail(child)
        child_tail.next = current.next
        if current.next is not None:
            current.next.prev = child_tail
        current.next = child
        child.prev = current
        current.child = None
    return tail


def flatten(root: Optional[MultilevelNode]) -> Optional[MultilevelNode]:
    """Splice every child list in after its parent, depth first, in place."""
    if root is not None:
        _flatten_tail(root)
    return root