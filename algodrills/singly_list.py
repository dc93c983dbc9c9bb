"""A small index-addressed list of integers."""

from __future__ import annotations

from collections.abc import Iterator


class MyLinkedList:
    """A sequence supporting head, tail and positional insertion and removal.

    Out-of-range positions are ignored by the mutating methods and give -1
    from ``get``.
    """

    def __init__(self) -> None:
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def get(self, index: int) -> int:
        """The value at ``index``, or -1 when there is none."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return -1

    def add_at_head(self, val: int) -> None:
        """Insert ``val`` before the first element."""
        self._items.insert(0, val)

    def add_at_tail(self, val: int) -> None:
        """Append ``val`` after the last element."""
        self._items.append(val)

    def add_at_index(self, index: int, val: int) -> None:
        """Insert ``val`` before position ``index``; ``index == len`` appends."""
        if 0 <= index <= len(self._items):
            self._items.insert(index, val)

    def delete_at_index(self, index: int) -> None:
        """Remove the element at ``index`` when it exists."""
        if 0 <= index < len(self._items):
            del self._items[index]