"""Uniform random choice of a value from a linked list."""

from __future__ import annotations

import random
from typing import Optional

from .nodes import ListNode, list_values


class ListSampler:
    """Returns the value of a uniformly chosen node of a list."""

    def __init__(
        self, head: Optional[ListNode], rng: Optional[random.Random] = None
    ) -> None:
        self._values = list_values(head)
        self._rng = rng if rng is not None else random.Random()

    def get_random(self) -> int:
        """The value of a node chosen uniformly at random."""
        if not self._values:
            raise ValueError("cannot sample from an empty list")
        return self._rng.choice(self._values)