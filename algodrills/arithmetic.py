"""Arithmetic on numbers stored as linked lists of digits."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional

from .nodes import ListNode, build_list, list_values


def _add_digits_lsd_first(a: list[int], b: list[int]) -> list[int]:
    result = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    return result


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers whose digits are stored least significant first."""
    return build_list(_add_digits_lsd_first(list_values(l1), list_values(l2)))


def add_two_numbers_forward(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers whose digits are stored most significant first."""
    digits = _add_digits_lsd_first(list_values(l1)[::-1], list_values(l2)[::-1])
    return build_list(reversed(digits))


def get_decimal_value(head: Optional[ListNode]) -> int:
    """Integer value of a list of binary digits, most significant first."""
    result = 0
    for bit in list_values(head):
        result = (result << 1) | bit
    return result