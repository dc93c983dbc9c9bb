"""Searches over sorted and rotated sorted sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from functools import reduce
from operator import xor


def search_range(nums: list[int], target: int) -> list[int]:
    """First and last index of ``target`` in sorted ``nums``, or ``[-1, -1]``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def find_min(nums: list[int]) -> int:
    """Minimum of a rotated sorted list of distinct values."""
    if not nums:
        raise ValueError("nums must not be empty")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] > nums[hi]:
            lo = mid + 1
        else:
            hi = mid
    return nums[lo]


def single_non_duplicate(nums: list[int]) -> int:
    """The one value appearing once in a sorted list of pairs, by binary search."""
    if not nums:
        raise ValueError("nums must not be empty")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        mid -= mid % 2
        if nums[mid] == nums[mid + 1]:
            lo = mid + 2
        else:
            hi = mid
    return nums[lo]


def single_non_duplicate_xor(nums: list[int]) -> int:
    """The one value appearing once when all others appear twice, by xor."""
    return reduce(xor, nums, 0)