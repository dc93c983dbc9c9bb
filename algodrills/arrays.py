"""Small array and string exercises."""

from __future__ import annotations

import math
from collections import Counter
from itertools import accumulate, chain, groupby, islice


def return_to_boundary_count(nums: list[int]) -> int:
    """Count how often an ant moving by ``nums`` steps returns to the start.

    The position before the first move is not checked.
    """
    return sum(1 for pos in islice(accumulate(nums), 1, None) if pos == 0)


def average_value(nums: list[int]) -> int:
    """Truncated average of the values divisible by 6, or 0 when there are none."""
    picked = [n for n in nums if n % 6 == 0]
    if not picked:
        return 0
    total = sum(picked)
    quotient = abs(total) // len(picked)
    return quotient if total >= 0 else -quotient


def get_concatenation(nums: list[int]) -> list[int]:
    """Return ``nums`` followed by itself."""
    return [*nums, *nums]


def count_hill_valley(nums: list[int]) -> int:
    """Count hills and valleys, treating runs of equal values as one point."""
    if not nums:
        raise ValueError("nums must not be empty")
    points = [key for key, _ in groupby(nums)]
    return sum(
        1
        for pre, cur, nxt in zip(points, points[1:], points[2:])
        if (pre < cur > nxt) or (pre > cur < nxt)
    )


def find_disappeared_numbers(nums: list[int]) -> list[int]:
    """Return the numbers in 1..len(nums) that do not appear in ``nums``."""
    present = set(nums)
    return [n for n in range(1, len(nums) + 1) if n not in present]


def find_gcd(nums: list[int]) -> int:
    """Greatest common divisor of the smallest and largest values."""
    if not nums:
        raise ValueError("nums must not be empty")
    low, high = min(nums), max(nums)
    return math.gcd(low, high) if low >= 1 else 1


def find_lucky(arr: list[int]) -> int:
    """Largest value whose frequency equals itself, or -1."""
    counts = Counter(arr)
    return max((k for k, v in counts.items() if k == v), default=-1)


def find_missing_and_repeated_values(grid: list[list[int]]) -> list[int]:
    """Return ``[repeated, missing]`` for an n by n grid meant to hold 1..n*n."""
    n = len(grid)
    values = list(chain.from_iterable(grid))
    counts = Counter(values)
    repeated = next((v for v, c in counts.items() if c >= 2), -1)
    size = n * n
    missing = size * (size + 1) // 2 - sum(values) + repeated
    return [repeated, missing]


def fizz_buzz(n: int) -> list[str]:
    """Classic FizzBuzz for 1..n."""

    def word(i: int) -> str:
        if i % 15 == 0:
            return "FizzBuzz"
        if i % 3 == 0:
            return "Fizz"
        if i % 5 == 0:
            return "Buzz"
        return str(i)

    return [word(i) for i in range(1, n + 1)]


def furthest_distance_from_origin(moves: str) -> int:
    """Furthest reachable distance when each '_' may go either way."""
    counts = Counter(moves)
    return abs(counts["L"] - counts["R"]) + counts["_"]


def judge_circle(moves: str) -> bool:
    """True when the robot's moves bring it back to the origin."""
    counts = Counter(moves)
    return counts["R"] == counts["L"] and counts["U"] == counts["D"]