"""Basic integer and string exercises."""

from __future__ import annotations

import math
from itertools import islice


def add(num1: int, num2: int) -> int:
    """Sum of two integers."""
    return num1 + num2


def convert_temperature(celsius: float) -> tuple[float, float]:
    """Return ``(kelvin, fahrenheit)`` for a Celsius temperature."""
    return celsius + 273.15, celsius * 1.8 + 32


def max_depth(s: str) -> int:
    """Maximum nesting depth of parentheses in ``s``."""
    deepest = depth = 0
    for ch in s:
        if ch == "(":
            depth += 1
            deepest = max(deepest, depth)
        elif ch == ")":
            depth -= 1
    return deepest


def common_factors(a: int, b: int) -> int:
    """Number of positive integers dividing both ``a`` and ``b``."""
    return 1 + sum(1 for i in range(2, min(a, b) + 1) if a % i == 0 and b % i == 0)


def is_palindrome_number(x: int) -> bool:
    """True when the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def smallest_even_multiple(n: int) -> int:
    """Smallest positive multiple of both 2 and ``n``."""
    return n if n % 2 == 0 else n * 2


def subtract_product_and_sum(n: int) -> int:
    """Product of the digits of ``n`` minus their sum."""
    digits = [int(d) for d in str(n)] if n > 0 else []
    return math.prod(digits) - sum(digits)


def is_three(n: int) -> bool:
    """True when ``n`` has exactly three positive divisors."""
    larger_divisors = (i for i in range(2, n + 1) if n % i == 0)
    return 1 + sum(1 for _ in islice(larger_divisors, 3)) == 3