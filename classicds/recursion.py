"""Small recursive-definition number routines."""

from __future__ import annotations

import math
from collections.abc import Iterator
from itertools import repeat
from typing import Any


def factorial(n: int) -> int:
    """Return ``n!``; raise ValueError for negative ``n``."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers, got {n}")
    return math.prod(range(2, n + 1))


def _fibonacci_sequence() -> Iterator[int]:
    previous, current = 0, 1
    while True:
        yield previous
        previous, current = current, previous + current


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError(f"fibonacci index must be non-negative, got {n}")
    for index, value in enumerate(_fibonacci_sequence()):
        if index == n:
            return value
    raise AssertionError("unreachable")


def fibonacci_terms(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting with 0."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return [value for value, _ in zip(_fibonacci_sequence(), range(count))]


def product(a: Any, b: int) -> Any:
    """Multiply ``a`` by the non-negative integer ``b`` through repeated addition."""
    if b < 0:
        raise ValueError(f"multiplier must be non-negative, got {b}")
    return sum(repeat(a, b), start=0)


def is_armstrong(n: int) -> bool:
    """Return True if ``n`` equals the sum of the cubes of its decimal digits."""
    total = sum(int(digit) ** 3 for digit in str(n)) if n > 0 else 0
    return total == n