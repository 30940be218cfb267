"""Greedy and dynamic-programming optimisation problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


def fractional_knapsack(items: Iterable[tuple[float, float]], capacity: float) -> float:
    """Return the best total value that fits in ``capacity``.

    ``items`` are ``(value, weight)`` pairs; any item may be taken in part.
    Items are taken greedily by descending value per unit of weight.
    """
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    goods = list(items)
    for value, weight in goods:
        if weight <= 0:
            raise ValueError(f"item weights must be positive, got {weight}")
    goods.sort(key=lambda item: item[0] / item[1], reverse=True)

    total = 0.0
    remaining = float(capacity)
    for value, weight in goods:
        if remaining <= 0:
            break
        fraction = min(1.0, remaining / weight)
        total += fraction * value
        remaining -= fraction * weight
    return total


def coin_change_ways(coins: Iterable[int], amount: int) -> int:
    """Return how many multisets of ``coins`` add up to ``amount``.

    Each entry of ``coins`` may be used any number of times; order does not
    matter. The amount 0 can always be made in exactly one way.
    """
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")
    denominations = list(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * amount
    for coin in denominations:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


@dataclass(frozen=True)
class MatrixChainResult:
    """The least number of scalar multiplications and the bracketing that achieves it."""

    cost: int
    order: str


def matrix_chain_order(dimensions: Sequence[int]) -> MatrixChainResult:
    """Find the cheapest way to multiply a chain of matrices.

    Matrix ``i`` (counted from 1) has shape ``dimensions[i-1] x dimensions[i]``.
    The order is written like ``((M1 X M2) X M3)``.
    """
    dims = list(dimensions)
    count = len(dims) - 1
    if count < 1:
        raise ValueError("at least two dimensions are needed to describe one matrix")
    if any(d <= 0 for d in dims):
        raise ValueError("matrix dimensions must be positive")

    cost = [[0] * count for _ in range(count)]
    split = [[0] * count for _ in range(count)]
    for length in range(2, count + 1):
        for i in range(count - length + 1):
            j = i + length - 1
            best: int | None = None
            for k in range(i, j):
                candidate = cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                if best is None or candidate < best:
                    best = candidate
                    split[i][j] = k
            cost[i][j] = best if best is not None else 0

    def render(first: int, last: int) -> str:
        if first == last:
            return f"M{first + 1}"
        k = split[first][last]
        return f"({render(first, k)} X {render(k + 1, last)})"

    return MatrixChainResult(cost[0][count - 1], render(0, count - 1))