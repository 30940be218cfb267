"""Searching routines and a divide-and-conquer minimum/maximum."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from classicds.sorting import quick_sort

T = TypeVar("T")


def linear_search(items: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    for index, value in enumerate(items):
        if value == target:
            return index
    return None


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the ascending sequence ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if key == items[mid]:
            return mid
        if key < items[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return None


def recursive_binary_search(items: Iterable[Any], key: Any) -> int | None:
    """Sort ``items`` and search them recursively for ``key``.

    The returned index refers to the sorted order of ``items``; None means
    the key is absent.
    """
    ordered = quick_sort(items)

    def search(start: int, end: int) -> int | None:
        if start > end:
            return None
        mid = (start + end) // 2
        if ordered[mid] > key:
            return search(start, mid - 1)
        if ordered[mid] < key:
            return search(mid + 1, end)
        return mid

    return search(0, len(ordered) - 1)


def min_max(items: Iterable[T]) -> tuple[T, T]:
    """Return ``(minimum, maximum)`` found by splitting the input in halves.

    Raises ValueError for an empty input.
    """
    data = list(items)
    if not data:
        raise ValueError("min_max() of an empty sequence")

    def solve(low: int, high: int) -> tuple[Any, Any]:
        if low == high:
            return data[low], data[low]
        if high == low + 1:
            if data[low] > data[high]:
                return data[high], data[low]
            return data[low], data[high]
        mid = (low + high) // 2
        left_min, left_max = solve(low, mid)
        right_min, right_max = solve(mid + 1, high)
        smallest = left_min if left_min < right_min else right_min
        largest = left_max if left_max > right_max else right_max
        return smallest, largest

    return solve(0, len(data) - 1)