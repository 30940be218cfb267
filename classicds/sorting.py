"""Classic comparison sorts.

Every function accepts any iterable and returns a new sorted list in
ascending order. The input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")

DEFAULT_RUN = 32


def _sift_down(heap: MutableSequence[Any], size: int, pos: int) -> None:
    """Restore the max-heap property below ``pos`` within ``heap[:size]``."""
    while True:
        largest = pos
        left, right = 2 * pos + 1, 2 * pos + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == pos:
            return
        heap[pos], heap[largest] = heap[largest], heap[pos]
        pos = largest


def heap_sort(items: Iterable[T]) -> list[T]:
    """Sort using an in-place binary max-heap."""
    data = list(items)
    n = len(data)
    for pos in reversed(range(n // 2)):
        _sift_down(data, n, pos)
    for end in reversed(range(1, n)):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, end, 0)
    return data


def _partition(data: MutableSequence[Any], first: int, last: int) -> int:
    """Lomuto partition around ``data[last]``; return the pivot's final index."""
    pivot = data[last]
    boundary = first - 1
    for j in range(first, last):
        if data[j] <= pivot:
            boundary += 1
            data[boundary], data[j] = data[j], data[boundary]
    data[boundary + 1], data[last] = data[last], data[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[T]) -> list[T]:
    """Sort with quicksort using the last element of each range as pivot."""
    data = list(items)
    pending = [(0, len(data) - 1)]
    while pending:
        first, last = pending.pop()
        if first < last:
            pivot = _partition(data, first, last)
            pending.append((first, pivot - 1))
            pending.append((pivot + 1, last))
    return data


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Sort with bubble sort, stopping early once a pass makes no swap."""
    data = list(items)
    n = len(data)
    for step in range(n - 1):
        swapped = False
        for i in range(n - step - 1):
            if data[i] > data[i + 1]:
                data[i], data[i + 1] = data[i + 1], data[i]
                swapped = True
        if not swapped:
            break
    return data


def _insertion_sort_range(data: MutableSequence[Any], low: int, high: int) -> None:
    """Insertion-sort ``data[low:high + 1]`` in place."""
    for i in range(low + 1, high + 1):
        key = data[i]
        j = i - 1
        while j >= low and data[j] > key:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Sort with straight insertion sort."""
    data = list(items)
    _insertion_sort_range(data, 0, len(data) - 1)
    return data


def _merge(data: MutableSequence[Any], low: int, mid: int, high: int) -> None:
    """Merge the sorted runs ``data[low:mid + 1]`` and ``data[mid + 1:high + 1]``."""
    left = data[low : mid + 1]
    right = data[mid + 1 : high + 1]
    i = j = 0
    k = low
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            data[k] = left[i]
            i += 1
        else:
            data[k] = right[j]
            j += 1
        k += 1
    for value in left[i:]:
        data[k] = value
        k += 1
    for value in right[j:]:
        data[k] = value
        k += 1


def merge_sort(items: Iterable[T]) -> list[T]:
    """Sort with top-down, stable merge sort."""
    data = list(items)

    def sort_range(low: int, high: int) -> None:
        if low < high:
            mid = low + (high - low) // 2
            sort_range(low, mid)
            sort_range(mid + 1, high)
            _merge(data, low, mid, high)

    sort_range(0, len(data) - 1)
    return data


def cycle_sort(items: Iterable[T]) -> list[T]:
    """Sort with cycle sort, which writes each element at most once."""
    data = list(items)
    n = len(data)
    for cycle_start in range(n - 1):
        item = data[cycle_start]
        pos = cycle_start + sum(1 for other in data[cycle_start + 1 :] if other < item)
        if pos == cycle_start:
            continue
        while item == data[pos]:
            pos += 1
        data[pos], item = item, data[pos]
        while pos != cycle_start:
            pos = cycle_start + sum(
                1 for other in data[cycle_start + 1 :] if other < item
            )
            while item == data[pos]:
                pos += 1
            if item != data[pos]:
                data[pos], item = item, data[pos]
    return data


def pancake_sort(items: Iterable[T]) -> list[T]:
    """Sort using only prefix reversals ("flips")."""
    data = list(items)
    for size in range(len(data), 1, -1):
        max_index = max(range(size), key=data.__getitem__)
        if max_index != size - 1:
            data[: max_index + 1] = reversed(data[: max_index + 1])
            data[:size] = reversed(data[:size])
    return data


def stooge_sort(items: Iterable[T]) -> list[T]:
    """Sort with stooge sort (recursive, roughly O(n^2.7))."""
    data = list(items)

    def sort_range(low: int, high: int) -> None:
        if low >= high:
            return
        if data[low] > data[high]:
            data[low], data[high] = data[high], data[low]
        length = high - low + 1
        if length > 2:
            third = length // 3
            sort_range(low, high - third)
            sort_range(low + third, high)
            sort_range(low, high - third)

    sort_range(0, len(data) - 1)
    return data


def tim_sort(items: Iterable[T], run: int = DEFAULT_RUN) -> list[T]:
    """Sort runs of ``run`` elements by insertion, then merge them pairwise.

    Raises ValueError if ``run`` is less than 1.
    """
    if run < 1:
        raise ValueError(f"run length must be at least 1, got {run}")
    data = list(items)
    n = len(data)
    for start in range(0, n, run):
        _insertion_sort_range(data, start, min(start + run - 1, n - 1))
    size = run
    while size < n:
        for left in range(0, n, 2 * size):
            mid = left + size - 1
            right = min(left + 2 * size - 1, n - 1)
            if mid < right:
                _merge(data, left, mid, right)
        size *= 2
    return data