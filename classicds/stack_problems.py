"""Problems solved with an explicit stack."""

from __future__ import annotations

from collections.abc import Iterable

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_balanced(expression: str) -> bool:
    """Return True if every bracket in ``expression`` is properly matched.

    Round, square and curly brackets are checked; other characters are ignored.
    """
    pending: list[str] = []
    for char in expression:
        if char in _OPENERS:
            pending.append(char)
        elif char in _PAIRS:
            if not pending or pending.pop() != _PAIRS[char]:
                return False
    return not pending


def largest_rectangle_area(heights: Iterable[int]) -> int:
    """Return the largest rectangle area that fits under a histogram.

    Each bar has width 1; an empty histogram has area 0.
    """
    bars = list(heights)
    stack: list[int] = []
    best = 0
    for index, height in enumerate([*bars, 0]):
        while stack and bars[stack[-1]] > height:
            top = stack.pop()
            width = index if not stack else index - stack[-1] - 1
            best = max(best, bars[top] * width)
        if index < len(bars):
            stack.append(index)
    return best