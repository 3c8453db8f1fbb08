"""Searches over sorted sequences; each returns a 0-based index or -1."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(values: Sequence, target) -> int:
    """Index of target in sorted values by halving the range, or -1."""
    lo, hi = 0, len(values) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return -1


def halving_search(values: Sequence, target) -> int:
    """Index of target by uniform binary search over a table of step sizes, or -1."""
    n = len(values)
    if n == 0:
        return -1
    steps = []
    power = 1
    while True:
        step = (n + power) // (2 * power)
        steps.append(step)
        if step == 0:
            break
        power *= 2
    position = steps[0]  # 1-based
    for step in steps[1:]:
        if not 1 <= position <= n:
            return -1
        value = values[position - 1]
        if value == target:
            return position - 1
        position = position + step if target > value else position - step
    return -1


def fibonacci_search(values: Sequence, target) -> int:
    """Index of target by splitting the range at Fibonacci numbers, or -1."""
    n = len(values)
    older, old = 0, 1
    current = older + old
    while current < n:
        older, old = old, current
        current = older + old
    offset = -1
    while current > 1:
        i = min(offset + older, n - 1)
        if values[i] < target:
            current, old = old, older
            older = current - old
            offset = i
        elif values[i] > target:
            current = older
            old -= older
            older = current - old
        else:
            return i
    if old and offset + 1 < n and values[offset + 1] == target:
        return offset + 1
    return -1