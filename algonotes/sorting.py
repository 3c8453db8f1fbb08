"""Classic comparison and counting sorts, plus inversion counting."""

from __future__ import annotations

import heapq
import operator
from bisect import insort
from collections import deque
from collections.abc import Iterable
from itertools import pairwise


def insertion_sort(values: Iterable) -> list:
    """Sorted copy built by inserting each value behind the larger ones."""
    result: list = []
    for value in values:
        pos = len(result)
        while pos > 0 and result[pos - 1] > value:
            pos -= 1
        result.insert(pos, value)
    return result


def shell_sort(values: Iterable) -> list:
    """Sorted copy by gapped insertion sort with gaps n/2, n/4, ..., 1."""
    items = list(values)
    gap = len(items) // 2
    while gap:
        for i in range(gap, len(items)):
            value = items[i]
            j = i
            while j >= gap and items[j - gap] > value:
                items[j] = items[j - gap]
                j -= gap
            items[j] = value
        gap //= 2
    return items


def bubble_sort(values: Iterable) -> list:
    """Sorted copy by repeated neighbour swaps until a pass changes nothing."""
    items = list(values)
    end = len(items) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        end -= 1
    return items


def cocktail_sort(values: Iterable) -> list:
    """Sorted copy by bubble passes alternating upward and downward."""
    items = list(values)
    lo, hi = 0, len(items) - 1
    swapped = True
    while swapped and lo < hi:
        swapped = False
        for i in range(lo, hi):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        hi -= 1
        for i in range(hi, lo, -1):
            if items[i - 1] > items[i]:
                items[i - 1], items[i] = items[i], items[i - 1]
                swapped = True
        lo += 1
    return items


def quick_sort(values: Iterable) -> list:
    """Sorted copy by median-of-three quicksort driven by a queue of ranges."""
    items = list(values)
    pending = deque([(0, len(items) - 1)])
    while pending:
        lo, hi = pending.popleft()
        if lo >= hi:
            continue
        mid = (lo + hi) // 2
        if items[mid] > items[hi]:
            items[mid], items[hi] = items[hi], items[mid]
        if items[lo] < items[mid]:
            items[lo], items[mid] = items[mid], items[lo]
        if items[lo] > items[hi]:
            items[lo], items[hi] = items[hi], items[lo]
        pivot = items[lo]
        i, j = lo, hi + 1
        while i < j:
            i += 1
            while items[i] < pivot:
                i += 1
            j -= 1
            while items[j] > pivot:
                j -= 1
            if i < j:
                items[i], items[j] = items[j], items[i]
        items[lo], items[j] = items[j], items[lo]
        pending.append((lo, j - 1))
        pending.append((j + 1, hi))
    return items


def selection_sort(values: Iterable) -> list:
    """Sorted copy by moving the smallest remaining value to the front."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def heap_sort(values: Iterable) -> list:
    """Sorted copy by popping a binary heap."""
    heap = list(values)
    heapq.heapify(heap)
    return [heapq.heappop(heap) for _ in range(len(heap))]


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Sorted copy by top-down recursive merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sorted copy of non-negative integers by counting occurrences."""
    items = [operator.index(v) for v in values]
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, times in enumerate(counts) for _ in range(times)]


def bottom_up_merge_sort(values: Iterable) -> list:
    """Sorted copy by merging runs of width 1, 2, 4, ... without recursion."""
    items = list(values)
    width = 1
    while width < len(items):
        items = [
            value
            for start in range(0, len(items), 2 * width)
            for value in _merge(items[start : start + width], items[start + width : start + 2 * width])
        ]
        width *= 2
    return items


def linked_merge_sort(values: Iterable) -> list:
    """Sorted copy by merge sort over index links, with insertion sort on short runs.

    Values are never moved while sorting; only the links between their
    positions change.
    """
    items = list(values)
    if not items:
        return []
    end = -1
    link = [end] * len(items)

    def chain(lo: int, hi: int) -> int:
        if hi - lo <= 5:
            order: list[int] = []
            for index in range(lo, hi):
                insort(order, index, key=items.__getitem__)
            for a, b in pairwise(order):
                link[a] = b
            link[order[-1]] = end
            return order[0]
        mid = (lo + hi) // 2
        i, j = chain(lo, mid), chain(mid, hi)
        head = tail = end
        while i != end and j != end:
            if items[j] < items[i]:
                take, j = j, link[j]
            else:
                take, i = i, link[i]
            if tail == end:
                head = take
            else:
                link[tail] = take
            tail = take
        link[tail] = i if i != end else j
        return head

    result = []
    node = chain(0, len(items))
    while node != end:
        result.append(items[node])
        node = link[node]
    return result


class _Fenwick:
    """Prefix counts over positions 1..size."""

    def __init__(self, size: int) -> None:
        self._tree = [0] * (size + 1)

    def add(self, position: int) -> None:
        while position < len(self._tree):
            self._tree[position] += 1
            position += position & -position

    def prefix(self, position: int) -> int:
        total = 0
        while position > 0:
            total += self._tree[position]
            position -= position & -position
        return total


def count_inversions(values: Iterable) -> int:
    """Number of pairs in which a larger value stands before a smaller one."""
    items = list(values)
    ranked = sorted(range(len(items)), key=items.__getitem__)
    tree = _Fenwick(len(items))
    total = 0
    for inserted, position in enumerate(ranked, 1):
        tree.add(position + 1)
        total += inserted - tree.prefix(position + 1)
    return total