"""Dynamic-programming classics: knapsacks, circular merging, monotone runs, assignment."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import accumulate, permutations


@dataclass(frozen=True)
class KnapsackResult:
    """Best load of a 0-1 knapsack; ``chosen`` holds 1-based item numbers, highest first."""

    price: float
    weight: float
    chosen: tuple[int, ...]


def knapsack_01(capacity: float, items: Iterable[tuple[float, float]]) -> KnapsackResult:
    """Solve the 0-1 knapsack by merging sets of non-dominated (weight, price) pairs.

    ``items`` are ``(price, weight)`` pairs. Among loads of the best price
    the lightest is returned.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    # Each pair is (weight, price, link); link chains the items taken.
    stage: list[tuple[float, float, tuple | None]] = [(0, 0, None)]
    for index, (price, weight) in enumerate(items, 1):
        if weight < 0:
            raise ValueError("item weights must not be negative")
        grown = [
            (w + weight, p + price, (index, link))
            for w, p, link in stage
            if w + weight <= capacity
        ]
        merged = sorted(stage + grown, key=lambda pair: (pair[0], -pair[1]))
        stage = []
        for pair in merged:
            if not stage or pair[1] > stage[-1][1]:
                stage.append(pair)
    weight, price, link = stage[-1]
    chosen = []
    while link is not None:
        index, link = link
        chosen.append(index)
    return KnapsackResult(price, weight, tuple(chosen))


def group_knapsack(demands: Sequence[Sequence[int]], capacity: int) -> int:
    """Best score when spreading ``capacity`` soldiers over castles.

    ``demands[p][c]`` is how many soldiers player p sends to castle c.
    Sending more than twice a player's number beats that player there, and
    beating k players at castle c (1-based) scores ``c * k``.
    """
    rows = [list(row) for row in demands]
    if not rows:
        return 0
    castles = len(rows[0])
    if any(len(row) != castles for row in rows):
        raise ValueError("every player must list the same castles")
    best = [0] * (capacity + 1)
    for castle, column in enumerate(zip(*rows), 1):
        costs = sorted(2 * soldiers + 1 for soldiers in column)
        for budget in range(capacity, 0, -1):
            for beaten, cost in enumerate(costs, 1):
                if budget >= cost and best[budget - cost] + castle * beaten > best[budget]:
                    best[budget] = best[budget - cost] + castle * beaten
    return best[capacity]


def stone_merge(piles: Sequence[int]) -> tuple[int, int]:
    """Least and greatest total score for merging a ring of piles into one.

    Merging two neighbouring piles scores their combined size.
    """
    n = len(piles)
    if n == 0:
        raise ValueError("at least one pile is needed")
    ring = list(piles) * 2
    prefix = [0, *accumulate(ring)]
    size = len(ring)
    low = [[0] * size for _ in range(size)]
    high = [[0] * size for _ in range(size)]
    for length in range(2, n + 1):
        for i in range(size - length + 1):
            j = i + length - 1
            total = prefix[j + 1] - prefix[i]
            low[i][j] = total + min(low[i][k] + low[k + 1][j] for k in range(i, j))
            high[i][j] = total + max(high[i][k] + high[k + 1][j] for k in range(i, j))
    return (
        min(low[i][i + n - 1] for i in range(n)),
        max(high[i][i + n - 1] for i in range(n)),
    )


def longest_monotone(values: Iterable[int]) -> tuple[int, int]:
    """Lengths of the longest non-increasing and the longest strictly increasing subsequences."""
    falling: list[int] = []  # negated tails, ascending
    rising: list[int] = []
    for value in values:
        p = bisect_right(falling, -value)
        if p == len(falling):
            falling.append(-value)
        else:
            falling[p] = -value
        q = bisect_left(rising, value)
        if q == len(rising):
            rising.append(value)
        else:
            rising[q] = value
    return len(falling), len(rising)


def max_assignment(matrix: Sequence[Sequence[float]]) -> float:
    """Largest total of picking one entry from each row with every column used once."""
    rows = [list(row) for row in matrix]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("matrix must be square")
    if n == 0:
        return 0
    return max(
        sum(row[column] for row, column in zip(rows, order))
        for order in permutations(range(n))
    )