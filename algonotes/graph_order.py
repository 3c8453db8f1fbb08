"""Critical paths of activity networks and strongly connected components."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import count


class CycleError(ValueError):
    """Raised when an activity network is not acyclic."""


def critical_path(n: int, edges: Iterable[tuple[int, int, float]]) -> list[tuple[int, int, float]]:
    """Critical activities ``(x, y, duration)`` of an activity network, in input order.

    Vertices 1..n are events; every vertex without predecessors starts from
    a common virtual source and every vertex without successors ends at a
    common virtual sink.
    """
    if n < 1:
        raise ValueError("a network needs at least one vertex")
    edge_list = []
    for x, y, c in edges:
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"edge ({x}, {y}) has a vertex outside 1..{n}")
        edge_list.append((x, y, c))

    sink = n + 1
    successors: dict[int, list[tuple[int, float]]] = {v: [] for v in range(n + 2)}
    indegree = dict.fromkeys(range(n + 2), 0)
    for x, y, c in edge_list:
        successors[x].append((y, c))
        indegree[y] += 1
    for v in range(1, n + 1):
        if indegree[v] == 0:
            successors[0].append((v, 0))
            indegree[v] += 1
    for v in range(1, n + 1):
        if not successors[v]:
            successors[v].append((sink, 0))
            indegree[sink] += 1

    order = []
    ready = [0]
    while ready:
        u = ready.pop()
        order.append(u)
        for v, _ in successors[u]:
            indegree[v] -= 1
            if indegree[v] == 0:
                ready.append(v)
    if len(order) != n + 2:
        raise CycleError("activity network contains a cycle")

    earliest = dict.fromkeys(range(n + 2), 0)
    for u in order:
        for v, c in successors[u]:
            earliest[v] = max(earliest[v], earliest[u] + c)
    latest = dict.fromkeys(range(n + 2), math.inf)
    latest[sink] = earliest[sink]
    for u in reversed(order):
        for v, c in successors[u]:
            latest[u] = min(latest[u], latest[v] - c)

    return [(x, y, c) for x, y, c in edge_list if earliest[x] == latest[y] - c]


def strongly_connected_components(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Strongly connected components of a digraph on 1..n.

    Each component is sorted, and components are ordered by their smallest vertex.
    """
    adjacency: dict[int, list[int]] = {v: [] for v in range(1, n + 1)}
    for x, y in edges:
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"edge ({x}, {y}) has a vertex outside 1..{n}")
        adjacency[x].append(y)

    index: dict[int, int] = {}
    low: dict[int, int] = {}
    stack: list[int] = []
    on_stack: set[int] = set()
    counter = count(1)
    components: list[list[int]] = []

    def visit(v: int) -> None:
        index[v] = low[v] = next(counter)
        stack.append(v)
        on_stack.add(v)

    for root in range(1, n + 1):
        if root in index:
            continue
        visit(root)
        work = [(root, iter(adjacency[root]))]
        while work:
            v, neighbours = work[-1]
            for w in neighbours:
                if w not in index:
                    visit(w)
                    work.append((w, iter(adjacency[w])))
                    break
                if w in on_stack:
                    low[v] = min(low[v], index[w])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[v])
                if low[v] == index[v]:
                    component = []
                    while True:
                        w = stack.pop()
                        on_stack.discard(w)
                        component.append(w)
                        if w == v:
                            break
                    components.append(sorted(component))
    return sorted(components)