"""Shortest paths on weighted directed graphs with vertices numbered 1..n."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

Edge = tuple[int, int, float]


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def _check_edges(n: int, edges: Iterable[Edge]) -> list[Edge]:
    checked = []
    for x, y, c in edges:
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"edge ({x}, {y}) has a vertex outside 1..{n}")
        checked.append((x, y, c))
    return checked


def bellman_ford(n: int, edges: Iterable[Edge]) -> dict[int, float]:
    """Distances from a virtual source joined to every vertex by a zero-weight edge.

    Every distance is at most zero, so the result is a feasible potential
    for the graph. Raises NegativeCycleError if a negative cycle exists.
    """
    edge_list = _check_edges(n, edges)
    dist: dict[int, float] = {v: 0 for v in range(1, n + 1)}
    for _ in range(n):
        changed = False
        for x, y, c in edge_list:
            if dist[x] + c < dist[y]:
                dist[y] = dist[x] + c
                changed = True
        if not changed:
            return dist
    if any(dist[x] + c < dist[y] for x, y, c in edge_list):
        raise NegativeCycleError("graph contains a negative cycle")
    return dist


def _dijkstra(adjacency: dict[int, list[tuple[int, float]]], source: int) -> dict[int, float]:
    dist = {source: 0}
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in adjacency[u]:
            nd = d + w
            if nd < dist.get(v, math.inf):
                dist[v] = nd
                heapq.heappush(heap, (nd, v))
    return dist


def dijkstra_all_pairs(matrix: Sequence[Sequence[float | None]]) -> list[list[float]]:
    """All-pairs shortest distances from a square weight matrix.

    ``matrix[i][j]`` is the weight of the edge from i to j; ``None`` or
    ``math.inf`` marks a missing edge. Weights must not be negative.
    Unreachable pairs come back as ``math.inf``.
    """
    size = len(matrix)
    adjacency: dict[int, list[tuple[int, float]]] = {}
    for i, row in enumerate(matrix):
        if len(row) != size:
            raise ValueError("weight matrix must be square")
        arcs = []
        for j, w in enumerate(row):
            if w is None or i == j or w == math.inf:
                continue
            if w < 0:
                raise ValueError("Dijkstra needs non-negative weights")
            arcs.append((j, w))
        adjacency[i] = arcs
    result = []
    for source in range(size):
        dist = _dijkstra(adjacency, source)
        result.append([dist.get(target, math.inf) for target in range(size)])
    return result


def _floyd(n: int, edges: Iterable[Edge]):
    dist = [[math.inf] * (n + 1) for _ in range(n + 1)]
    via: list[list[int | None]] = [[None] * (n + 1) for _ in range(n + 1)]
    for x, y, c in _check_edges(n, edges):
        if c < dist[x][y]:
            dist[x][y] = c
    vertices = range(1, n + 1)
    for k in vertices:
        row_k = dist[k]
        for i in vertices:
            d_ik = dist[i][k]
            if d_ik == math.inf:
                continue
            row_i = dist[i]
            for j in vertices:
                if d_ik + row_k[j] < row_i[j]:
                    row_i[j] = d_ik + row_k[j]
                    via[i][j] = k
    if any(dist[v][v] < 0 for v in vertices):
        raise NegativeCycleError("graph contains a negative cycle")
    return dist, via


def floyd(n: int, edges: Iterable[Edge]) -> dict[tuple[int, int], float]:
    """All-pairs shortest distances by Floyd-Warshall.

    Only reachable pairs appear. A pair ``(v, v)`` holds the weight of the
    shortest cycle through v and is absent when v lies on no cycle.
    """
    dist, _ = _floyd(n, edges)
    return {
        (i, j): dist[i][j]
        for i in range(1, n + 1)
        for j in range(1, n + 1)
        if dist[i][j] != math.inf
    }


def floyd_path(n: int, edges: Iterable[Edge], start: int, end: int) -> list[int]:
    """Vertices of a shortest path from start to end, both included."""
    if not (1 <= start <= n and 1 <= end <= n):
        raise ValueError(f"path ends must lie in 1..{n}")
    dist, via = _floyd(n, edges)
    if dist[start][end] == math.inf:
        raise ValueError(f"vertex {end} is not reachable from {start}")

    def walk(i: int, j: int) -> list[int]:
        k = via[i][j]
        if k is None:
            return [j]
        return walk(i, k) + walk(k, j)

    return [start] + walk(start, end)


def johnson(n: int, edges: Iterable[Edge]) -> dict[tuple[int, int], float]:
    """All-pairs shortest distances by Johnson's reweighting.

    Negative weights are allowed; only reachable pairs appear, and every
    vertex is at distance zero from itself.
    """
    edge_list = _check_edges(n, edges)
    h = bellman_ford(n, edge_list)
    adjacency: dict[int, list[tuple[int, float]]] = {v: [] for v in range(1, n + 1)}
    for x, y, c in edge_list:
        adjacency[x].append((y, c + h[x] - h[y]))
    result = {}
    for source in range(1, n + 1):
        for target, d in _dijkstra(adjacency, source).items():
            result[(source, target)] = d - h[source] + h[target]
    return result