"""Minimum spanning trees of undirected graphs with vertices 1..n."""

from __future__ import annotations

from collections.abc import Hashable, Iterable

Edge = tuple[int, int, float]


class DisjointSet:
    """Union-find with path compression and union by size."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}

    def find(self, x: Hashable) -> Hashable:
        """Representative of the set holding x; unseen elements form their own set."""
        parent = self._parent
        if x not in parent:
            parent[x] = x
            self._size[x] = 1
            return x
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """Merge the sets of x and y; False if they were already one set."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return False
        if self._size[rx] < self._size[ry]:
            rx, ry = ry, rx
        self._parent[ry] = rx
        self._size[rx] += self._size[ry]
        return True


def _check_edges(n: int, edges: Iterable[Edge]) -> list[Edge]:
    if n < 1:
        raise ValueError("a graph needs at least one vertex")
    checked = []
    for x, y, c in edges:
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"edge ({x}, {y}) has a vertex outside 1..{n}")
        checked.append((x, y, c))
    return checked


def kruskal(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Tree edges in the order chosen; among equal costs the earlier edge wins."""
    edge_list = _check_edges(n, edges)
    components = DisjointSet()
    tree: list[Edge] = []
    for x, y, c in sorted(edge_list, key=lambda e: e[2]):
        if len(tree) == n - 1:
            break
        if components.union(x, y):
            tree.append((x, y, c))
    if len(tree) < n - 1:
        raise ValueError("graph is not connected")
    return tree


def prim(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Tree edges ``(parent, vertex, cost)`` in the order grown from vertex 1."""
    edge_list = _check_edges(n, edges)
    adjacency: dict[int, list[tuple[int, float]]] = {v: [] for v in range(1, n + 1)}
    for x, y, c in edge_list:
        adjacency[x].append((y, c))
        adjacency[y].append((x, c))
    in_tree = {1}
    best: dict[int, tuple[float, int]] = {}

    def offer(u: int) -> None:
        for v, c in adjacency[u]:
            if v not in in_tree and (v not in best or c < best[v][0]):
                best[v] = (c, u)

    offer(1)
    tree: list[Edge] = []
    while len(in_tree) < n:
        if not best:
            raise ValueError("graph is not connected")
        v = min(best, key=lambda w: (best[w][0], w))
        c, u = best.pop(v)
        in_tree.add(v)
        tree.append((u, v, c))
        offer(v)
    return tree