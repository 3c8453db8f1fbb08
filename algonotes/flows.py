"""Maximum flow and minimum-cost maximum flow on a residual network."""

from __future__ import annotations

import math
from collections import Counter, deque


class FlowNetwork:
    """A directed network with vertices 1..n.

    Every edge is stored with a paired reverse arc, so arc ``a`` and arc
    ``a ^ 1`` are partners. Each algorithm works on its own copy of the
    capacities, so the network can be queried repeatedly.
    """

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("a network needs at least one vertex")
        self.n = n
        self._arcs_from: list[list[int]] = [[] for _ in range(n + 1)]
        self._to: list[int] = []
        self._capacity: list[int] = []
        self._cost: list[int] = []

    def _check_vertex(self, v: int) -> None:
        if not 1 <= v <= self.n:
            raise ValueError(f"vertex {v} outside 1..{self.n}")

    def add_edge(self, u: int, v: int, capacity: int, cost: int = 0) -> None:
        """Add an edge from u to v with the given capacity and unit cost."""
        self._check_vertex(u)
        self._check_vertex(v)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        for a, b, cap, w in ((u, v, capacity, cost), (v, u, 0, -cost)):
            self._arcs_from[a].append(len(self._to))
            self._to.append(b)
            self._capacity.append(cap)
            self._cost.append(w)

    def _residual(self, source: int, sink: int) -> list[int]:
        self._check_vertex(source)
        self._check_vertex(sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        return list(self._capacity)

    def _path_arcs(self, parent_arc: dict[int, int], source: int, sink: int) -> list[int]:
        arcs = []
        v = sink
        while v != source:
            a = parent_arc[v]
            arcs.append(a)
            v = self._to[a ^ 1]
        return arcs

    def max_flow_edmonds_karp(self, source: int, sink: int) -> int:
        """Maximum flow by shortest augmenting paths."""
        cap = self._residual(source, sink)
        total = 0
        while True:
            parent_arc: dict[int, int] = {source: -1}
            queue = deque([source])
            while queue and sink not in parent_arc:
                u = queue.popleft()
                for a in self._arcs_from[u]:
                    v = self._to[a]
                    if cap[a] > 0 and v not in parent_arc:
                        parent_arc[v] = a
                        queue.append(v)
            if sink not in parent_arc:
                return total
            path = self._path_arcs(parent_arc, source, sink)
            push = min(cap[a] for a in path)
            for a in path:
                cap[a] -= push
                cap[a ^ 1] += push
            total += push

    def _levels(self, cap: list[int], source: int) -> dict[int, int]:
        level = {source: 0}
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for a in self._arcs_from[u]:
                v = self._to[a]
                if cap[a] > 0 and v not in level:
                    level[v] = level[u] + 1
                    queue.append(v)
        return level

    def max_flow_dinic(self, source: int, sink: int) -> int:
        """Maximum flow by blocking flows on a level graph."""
        cap = self._residual(source, sink)
        total = 0

        def push(u: int, limit: float, level: dict[int, int], cursor: list[int]) -> int:
            if u == sink:
                return int(limit)
            arcs = self._arcs_from[u]
            while cursor[u] < len(arcs):
                a = arcs[cursor[u]]
                v = self._to[a]
                if cap[a] > 0 and level.get(v) == level[u] + 1:
                    got = push(v, min(limit, cap[a]), level, cursor)
                    if got:
                        cap[a] -= got
                        cap[a ^ 1] += got
                        return got
                cursor[u] += 1
            return 0

        while True:
            level = self._levels(cap, source)
            if sink not in level:
                return total
            cursor = [0] * (self.n + 1)
            while pushed := push(source, math.inf, level, cursor):
                total += pushed

    def max_flow_isap(self, source: int, sink: int) -> int:
        """Maximum flow by improved shortest augmenting paths with the gap rule."""
        cap = self._residual(source, sink)
        n = self.n
        depth = {sink: 0}
        queue = deque([sink])
        while queue:
            u = queue.popleft()
            for a in self._arcs_from[u]:
                v = self._to[a]
                if v not in depth and cap[a ^ 1] > 0:
                    depth[v] = depth[u] + 1
                    queue.append(v)
        if source not in depth:
            return 0
        gap = Counter(depth.values())

        def augment(u: int, limit: float, cursor: list[int]) -> int:
            if u == sink:
                return int(limit)
            used = 0
            arcs = self._arcs_from[u]
            while cursor[u] < len(arcs):
                a = arcs[cursor[u]]
                v = self._to[a]
                if cap[a] > 0 and v in depth and depth[u] == depth[v] + 1:
                    got = augment(v, min(cap[a], limit - used), cursor)
                    cap[a] -= got
                    cap[a ^ 1] += got
                    used += got
                    if used == limit:
                        return used
                cursor[u] += 1
            gap[depth[u]] -= 1
            if gap[depth[u]] == 0:
                depth[source] = n + 1
            depth[u] += 1
            gap[depth[u]] += 1
            return used

        total = 0
        while depth[source] < n:
            total += augment(source, math.inf, [0] * (n + 1))
        return total

    def min_cost_max_flow(self, source: int, sink: int) -> tuple[int, int]:
        """Maximum flow of least total cost, as ``(flow, cost)``.

        Augments along cheapest paths found by a queue-based Bellman-Ford;
        the edges as added must hold no cycle of negative cost.
        """
        cap = self._residual(source, sink)
        flow = cost = 0
        while True:
            dist = {source: 0}
            parent_arc: dict[int, int] = {}
            queued = {source}
            queue = deque([source])
            while queue:
                u = queue.popleft()
                queued.discard(u)
                for a in self._arcs_from[u]:
                    if cap[a] <= 0:
                        continue
                    v = self._to[a]
                    nd = dist[u] + self._cost[a]
                    if nd < dist.get(v, math.inf):
                        dist[v] = nd
                        parent_arc[v] = a
                        if v not in queued:
                            queued.add(v)
                            queue.append(v)
            if sink not in dist:
                return flow, cost
            path = self._path_arcs(parent_arc, source, sink)
            push = min(cap[a] for a in path)
            for a in path:
                cap[a] -= push
                cap[a ^ 1] += push
            flow += push
            cost += push * dist[sink]