"""Huffman trees built by repeatedly joining the two lightest trees."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import count


@dataclass
class HuffmanNode:
    """A Huffman tree node; leaves hold the input weights."""

    weight: int
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def huffman_tree(weights: Iterable[int]) -> HuffmanNode | None:
    """The Huffman tree of the weights; the lighter tree of each pair goes left."""
    order = count()
    heap = [(w, next(order), HuffmanNode(w)) for w in weights]
    if not heap:
        return None
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        joined = HuffmanNode(left.weight + right.weight, left, right)
        heapq.heappush(heap, (joined.weight, next(order), joined))
    return heap[0][2]


def internal_level_order(root: HuffmanNode | None) -> list[int]:
    """Weights of the internal nodes level by level, right child before left."""
    if root is None or root.is_leaf:
        return []
    result: list[int] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.weight)
        queue.extend(child for child in (node.right, node.left) if not child.is_leaf)
    return result


def huffman_cost(weights: Iterable[int]) -> int:
    """Weighted path length of the Huffman tree: the sum of its internal weights."""
    return sum(internal_level_order(huffman_tree(weights)))