"""A splay tree holding a multiset of keys with order statistics."""

from __future__ import annotations

from collections.abc import Iterable


class _Node:
    __slots__ = ("key", "count", "size", "left", "right", "parent")

    def __init__(self, key, parent: _Node | None = None) -> None:
        self.key = key
        self.count = 1
        self.size = 1
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.parent = parent


def _size(node: _Node | None) -> int:
    return node.size if node is not None else 0


def _update(node: _Node) -> None:
    node.size = node.count + _size(node.left) + _size(node.right)


class SplayTree:
    """A self-adjusting search tree over a multiset of keys."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def _rotate(self, x: _Node) -> None:
        p = x.parent
        g = p.parent
        if p.left is x:
            p.left = x.right
            if x.right is not None:
                x.right.parent = p
            x.right = p
        else:
            p.right = x.left
            if x.left is not None:
                x.left.parent = p
            x.left = p
        p.parent = x
        x.parent = g
        if g is None:
            self._root = x
        elif g.left is p:
            g.left = x
        else:
            g.right = x
        _update(p)
        _update(x)

    def _splay(self, x: _Node) -> None:
        while x.parent is not None:
            p = x.parent
            g = p.parent
            if g is not None:
                self._rotate(p if (g.left is p) == (p.left is x) else x)
            self._rotate(x)
        _update(x)

    def _find(self, key) -> _Node | None:
        node, last = self._root, None
        while node is not None and node.key != key:
            last = node
            node = node.left if key < node.key else node.right
        target = node or last
        if target is not None:
            self._splay(target)
        return node

    def insert(self, key) -> None:
        """Add one copy of key."""
        node, parent = self._root, None
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is not None:
            node.count += 1
        else:
            node = _Node(key, parent)
            if parent is None:
                self._root = node
            elif key < parent.key:
                parent.left = node
            else:
                parent.right = node
        self._splay(node)

    def delete(self, key) -> None:
        """Remove one copy of key; KeyError if it is absent."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        if node.count > 1:
            node.count -= 1
            _update(node)
            return
        left, right = node.left, node.right
        if left is None:
            self._root = right
            if right is not None:
                right.parent = None
            return
        left.parent = None
        self._root = left
        top = left
        while top.right is not None:
            top = top.right
        self._splay(top)
        top.right = right
        if right is not None:
            right.parent = top
        _update(top)

    def rank(self, key) -> int:
        """One more than the number of stored keys smaller than key."""
        node, last, smaller = self._root, None, 0
        while node is not None:
            last = node
            if key < node.key:
                node = node.left
            elif key == node.key:
                smaller += _size(node.left)
                break
            else:
                smaller += _size(node.left) + node.count
                node = node.right
        if last is not None:
            self._splay(last)
        return smaller + 1

    def kth(self, k: int):
        """The k-th smallest key, counting copies, from 1; IndexError if out of range."""
        if not 1 <= k <= len(self):
            raise IndexError(f"no element of rank {k}")
        node = self._root
        while True:
            left = _size(node.left)
            if k <= left:
                node = node.left
            elif k <= left + node.count:
                self._splay(node)
                return node.key
            else:
                k -= left + node.count
                node = node.right

    def _closest(self, key, below: bool):
        node, best = self._root, None
        while node is not None:
            if (node.key < key) if below else (node.key > key):
                best = node
                node = node.right if below else node.left
            else:
                node = node.left if below else node.right
        if best is None:
            return None
        self._splay(best)
        return best.key

    def predecessor(self, key):
        """Largest stored key smaller than key, or None."""
        return self._closest(key, below=True)

    def successor(self, key):
        """Smallest stored key larger than key, or None."""
        return self._closest(key, below=False)

    def __len__(self) -> int:
        return _size(self._root)

    def __contains__(self, key) -> bool:
        return self._find(key) is not None


def run_operations(operations: Iterable[tuple[int, int]]) -> list:
    """Apply numbered operations to a fresh tree and collect the answers.

    1 inserts x, 2 deletes x, 3 asks the rank of x, 4 the x-th smallest
    key, 5 the predecessor and 6 the successor of x.
    """
    tree = SplayTree()
    answers = []
    for opcode, x in operations:
        if opcode == 1:
            tree.insert(x)
        elif opcode == 2:
            tree.delete(x)
        elif opcode == 3:
            answers.append(tree.rank(x))
        elif opcode == 4:
            answers.append(tree.kth(x))
        elif opcode == 5:
            answers.append(tree.predecessor(x))
        elif opcode == 6:
            answers.append(tree.successor(x))
        else:
            raise ValueError(f"unknown operation {opcode}")
    return answers