"""Binary trees: building from a preorder spec, traversals, searching and pruning."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """A binary tree node."""

    value: int
    left: Node | None = None
    right: Node | None = None


def build_tree(spec: str) -> Node | None:
    """Build a tree from a preorder string of digits where ``0`` marks an empty child.

    Each character is one node value; a spec that runs out early leaves the
    remaining children empty.
    """
    if any(not char.isdigit() for char in spec):
        raise ValueError("tree spec must hold only digits")
    chars: Iterator[str] = iter(spec)

    def grow() -> Node | None:
        char = next(chars, "0")
        if char == "0":
            return None
        node = Node(int(char))
        node.left = grow()
        node.right = grow()
        return node

    return grow()


def preorder(tree: Node | None) -> list[int]:
    """Values in root, left, right order."""
    if tree is None:
        return []
    return [tree.value, *preorder(tree.left), *preorder(tree.right)]


def inorder(tree: Node | None) -> list[int]:
    """Values in left, root, right order."""
    if tree is None:
        return []
    return [*inorder(tree.left), tree.value, *inorder(tree.right)]


def postorder(tree: Node | None) -> list[int]:
    """Values in left, right, root order."""
    if tree is None:
        return []
    return [*postorder(tree.left), *postorder(tree.right), tree.value]


def preorder_iterative(tree: Node | None) -> list[int]:
    """Preorder values using an explicit stack."""
    result: list[int] = []
    stack: list[Node] = []
    node = tree
    while True:
        while node is not None:
            result.append(node.value)
            stack.append(node)
            node = node.left
        if not stack:
            return result
        node = stack.pop().right


def inorder_iterative(tree: Node | None) -> list[int]:
    """Inorder values using an explicit stack."""
    result: list[int] = []
    stack: list[Node] = []
    node = tree
    while True:
        while node is not None:
            stack.append(node)
            node = node.left
        if not stack:
            return result
        node = stack.pop()
        result.append(node.value)
        node = node.right


def postorder_iterative(tree: Node | None) -> list[int]:
    """Postorder values using a stack of nodes tagged with how far they are visited."""
    if tree is None:
        return []
    result: list[int] = []
    stack: list[tuple[Node, int]] = [(tree, 0)]
    while stack:
        node, stage = stack.pop()
        if stage == 0:
            stack.append((node, 1))
            if node.left is not None:
                stack.append((node.left, 0))
        elif stage == 1:
            stack.append((node, 2))
            if node.right is not None:
                stack.append((node.right, 0))
        else:
            result.append(node.value)
    return result


def level_order(tree: Node | None) -> list[int]:
    """Values level by level, left to right."""
    if tree is None:
        return []
    result: list[int] = []
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return result


def copy_tree(tree: Node | None) -> Node | None:
    """A deep copy of the tree."""
    if tree is None:
        return None
    return Node(tree.value, copy_tree(tree.left), copy_tree(tree.right))


def find_node(tree: Node | None, value: int) -> Node | None:
    """First node in preorder holding value, or None."""
    if tree is None:
        return None
    if tree.value == value:
        return tree
    return find_node(tree.left, value) or find_node(tree.right, value)


def find_parent(tree: Node | None, value: int) -> Node | None:
    """First node in preorder with a child holding value, or None."""
    if tree is None:
        return None
    if any(child is not None and child.value == value for child in (tree.left, tree.right)):
        return tree
    return find_parent(tree.left, value) or find_parent(tree.right, value)


def insert_left_chain(node: Node | None, new: Node | None) -> None:
    """Make new the left child of node, with node's old left child hanging below new's left."""
    if node is None or new is None:
        return
    new.left = node.left
    node.left = new


def delete_subtree(tree: Node | None, value: int) -> Node:
    """Detach and return the subtree rooted at the child holding value.

    Raises ValueError when no node has such a child, which includes the root.
    """
    parent = find_parent(tree, value)
    if parent is None:
        raise ValueError(f"no subtree rooted at {value} can be deleted")
    if parent.left is not None and parent.left.value == value:
        removed, parent.left = parent.left, None
    else:
        removed, parent.right = parent.right, None
    return removed