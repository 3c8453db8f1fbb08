import pytest

from algonotes.binary_tree import (
    Node,
    build_tree,
    copy_tree,
    delete_subtree,
    find_node,
    find_parent,
    inorder,
    inorder_iterative,
    insert_left_chain,
    level_order,
    postorder,
    postorder_iterative,
    preorder,
    preorder_iterative,
)

SPEC = "1240050030600"


@pytest.fixture
def tree():
    return build_tree(SPEC)


def test_preorder_follows_spec(tree):
    assert preorder(tree) == [int(c) for c in SPEC if c != "0"]


def test_inorder(tree):
    assert inorder(tree) == [4, 2, 5, 1, 3, 6]


def test_postorder(tree):
    assert postorder(tree) == [4, 5, 2, 6, 3, 1]


def test_level_order(tree):
    assert level_order(tree) == [1, 2, 3, 4, 5, 6]


def test_iterative_traversals_match_recursive(tree):
    assert preorder_iterative(tree) == preorder(tree)
    assert inorder_iterative(tree) == inorder(tree)
    assert postorder_iterative(tree) == postorder(tree)


def test_empty_tree():
    assert build_tree("") is None
    assert build_tree("0") is None
    assert preorder_iterative(None) == []
    assert postorder_iterative(None) == []
    assert level_order(None) == []


def test_short_spec_leaves_children_empty():
    tree = build_tree("12")
    assert tree.value == 1
    assert tree.left.value == 2
    assert tree.right is None
    assert find_parent(tree, 2) is tree


def test_non_digit_spec_rejected():
    with pytest.raises(ValueError):
        build_tree("1a")


def test_copy_is_deep(tree):
    clone = copy_tree(tree)
    assert clone == tree
    clone.left.value = 9
    assert tree.left.value == 2
    assert preorder(clone) != preorder(tree)


def test_find_node(tree):
    assert find_node(tree, 5).value == 5
    assert find_node(tree, 8) is None


def test_find_parent(tree):
    assert find_parent(tree, 6).value == 3
    assert find_parent(tree, 1) is None


def test_insert_left_chain(tree):
    insert_left_chain(tree, Node(7))
    assert tree.left.value == 7
    assert tree.left.left.value == 2
    assert tree.left.right is None


def test_delete_subtree(tree):
    removed = delete_subtree(tree, 2)
    assert preorder(removed) == [2, 4, 5]
    assert preorder(tree) == [1, 3, 6]
    assert find_node(tree, 4) is None


def test_delete_root_or_missing_fails(tree):
    with pytest.raises(ValueError):
        delete_subtree(tree, 1)
    with pytest.raises(ValueError):
        delete_subtree(tree, 8)