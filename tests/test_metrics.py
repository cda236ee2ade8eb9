import pytest

from bintree.metrics import (
    balance,
    depth,
    height,
    is_full,
    is_perfect,
    leaves,
    nodes,
    sibling,
    size,
    uncle,
)
from bintree.node import Node
from bintree.traversal import preorder


def _all_nodes(tree):
    found = []
    pending = [tree]
    while pending:
        node = pending.pop()
        if node is None:
            continue
        found.append(node)
        pending.extend((node.left, node.right))
    return found


def _attach(parent, value, side):
    child = Node(value, parent=parent)
    setattr(parent, side, child)
    return child


@pytest.fixture
def sample():
    root = Node(98)
    root.left = Node(12, parent=root)
    root.right = Node(402, parent=root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


@pytest.fixture
def family():
    root = Node(98)
    left = _attach(root, 12, "left")
    right = _attach(root, 128, "right")
    _attach(left, 54, "right")
    far = _attach(right, 402, "right")
    _attach(left, 10, "left")
    _attach(right, 110, "left")
    _attach(far, 200, "left")
    _attach(far, 512, "right")
    return root


def _perfect(levels):
    root = Node(0)
    frontier = [root]
    counter = 1
    for _ in range(levels):
        next_frontier = []
        for node in frontier:
            next_frontier.append(_attach(node, counter, "left"))
            next_frontier.append(_attach(node, counter + 1, "right"))
            counter += 2
        frontier = next_frontier
    return root


def test_height_of_empty_and_single_node():
    assert height(None) == 0
    assert height(Node(5)) == 0


def test_height_equals_deepest_depth(sample):
    assert height(sample) == max(depth(n) for n in _all_nodes(sample))


def test_height_of_subtree_is_smaller(sample):
    assert height(sample.right) < height(sample)
    assert height(sample.left.right) == 0


def test_depth_of_root_and_none(sample):
    assert depth(None) == 0
    assert depth(sample) == 0


def test_depth_grows_by_one_per_level(sample):
    for node in _all_nodes(sample):
        if node.parent is not None:
            assert depth(node) == depth(node.parent) + 1


def test_size_matches_traversal(sample):
    assert size(sample) == len(list(preorder(sample)))
    assert size(None) == 0
    assert size(sample.left.right) == 1


def test_size_of_subtree(sample):
    assert size(sample) == 1 + size(sample.left) + size(sample.right)


def test_leaves_and_nodes_partition_the_tree(sample, family):
    for tree in (sample, family, sample.right, sample.left.right):
        assert leaves(tree) + nodes(tree) == size(tree)


def test_leaves_count_leaf_nodes(sample):
    expected = sum(1 for n in _all_nodes(sample) if n.is_leaf())
    assert leaves(sample) == expected
    assert leaves(sample.left.right) == 1
    assert leaves(None) == 0


def test_nodes_of_leaf_and_none(sample):
    assert nodes(sample.left.right) == 0
    assert nodes(None) == 0


def test_balance_example_tree():
    root = Node(98)
    root.left = Node(12, parent=root)
    root.right = Node(402, parent=root)
    root.left.insert_right(54)
    root.insert_right(128)
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)

    assert balance(root) == 2
    assert balance(root.right) == -1
    assert balance(root.left.left.right) == 0


def test_balance_of_none_and_leaf():
    assert balance(None) == 0
    assert balance(Node(1)) == 0


def test_balance_matches_child_heights(family):
    for node in _all_nodes(family):
        if node.left is not None and node.right is not None:
            assert balance(node) == height(node.left) - height(node.right)


def test_balance_is_antisymmetric_under_mirroring():
    left_heavy = Node(1)
    left_heavy.insert_left(2).insert_left(3)
    right_heavy = Node(1)
    right_heavy.insert_right(2).insert_right(3)
    assert balance(left_heavy) == -balance(right_heavy)
    assert balance(left_heavy) > 0


def test_is_full_example_tree(sample):
    sample.left.left = Node(10, parent=sample.left)
    assert is_full(sample) is False
    assert is_full(sample.left) is True
    assert is_full(sample.right) is False


def test_is_full_of_none_and_leaf():
    assert is_full(None) is False
    assert is_full(Node(3)) is True


def test_is_perfect_of_none():
    assert is_perfect(None) is False


@pytest.mark.parametrize("levels", range(5))
def test_perfect_trees(levels):
    tree = _perfect(levels)
    assert is_perfect(tree) is True
    assert is_full(tree) is True
    assert height(tree) == levels
    assert size(tree) == 2 ** (levels + 1) - 1
    assert leaves(tree) == 2**levels
    assert balance(tree) == 0


def test_full_but_not_perfect():
    tree = _perfect(2)
    leaf = tree.left.left
    _attach(leaf, 100, "left")
    _attach(leaf, 101, "right")
    assert is_full(tree) is True
    assert is_perfect(tree) is False


def test_sibling(family):
    assert sibling(family.left) is family.right
    assert sibling(family.right.left) is family.right.right
    assert sibling(family.left.right) is family.left.left
    assert sibling(family) is None
    assert sibling(None) is None


def test_sibling_missing():
    root = Node(1)
    only = root.insert_left(2)
    assert sibling(only) is None


def test_uncle(family):
    assert uncle(family.right.left) is family.left
    assert uncle(family.left.right) is family.right
    assert uncle(family.left) is None
    assert uncle(family) is None
    assert uncle(None) is None


def test_uncle_is_sibling_of_parent(family):
    for node in _all_nodes(family):
        if node.parent is not None:
            assert uncle(node) is sibling(node.parent)