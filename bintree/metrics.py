"""Measurements and structural queries on binary trees."""

from __future__ import annotations

from typing import Iterator, Optional

from bintree.node import Node

__all__ = [
    "height",
    "depth",
    "size",
    "leaves",
    "nodes",
    "balance",
    "is_full",
    "is_perfect",
    "sibling",
    "uncle",
]


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    """Yield every node of the tree, parents before children."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _levels(tree: Optional[Node]) -> int:
    """Return the number of levels in the tree, 0 for an empty tree."""
    count = 0
    level = [tree] if tree is not None else []
    while level:
        count += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return count


def height(tree: Optional[Node]) -> int:
    """Return the height in edges; a single node or an empty tree has height 0."""
    return max(_levels(tree) - 1, 0)


def depth(tree: Optional[Node]) -> int:
    """Return the number of edges from the node up to its root, 0 for None."""
    if tree is None:
        return 0
    count = 0
    node = tree
    while node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes with no children."""
    return sum(1 for node in _walk(tree) if node.is_leaf())


def nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the balance factor: levels of the left subtree minus the right."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children.

    An empty tree is not considered full.
    """
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _walk(tree)
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all its leaves share one depth.

    An empty tree is not considered perfect.
    """
    if tree is None:
        return False
    baseline = 0
    current = tree
    while current.left is not None:
        baseline += 1
        current = current.left

    stack: list[tuple[Node, int]] = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        if node.is_leaf():
            if level != baseline:
                return False
            continue
        if node.left is None or node.right is None:
            return False
        stack.append((node.right, level + 1))
        stack.append((node.left, level + 1))
    return True


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of the node's parent, or None if there is none."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    if parent.left is node:
        return parent.right
    if parent.right is node:
        return parent.left
    return None


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of the node's parent, or None if there is none."""
    if node is None:
        return None
    return sibling(node.parent)