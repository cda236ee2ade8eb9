"""Binary tree nodes with parent links, and the operations that build them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

__all__ = ["Node", "delete"]


@dataclass(eq=False, repr=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node records its parent but does not attach it as a child;
    the caller decides on which side it goes, or uses ``insert_left`` /
    ``insert_right``.
    """

    value: int
    parent: Optional[Node] = None
    left: Optional[Node] = field(default=None)
    right: Optional[Node] = field(default=None)

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        new_node = Node(value, parent=self)
        if self.left is not None:
            new_node.left = self.left
            self.left.parent = new_node
        self.left = new_node
        return new_node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        new_node = Node(value, parent=self)
        if self.right is not None:
            new_node.right = self.right
            self.right.parent = new_node
        self.right = new_node
        return new_node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None


def delete(tree: Optional[Node]) -> None:
    """Dismantle a whole tree, dropping every link between its nodes.

    Like freeing the nodes, this does not touch the link the tree's own
    parent may still hold to it. ``None`` is accepted and ignored.
    """
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
        node.left = None
        node.right = None
        node.parent = None