# bintree

A small library for plain binary trees of integers. It covers building
nodes, inserting children, walking the tree in the usual orders, measuring
it, and drawing it as ASCII art.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building a tree

`bintree.node.Node` holds an integer `value` and links to its `parent`,
`left` and `right` nodes.

```python
from bintree.node import Node, delete

root = Node(98)
root.insert_left(12)
root.insert_right(402)

root.left.insert_right(54)   # becomes 12's right child
root.insert_right(128)       # 128 goes between 98 and 402; 402 moves under 128

root.is_root()               # True
root.right.is_leaf()         # False
```

`insert_left` and `insert_right` return the new node. When a child is
already in that place, the new node takes it over and the old child moves
under the new node on the same side.

Creating a node with `Node(value, parent)` records the parent but does not
attach the node as a child; assign it to `parent.left` or `parent.right`
yourself.

`delete(tree)` takes a subtree apart, clearing the `left`, `right` and
`parent` links of every node in it. A link held by the subtree's former
parent is left as it was. `delete(None)` does nothing.

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))
list(inorder(root))
list(postorder(root))
```

Each function is a generator of node values in its order. An empty tree
(`None`) yields nothing.

## Metrics

```python
from bintree.metrics import (
    height, depth, size, leaves, nodes, balance,
    is_full, is_perfect, sibling, uncle,
)

height(root)       # edges on the longest downward path; a single node is 0
depth(root.right)  # edges up to the root
size(root)         # number of nodes
leaves(root)       # nodes with no children
nodes(root)        # nodes with at least one child
balance(root)      # levels in the left subtree minus levels in the right
is_full(root)      # every node has zero or two children
is_perfect(root)   # full, with every leaf at the same depth
sibling(root.left) # the other child of the same parent, or None
uncle(root.left.right)  # the parent's sibling, or None
```

For a missing tree (`None`) the counts are 0, `is_full` and `is_perfect`
are `False`, and `sibling` and `uncle` return `None`.

## Drawing

```python
from bintree.node import Node
from bintree.printing import render, print_tree

root = Node(98)
root.left = Node(12, root)
root.left.left = Node(6, root.left)
root.left.right = Node(16, root.left)
root.right = Node(402, root)
root.right.left = Node(256, root.right)
root.right.right = Node(512, root.right)

print(render(root), end="")
print_tree(root)
```

Output:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

Each value is drawn zero-padded to three digits in parentheses, one line per
level. `render` returns the picture as a string, each line ending in a
newline; an empty tree gives an empty string. `print_tree(tree, file)` writes
the same text to `file`, or to standard output when `file` is omitted.

## What it does not do

The package is a library only: it has no command-line program, and trees
live in memory alone, with no way to save or load them. It does not keep
trees ordered as search trees or rebalance them.