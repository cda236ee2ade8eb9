"""Binary trees of integers: nodes, traversals, metrics and ASCII rendering."""

__version__ = "0.1.0"
__all__ = ["node", "traversal", "metrics", "printing"]