"""Text rendering of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.metrics import height
from bintree.node import Node

__all__ = ["render", "print_tree"]


def _put(row: list[str], start: int, text: str) -> None:
    """Write ``text`` into ``row`` at ``start``, widening the row with spaces."""
    end = start + len(text)
    if end > len(row):
        row.extend(" " * (end - len(row)))
    row[start:end] = text


def _layout(node: Optional[Node], offset: int, level: int, rows: list[list[str]]) -> int:
    """Draw the subtree into ``rows`` and return the width it takes up."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _layout(node.left, offset, level + 1, rows)
    right = _layout(node.right, offset + left + width, level + 1, rows)
    _put(rows[level], offset + left, label)
    if level:
        above = rows[level - 1]
        if is_left:
            _put(above, offset + left + width // 2, "-" * (width + right))
        else:
            _put(above, offset - width // 2, "-" * (left + width))
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def _finish(row: list[str]) -> str:
    """Drop trailing spaces, always keeping the first two columns."""
    text = "".join(row)
    return text[:2] + text[2:].rstrip(" ")


def render(tree: Optional[Node]) -> str:
    """Return the drawing of the tree, each level ending in a newline.

    An empty tree renders as an empty string.
    """
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    return "".join(_finish(row) + "\n" for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to ``file``, standard output by default."""
    out = sys.stdout if file is None else file
    out.write(render(tree))