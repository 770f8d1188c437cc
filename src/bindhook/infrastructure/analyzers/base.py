"""Base utilities for tree-sitter analyzers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bindhook.domain.model.location import Location
from bindhook.domain.model.syntax import Span

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from tree_sitter import Node

CLASS_NODE_TYPES = frozenset({"class_declaration", "class"})


def make_location(node: Node, path: Path | None) -> Location:
    """Create Location from tree-sitter node.

    tree-sitter rows are 0-based, Location lines are 1-based.
    Columns are byte columns.

    Args:
        node: Node with position info
        path: Source file path, None for in-memory source

    Returns:
        Location pointing to node
    """
    row, column = node.start_point
    end_row, end_column = node.end_point
    return Location(
        file=path,
        line=row + 1,
        column=column,
        end_line=end_row + 1,
        end_column=end_column,
    )


def make_span(node: Node) -> Span:
    """Byte span covered by node."""
    return Span(start=node.start_byte, end=node.end_byte)


def node_text(node: Node) -> str:
    """Decoded source text of node."""
    text = node.text
    if text is None:
        raise ValueError(f"{node.type} node carries no source text")
    return text.decode("utf-8")


def named_children(node: Node) -> Iterator[Node]:
    """Named children, comments skipped."""
    for child in node.named_children:
        if child.type != "comment":
            yield child


def walk(node: Node) -> Iterator[Node]:
    """Pre-order traversal in document order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def find_error(node: Node) -> Node | None:
    """First ERROR or MISSING node in document order, None if tree is clean."""
    if not node.has_error:
        return None
    for current in walk(node):
        if current.is_error or current.is_missing:
            return current
    return None


def string_value(node: Node) -> str:
    """Value of a string literal node, quotes stripped."""
    text = node_text(node)
    if node.type == "string" and len(text) >= 2:
        return text[1:-1]
    return text
