"""Class analyzer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bindhook.domain.model.syntax import (
    ClassDeclaration,
    ClassMember,
    FieldDefinition,
    MethodDefinition,
)
from bindhook.infrastructure.analyzers.base import (
    CLASS_NODE_TYPES,
    make_location,
    make_span,
    node_text,
)
from bindhook.infrastructure.analyzers.decorator_analyzer import DecoratorAnalyzer

if TYPE_CHECKING:
    from pathlib import Path

    from tree_sitter import Node


class ClassAnalyzer:
    """Extracts class members and their decorators.

    Only direct members of the class body are extracted.
    Stateless analyzer - no state between analyze() calls.
    """

    def __init__(self) -> None:
        self._decorator_analyzer = DecoratorAnalyzer()

    def analyze(self, node: Node, path: Path | None) -> ClassDeclaration:
        """Analyze class declaration or class expression.

        Args:
            node: `class_declaration` or `class` node
            path: Source file path

        Returns:
            ClassDeclaration with its direct members

        Raises:
            ValueError: If node is not a class node (FAIL-FIRST)
        """
        if node.type not in CLASS_NODE_TYPES:
            raise ValueError(f"expected class node, got {node.type}")

        name_node = node.child_by_field_name("name")
        body = node.child_by_field_name("body")

        members: list[ClassMember] = []
        if body is not None:
            for child in body.named_children:
                match child.type:
                    case "field_definition":
                        members.append(self._analyze_field(child, path))
                    case "method_definition":
                        members.append(self._analyze_method(child, path))

        return ClassDeclaration(
            name=node_text(name_node) if name_node is not None else None,
            members=tuple(members),
            span=make_span(node),
            location=make_location(node, path),
        )

    def _analyze_field(self, node: Node, path: Path | None) -> FieldDefinition:
        """Handle: @dec static name = value."""
        prop = node.child_by_field_name("property")
        if prop is None:
            raise ValueError(f"field at {make_location(node, path)} has no property name")

        return FieldDefinition(
            name=node_text(prop),
            name_kind=prop.type,
            decorators=self._decorator_analyzer.analyze(
                node.children_by_field_name("decorator"), path
            ),
            is_static=any(child.type == "static" for child in node.children),
            span=make_span(node),
            location=make_location(node, path),
        )

    def _analyze_method(self, node: Node, path: Path | None) -> MethodDefinition:
        """Handle methods, getters and setters."""
        name = node.child_by_field_name("name")
        return MethodDefinition(
            name=node_text(name) if name is not None else "<method>",
            decorators=self._decorator_analyzer.analyze(
                node.children_by_field_name("decorator"), path
            ),
            span=make_span(node),
            location=make_location(node, path),
        )
