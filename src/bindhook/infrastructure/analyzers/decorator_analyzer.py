"""Decorator analyzer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bindhook.domain.model.syntax import (
    CallExpression,
    Decorator,
    Expression,
    Identifier,
    OtherExpression,
)
from bindhook.infrastructure.analyzers.base import (
    make_location,
    make_span,
    named_children,
    node_text,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from tree_sitter import Node


class DecoratorAnalyzer:
    """Converts tree-sitter decorator nodes into Decorator variants.

    Stateless analyzer - no state between analyze() calls.
    """

    def analyze(
        self,
        decorator_nodes: Iterable[Node],
        path: Path | None,
    ) -> tuple[Decorator, ...]:
        """Extract decorators from decorator nodes.

        Args:
            decorator_nodes: `decorator` nodes of a class member
            path: Source file path

        Returns:
            Tuple of Decorator objects in source order
        """
        return tuple(self._analyze_decorator(node, path) for node in decorator_nodes)

    def _analyze_decorator(self, node: Node, path: Path | None) -> Decorator:
        """Analyze single `@expression` node."""
        expression_nodes = list(named_children(node))
        if not expression_nodes:
            # FAIL-FIRST: grammar guarantees an expression after '@'
            raise ValueError(f"decorator at {make_location(node, path)} has no expression")

        return Decorator(
            expression=self._analyze_expression(expression_nodes[0], path),
            span=make_span(node),
            location=make_location(node, path),
        )

    def _analyze_expression(self, node: Node, path: Path | None) -> Expression:
        """Map expression node to the narrow expression variants."""
        match node.type:
            case "identifier":
                # @decorator / argument reference
                return Identifier(
                    name=node_text(node),
                    span=make_span(node),
                    location=make_location(node, path),
                )
            case "call_expression":
                # @decorator(...) or @ns.decorator(...)
                return self._analyze_call(node, path)
            case _:
                return OtherExpression(
                    kind=node.type,
                    text=node_text(node),
                    span=make_span(node),
                    location=make_location(node, path),
                )

    def _analyze_call(self, node: Node, path: Path | None) -> Expression:
        """Analyze call expression with a plain argument list."""
        function = node.child_by_field_name("function")
        arguments = node.child_by_field_name("arguments")

        # Tagged templates and optional chains are not decorator calls
        if function is None or arguments is None or arguments.type != "arguments":
            return OtherExpression(
                kind=node.type,
                text=node_text(node),
                span=make_span(node),
                location=make_location(node, path),
            )

        return CallExpression(
            callee=node_text(function),
            arguments=tuple(
                self._analyze_expression(argument, path)
                for argument in named_children(arguments)
            ),
            span=make_span(node),
            location=make_location(node, path),
        )
