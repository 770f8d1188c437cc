"""Import statement analyzer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bindhook.domain.model.syntax import ImportDeclaration, ImportSpecifier
from bindhook.infrastructure.analyzers.base import (
    make_location,
    make_span,
    node_text,
    string_value,
)

if TYPE_CHECKING:
    from pathlib import Path

    from tree_sitter import Node


class ImportAnalyzer:
    """Extracts top-level imports from a program node.

    Stateless analyzer - no state between analyze() calls.
    """

    def analyze(self, root: Node, path: Path | None) -> tuple[ImportDeclaration, ...]:
        """Extract all top-level import statements.

        Args:
            root: `program` node
            path: Source file path

        Returns:
            Tuple of ImportDeclaration objects in source order
        """
        return tuple(
            self._analyze_import(child, path)
            for child in root.named_children
            if child.type == "import_statement"
        )

    def _analyze_import(self, node: Node, path: Path | None) -> ImportDeclaration:
        """Handle: import X, { a, b as c } from "m"; import "m"."""
        source = node.child_by_field_name("source")
        if source is None:
            raise ValueError(f"import at {make_location(node, path)} has no source")

        specifiers: list[ImportSpecifier] = []
        for clause in node.named_children:
            if clause.type != "import_clause":
                continue
            for part in clause.named_children:
                if part.type == "named_imports":
                    specifiers.extend(self._analyze_named_imports(part))

        return ImportDeclaration(
            source=string_value(source),
            specifiers=tuple(specifiers),
            span=make_span(node),
            location=make_location(node, path),
        )

    def _analyze_named_imports(self, node: Node) -> list[ImportSpecifier]:
        """Handle: { a, b as c, "d" as e }."""
        specifiers: list[ImportSpecifier] = []
        for spec in node.named_children:
            if spec.type != "import_specifier":
                continue
            name = spec.child_by_field_name("name")
            alias = spec.child_by_field_name("alias")
            if name is None:
                continue
            imported = string_value(name)
            specifiers.append(
                ImportSpecifier(
                    imported=imported,
                    local=node_text(alias) if alias is not None else imported,
                )
            )
        return specifiers
