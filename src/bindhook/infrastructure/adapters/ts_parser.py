"""tree-sitter source parser adapter.

Implements SourceParserPort with the tree-sitter JavaScript grammar,
which covers class fields and decorators. The grammar is loaded
explicitly from tree-sitter-javascript; there is no implicit default.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import tree_sitter_javascript
from tree_sitter import Language, Parser

from bindhook.domain.exceptions.parsing import ParseError
from bindhook.domain.model.syntax import Program, SyntaxTree
from bindhook.domain.ports.source_parser import SourceParserPort
from bindhook.infrastructure.analyzers.base import (
    CLASS_NODE_TYPES,
    find_error,
    make_location,
    node_text,
    walk,
)
from bindhook.infrastructure.analyzers.class_analyzer import ClassAnalyzer
from bindhook.infrastructure.analyzers.import_analyzer import ImportAnalyzer

if TYPE_CHECKING:
    from pathlib import Path

    from tree_sitter import Node

logger = logging.getLogger(__name__)

JAVASCRIPT = Language(tree_sitter_javascript.language())

_BOM = "\ufeff".encode()


class TreeSitterSourceParser(SourceParserPort):
    """Parser using tree-sitter to extract the rewrite's syntax subset.

    Stateless between parse() calls.
    FAIL-FIRST: raises ParseError on any syntax error in the source.
    """

    def __init__(self, language: Language = JAVASCRIPT) -> None:
        """Initialize parser with grammar.

        Args:
            language: tree-sitter grammar with decorator support

        Raises:
            TypeError: If language is None
        """
        if language is None:
            raise TypeError("language must not be None")

        self._parser = Parser(language)
        self._import_analyzer = ImportAnalyzer()
        self._class_analyzer = ClassAnalyzer()

    def parse(self, source: str, path: Path | None = None) -> SyntaxTree:
        """Parse JavaScript source.

        FAIL-FIRST: raises ParseError on the first ERROR or MISSING node.

        Args:
            source: JavaScript source text
            path: File the text came from, for error messages

        Returns:
            SyntaxTree with imports and classes

        Raises:
            TypeError: If source is not str
            ParseError: If the source has syntax errors
        """
        if not isinstance(source, str):
            raise TypeError(f"source must be str, got {type(source).__name__}")

        encoded = source.encode("utf-8")
        tree = self._parser.parse(encoded)
        root = tree.root_node

        error = find_error(root)
        if error is not None:
            raise ParseError(path, _describe_error(error), make_location(error, path))

        program = Program(
            imports=self._import_analyzer.analyze(root, path),
            classes=tuple(
                self._class_analyzer.analyze(node, path)
                for node in walk(root)
                if node.type in CLASS_NODE_TYPES
            ),
            insertion_offset=_insertion_offset(root, encoded),
        )
        logger.debug(
            "Parsed %s: %d import(s), %d class(es)",
            path or "<source>",
            len(program.imports),
            len(program.classes),
        )

        return SyntaxTree(
            path=path,
            source=encoded,
            program=program,
            newline="\r\n" if "\r\n" in source else "\n",
        )


def _describe_error(node: Node) -> str:
    """Human-readable reason for an error node."""
    if node.is_missing:
        return f"syntax error: missing {node.type!r}"
    snippet = node_text(node).splitlines()[0] if node.end_byte > node.start_byte else ""
    if len(snippet) > 40:
        snippet = snippet[:40] + "..."
    return f"syntax error: unexpected {snippet!r}" if snippet else "syntax error"


def _insertion_offset(root: Node, source: bytes) -> int:
    """Byte offset of the first statement slot, past a BOM and `#!` line if present."""
    first = root.children[0] if root.children else None
    if first is None or first.type != "hash_bang_line":
        return len(_BOM) if source.startswith(_BOM) else 0

    newline = source.find(b"\n", first.end_byte)
    return len(source) if newline == -1 else newline + 1
