"""Rewrite engine: applies validated occurrences to the source text.

Edits are plain text replacements against spans captured before any
change, applied last-first so earlier offsets stay valid. Formatting
outside the replaced spans is preserved byte for byte.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bindhook.domain.model.bind import BIND_IMPORT
from bindhook.domain.model.rewrite_result import RewriteResult
from bindhook.domain.model.syntax import Span

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bindhook.application.services.detector import Detection
    from bindhook.domain.model.syntax import SyntaxTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace span with text. Empty span means insertion."""

    span: Span
    text: str


class RewriteEngine:
    """Rewrites @bind fields and injects the bind import.

    Stateless - no state between rewrite() calls.
    """

    def rewrite(self, tree: SyntaxTree, detection: Detection) -> RewriteResult:
        """Apply all occurrences of a detection to the tree's source.

        Args:
            tree: Parsed source the detection was made on
            detection: Validated occurrences and import status

        Returns:
            RewriteResult, modified iff detection had occurrences
        """
        if not detection.occurrences:
            return RewriteResult.unchanged(tree.source.decode("utf-8"))

        edits = [TextEdit(o.member_span, o.replacement) for o in detection.occurrences]

        insert_import = not detection.has_bind_import
        if insert_import:
            offset = tree.program.insertion_offset
            edits.append(TextEdit(Span(offset, offset), BIND_IMPORT + tree.newline))
            logger.debug("Injecting %r into %s", BIND_IMPORT, tree.path or "<source>")

        return RewriteResult(
            text=apply_edits(tree.source, edits),
            modified=True,
            occurrences=detection.occurrences,
            import_inserted=insert_import,
        )


def apply_edits(source: bytes, edits: Iterable[TextEdit]) -> str:
    """Apply non-overlapping edits to encoded source.

    Args:
        source: UTF-8 encoded source
        edits: Edits with spans into source

    Returns:
        Decoded result text

    Raises:
        ValueError: If edits overlap or a span is out of range (FAIL-FIRST)
    """
    ordered = sorted(edits, key=lambda e: (e.span.start, e.span.end), reverse=True)

    buffer = bytearray(source)
    limit = len(source)
    for edit in ordered:
        if edit.span.end > limit:
            raise ValueError(f"edit span {edit.span} overlaps or exceeds source")
        buffer[edit.span.start : edit.span.end] = edit.text.encode("utf-8")
        limit = edit.span.start

    return buffer.decode("utf-8")
