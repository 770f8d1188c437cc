"""Transform orchestrator: parse, detect, rewrite, print."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bindhook.application.services.detector import DecoratorDetector
from bindhook.application.services.rewriter import RewriteEngine
from bindhook.domain.model.rewrite_result import RewriteResult
from bindhook.infrastructure.adapters.ts_parser import TreeSitterSourceParser

if TYPE_CHECKING:
    from pathlib import Path

    from bindhook.domain.model.source_file import SourceFile
    from bindhook.domain.ports.source_parser import SourceParserPort

logger = logging.getLogger(__name__)


class BindTransformer:
    """Rewrites @bind fields in one JavaScript source text.

    Contracts:
        - No-op: source without @bind is returned unchanged, byte for byte
        - All-or-nothing: any error aborts the file, nothing is returned
        - Idempotent: transforming rewritten output is a no-op
    """

    def __init__(self, parser: SourceParserPort | None = None) -> None:
        """Initialize transformer.

        Args:
            parser: Source parser. Uses TreeSitterSourceParser if None.
        """
        self._parser = parser or TreeSitterSourceParser()
        self._detector = DecoratorDetector()
        self._engine = RewriteEngine()

    def transform(self, source: str, path: Path | None = None) -> RewriteResult:
        """Transform source text.

        Args:
            source: JavaScript source
            path: Originating file, for error messages and logs

        Returns:
            RewriteResult; unmodified results carry the original text

        Raises:
            ParseError: Source is not valid JavaScript
            DecoratorError: A @bind occurrence is malformed
        """
        tree = self._parser.parse(source, path)
        detection = self._detector.detect(tree)

        if not detection.occurrences:
            logger.debug("No @bind fields in %s", path or "<source>")
            return RewriteResult.unchanged(source)

        result = self._engine.rewrite(tree, detection)
        logger.debug(
            "Rewrote %d @bind field(s) in %s%s",
            len(result.occurrences),
            path or "<source>",
            " (import added)" if result.import_inserted else "",
        )
        return result

    def transform_file(self, source_file: SourceFile) -> RewriteResult:
        """Transform a file already read from disk."""
        return self.transform(source_file.text, source_file.path)
