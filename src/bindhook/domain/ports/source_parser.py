"""Source parser port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from bindhook.domain.model.syntax import SyntaxTree


class SourceParserPort(ABC):
    """Port for parsing JavaScript source with decorator syntax.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def parse(self, source: str, path: Path | None = None) -> SyntaxTree:
        """Parse source text into the narrow syntax model.

        Args:
            source: JavaScript source text
            path: File the text came from, for error messages

        Returns:
            SyntaxTree owned by the caller

        Raises:
            ParseError: If the source is not valid under the decorator grammar
        """
        ...
