"""Local filesystem store.

Reads and writes raw bytes so restoration is byte-exact: line endings
and a leading BOM survive the read/write round trip.
"""

from __future__ import annotations

from pathlib import Path

from bindhook.domain.exceptions.parsing import ParseError


class LocalFileStore:
    """FileStorePort implementation over pathlib."""

    encoding = "utf-8"

    def read_text(self, path: Path) -> str:
        """Read file as UTF-8 without newline translation.

        Raises:
            OSError: If file cannot be read
            ParseError: If file is not valid UTF-8
        """
        data = Path(path).read_bytes()
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise ParseError(Path(path), f"encoding error: {e}") from e

    def write_text(self, path: Path, text: str) -> None:
        """Overwrite file with UTF-8 text, no newline translation.

        Raises:
            OSError: If file cannot be written
        """
        Path(path).write_bytes(text.encode(self.encoding))
