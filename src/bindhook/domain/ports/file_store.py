"""File store port (interface)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path


class FileStorePort(Protocol):
    """Contract for reading and writing script files.

    Implementations must round-trip content byte-exactly: writing back
    what was read leaves the file identical.
    """

    def read_text(self, path: Path) -> str:
        """Read UTF-8 text.

        Raises:
            OSError: If the file cannot be read
        """
        ...

    def write_text(self, path: Path, text: str) -> None:
        """Overwrite file with UTF-8 text.

        Raises:
            OSError: If the file cannot be written
        """
        ...
