"""Snapshot record value object."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SnapshotRecord:
    """Original content of a file rewritten during the current cycle.

    Attributes:
        path: Rewritten file
        original: Text to write back on restore
    """

    path: Path
    original: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if not isinstance(self.original, str):
            raise TypeError(f"original must be str, got {type(self.original).__name__}")
