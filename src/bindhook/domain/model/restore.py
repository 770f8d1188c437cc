"""Restore outcome value objects."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RestoreFailure:
    """A single restore write that failed.

    Attributes:
        path: File left in its rewritten state
        error: Error message of the failed write
        original: Content that could not be written back
    """

    path: Path
    error: str
    original: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if not self.error:
            raise ValueError("error must not be empty")


@dataclass(frozen=True, slots=True)
class RestoreReport:
    """Outcome of restoring one deploy cycle.

    Attributes:
        restored: Files written back successfully, in restore order
        failures: Files that could not be written back
    """

    restored: tuple[Path, ...] = ()
    failures: tuple[RestoreFailure, ...] = ()

    @property
    def succeeded(self) -> bool:
        """All recorded files restored."""
        return not self.failures

    @property
    def total(self) -> int:
        """Number of files attempted."""
        return len(self.restored) + len(self.failures)

    @classmethod
    def empty(cls) -> "RestoreReport":
        """Report for a cycle with nothing to restore."""
        return cls()
