"""Deploy cycle summary."""

from dataclasses import dataclass
from pathlib import Path

from bindhook.domain.model.restore import RestoreReport


@dataclass(frozen=True, slots=True)
class SkippedComponent:
    """Component left untouched because its transform failed.

    Attributes:
        path: Script that failed
        reason: Error message
    """

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class CycleReport:
    """What one deploy cycle rewrote, skipped and restored.

    Used by ReporterProtocol.report() method.
    """

    rewritten: tuple[Path, ...] = ()
    skipped: tuple[SkippedComponent, ...] = ()
    restore: RestoreReport = RestoreReport()

    @property
    def passed(self) -> bool:
        """Nothing skipped and every rewritten file restored."""
        return not self.skipped and self.restore.succeeded

    @classmethod
    def empty(cls) -> "CycleReport":
        """Report for a cycle that touched nothing."""
        return cls()
