"""Deploy cycle: snapshots of rewritten files and their restoration.

One DeployCycle covers one pre-deploy/post-deploy pair. It is created
by the pre-deploy handler and handed to the post-deploy handler; it is
never shared between cycles.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from bindhook.domain.exceptions.cycle import CycleClosedError, RestoreError
from bindhook.domain.model.restore import RestoreFailure, RestoreReport
from bindhook.domain.model.snapshot import SnapshotRecord

if TYPE_CHECKING:
    from bindhook.domain.ports.file_store import FileStorePort

logger = logging.getLogger(__name__)


class CycleState(Enum):
    """Deploy cycle lifecycle."""

    OPEN = "open"  # recording rewrites
    RESTORED = "restored"  # originals written back, records cleared


class DeployCycle:
    """Original contents of every file rewritten in one deploy cycle.

    Contracts:
        - First sight wins: a path is recorded at most once per cycle
        - Restore attempts every record, even after a failed write
        - Single use: after restore_all() the cycle is closed and empty
    """

    __slots__ = ("_records", "_state")

    def __init__(self) -> None:
        self._records: dict[Path, SnapshotRecord] = {}
        self._state = CycleState.OPEN

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str | Path) and Path(path) in self._records

    @property
    def state(self) -> CycleState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_open(self) -> bool:
        """Cycle still accepts records and awaits restore."""
        return self._state is CycleState.OPEN

    @property
    def records(self) -> tuple[SnapshotRecord, ...]:
        """Recorded snapshots in record order."""
        return tuple(self._records.values())

    @property
    def paths(self) -> tuple[Path, ...]:
        """Recorded paths in record order."""
        return tuple(self._records)

    def record(self, path: Path, original: str) -> bool:
        """Remember the original content of a rewritten file.

        Args:
            path: File about to be (or just) rewritten
            original: Content before the rewrite

        Returns:
            True if recorded, False if path was already recorded this cycle

        Raises:
            CycleClosedError: Cycle already restored
        """
        self._ensure_open()

        key = Path(path)
        if key in self._records:
            logger.debug("Keeping first snapshot of %s", key)
            return False

        self._records[key] = SnapshotRecord(path=key, original=original)
        return True

    def discard(self, path: Path) -> bool:
        """Forget a record whose file was never modified.

        Args:
            path: Recorded file

        Returns:
            True if a record was removed

        Raises:
            CycleClosedError: Cycle already restored
        """
        self._ensure_open()

        removed = self._records.pop(Path(path), None) is not None
        if removed:
            logger.debug("Dropped snapshot of unmodified %s", path)
        return removed

    def restore_all(self, store: FileStorePort) -> RestoreReport:
        """Write every original back and close the cycle.

        Records are cleared and the cycle closed whatever the outcome,
        so no snapshot leaks into a later cycle.

        Args:
            store: File store to write through

        Returns:
            RestoreReport with every file restored

        Raises:
            CycleClosedError: Cycle already restored
            RestoreError: At least one write failed; carries the full report
        """
        self._ensure_open()

        records = tuple(self._records.values())
        self._records.clear()
        self._state = CycleState.RESTORED

        restored: list[Path] = []
        failures: list[RestoreFailure] = []
        for record in records:
            try:
                store.write_text(record.path, record.original)
            except Exception as exc:  # collected, not raised: later records still restored
                logger.error("Failed to restore %s: %s", record.path, exc)
                failures.append(
                    RestoreFailure(
                        path=record.path,
                        error=str(exc) or type(exc).__name__,
                        original=record.original,
                    )
                )
                continue
            logger.info("Restored %s", record.path)
            restored.append(record.path)

        report = RestoreReport(restored=tuple(restored), failures=tuple(failures))
        if not report.succeeded:
            raise RestoreError(report)
        return report

    def _ensure_open(self) -> None:
        """FAIL-FIRST: raise if cycle already restored."""
        if self._state is not CycleState.OPEN:
            raise CycleClosedError
