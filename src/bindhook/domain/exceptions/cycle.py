"""Deploy cycle exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bindhook.domain.exceptions.base import BindHookError

if TYPE_CHECKING:
    from bindhook.domain.model.restore import RestoreReport


class CycleError(BindHookError, RuntimeError):
    """Deploy cycle used out of order.

    Inherits RuntimeError for semantic correctness (invalid state).
    """


class CycleOverlapError(CycleError):
    """Pre-deploy started while the previous cycle was not restored."""

    def __init__(self, pending: int) -> None:
        """Initialize with the number of files still awaiting restore."""
        self.pending = pending
        super().__init__(
            f"Previous deploy cycle still open with {pending} rewritten file(s); "
            "post-deploy restore must run first"
        )


class CycleClosedError(CycleError):
    """Cycle already restored, it cannot record or restore again."""

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("Deploy cycle already restored")


class RestoreError(BindHookError):
    """One or more files could not be restored.

    Every recorded file was attempted before this is raised.

    Attributes:
        report: Full restore outcome, successes included
    """

    def __init__(self, report: RestoreReport) -> None:
        if report is None:
            raise TypeError("report must not be None")
        if not report.failures:
            raise ValueError("RestoreError requires at least one failure")

        self.report = report
        paths = ", ".join(str(failure.path) for failure in report.failures)
        super().__init__(
            f"Failed to restore {len(report.failures)} of {report.total} file(s): {paths}"
        )
