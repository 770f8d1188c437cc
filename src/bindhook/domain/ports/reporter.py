"""Reporter protocol for output formatting.

Users extend bindhook by implementing this Protocol.
NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from bindhook.domain.model.cycle_report import CycleReport


class ReporterProtocol(Protocol):
    """Contract for reporters.

    bindhook provides PlainTextReporter and ConsoleReporter.
    """

    def report(self, result: CycleReport) -> str:
        """Format a cycle report.

        Output is str, not print(). Caller decides destination.

        Args:
            result: Cycle summary to format
        """
        ...
