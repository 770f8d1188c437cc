"""Plain text reporter.

Stdlib-only reporter for logs and non-terminal output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bindhook.domain.model.cycle_report import CycleReport


class PlainTextReporter:
    """Plain text reporter.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, title: str = "bindhook deploy cycle") -> None:
        self._title = title

    def report(self, result: CycleReport) -> str:
        """Format cycle report as plain text.

        Args:
            result: Cycle summary
        """
        lines: list[str] = ["=" * 70, self._title, "=" * 70, ""]

        lines.append("Summary:")
        lines.append(f"  Rewritten: {len(result.rewritten)}")
        lines.append(f"  Skipped: {len(result.skipped)}")
        lines.append(f"  Restored: {len(result.restore.restored)}")
        lines.append(f"  Restore failures: {len(result.restore.failures)}")
        lines.append(f"  Status: {'PASS' if result.passed else 'FAIL'}")

        if result.rewritten:
            lines.extend(["", f"Rewritten ({len(result.rewritten)}):"])
            lines.extend(f"  {path}" for path in result.rewritten)

        if result.skipped:
            lines.extend(["", f"Skipped ({len(result.skipped)}):"])
            for skipped in result.skipped:
                lines.append(f"  {skipped.path}")
                lines.append(f"    {skipped.reason}")

        if result.restore.failures:
            lines.extend(["", f"Restore failures ({len(result.restore.failures)}):"])
            for failure in result.restore.failures:
                lines.append(f"  {failure.path}")
                lines.append(f"    {failure.error}")

        lines.append("")
        return "\n".join(lines)
