"""Tests for reporters/plain_text.py."""

from pathlib import Path

from bindhook.application.reporters.plain_text import PlainTextReporter
from bindhook.domain.model.cycle_report import CycleReport, SkippedComponent
from bindhook.domain.model.restore import RestoreFailure, RestoreReport


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_reports_empty_cycle(self) -> None:
        """Reports PASS when nothing happened."""
        text = PlainTextReporter().report(CycleReport.empty())

        assert "bindhook deploy cycle" in text
        assert "Rewritten: 0" in text
        assert "Status: PASS" in text

    def test_reports_restored_cycle(self) -> None:
        """Lists every rewritten file."""
        paths = (Path("a/a.js"), Path("b/b.js"))
        report = CycleReport(rewritten=paths, restore=RestoreReport(restored=paths))

        text = PlainTextReporter().report(report)

        assert "Rewritten: 2" in text
        assert "Restored: 2" in text
        assert "  a/a.js" in text
        assert "  b/b.js" in text
        assert "Status: PASS" in text

    def test_reports_skipped(self) -> None:
        """Skipped components fail the cycle and show their reason."""
        skipped = SkippedComponent(path=Path("c/c.js"), reason="C.x: bad at c.js:2:4")

        text = PlainTextReporter().report(CycleReport(skipped=(skipped,)))

        assert "Skipped (1):" in text
        assert "C.x: bad at c.js:2:4" in text
        assert "Status: FAIL" in text

    def test_reports_restore_failures(self) -> None:
        """Restore failures are listed with their error."""
        failure = RestoreFailure(path=Path("a/a.js"), error="Permission denied", original="x")
        report = CycleReport(
            rewritten=(Path("a/a.js"),),
            restore=RestoreReport(failures=(failure,)),
        )

        text = PlainTextReporter().report(report)

        assert "Restore failures: 1" in text
        assert "Permission denied" in text
        assert "Status: FAIL" in text

    def test_custom_title(self) -> None:
        assert "bindhook scan" in PlainTextReporter(title="bindhook scan").report(CycleReport())
