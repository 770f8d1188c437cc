"""Console reporter: CycleReport → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from bindhook.domain.model.cycle_report import CycleReport


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        title: Rule title above the report.
        width: Console width in columns.
        force_terminal: Emit ANSI styles even when not writing to a TTY.
    """

    title: str = "BIND DECORATOR REWRITE"
    width: int = 120
    force_terminal: bool = True


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: CycleReport) -> str:
        """Format cycle report as rich formatted string."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

        self._render_header(console, result)
        self._render_files(console, result)

        if result.restore.failures:
            self._render_failures(console, result)

        return output.getvalue()

    def _render_header(self, console: Console, result: CycleReport) -> None:
        """Render header with summary."""
        console.print()
        console.rule(f"[bold]{self._config.title}[/bold]")
        console.print()

        status = "[green]PASS[/green]" if result.passed else "[red]FAIL[/red]"
        console.print(
            f"[bold]Rewritten:[/bold] {len(result.rewritten)}  "
            f"[bold]Skipped:[/bold] {len(result.skipped)}  "
            f"[bold]Restored:[/bold] {len(result.restore.restored)}  "
            f"[bold]Status:[/bold] {status}"
        )
        console.print()

    def _render_files(self, console: Console, result: CycleReport) -> None:
        """Render one row per touched file."""
        if not result.rewritten and not result.skipped:
            return

        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("File", style="cyan")
        table.add_column("Outcome")
        table.add_column("Detail", style="dim")

        restored = set(result.restore.restored)
        for path in result.rewritten:
            outcome = "[green]restored[/green]" if path in restored else "rewritten"
            table.add_row(escape(str(path)), outcome, "")

        for skipped in result.skipped:
            table.add_row(
                escape(str(skipped.path)),
                "[yellow]skipped[/yellow]",
                escape(skipped.reason),
            )

        console.print(table)
        console.print()

    def _render_failures(self, console: Console, result: CycleReport) -> None:
        """Render restore failures."""
        failures = result.restore.failures
        console.print(f"[bold red]RESTORE FAILURES[/bold red] ({len(failures)})")
        console.print()

        for failure in failures:
            console.print(f"  {escape(str(failure.path))}: {escape(failure.error)}")

        console.print()
