"""Console reporter: field reports → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fieldcheck.domain.model.evaluation import FieldReport


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        title: Header title.
        show_passed: Show rows for valid fields.
        show_values: Show field values. Off by default (passwords).
        width: Console width in characters.
    """

    title: str = "VALIDATION RESULT"
    show_passed: bool = True
    show_values: bool = False
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


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

    def report(self, reports: Sequence[FieldReport]) -> str:
        """Format field reports as rich formatted string.

        Args:
            reports: Field reports.

        Returns:
            Formatted string with colors and a results table.
        """
        output = StringIO()
        console = Console(
            file=output, force_terminal=True, width=self._config.width, highlight=False
        )

        failed = sum(1 for r in reports if r.result.failed)

        console.print()
        console.rule(f"[bold]{escape(self._config.title)}[/bold]")
        console.print()
        console.print(
            f"[bold]Fields:[/bold] {len(reports)} "
            f"(valid: {len(reports) - failed}, invalid: {failed})"
        )
        console.print()

        rows = [r for r in reports if self._config.show_passed or r.result.failed]
        if rows:
            console.print(self._build_table(rows))

        status = "[bold red]FAILED[/bold red]" if failed else "[bold green]PASSED[/bold green]"
        console.print(f"[bold]Result:[/bold] {status}")

        return output.getvalue()

    def _build_table(self, reports: Sequence[FieldReport]) -> Table:
        """Build results table."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Field")
        table.add_column("Status")
        table.add_column("Rule")
        table.add_column("Message")
        if self._config.show_values:
            table.add_column("Value")

        for field_report in reports:
            result = field_report.result
            status = "[green]valid[/green]" if result.passed else "[red]invalid[/red]"
            row = [
                escape(field_report.label or "-"),
                status,
                escape(result.rule_name or ""),
                escape(result.message or ""),
            ]
            if self._config.show_values:
                row.append("" if result.value is None else escape(result.value))
            table.add_row(*row)

        return table
