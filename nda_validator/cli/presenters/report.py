from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from ...domain.entities.report import (
        SimilarField,
        ValidationReport,
        ValueErrorRecord,
    )
    from ...domain.services.structure_matcher import StructureMatch

MAX_VALUE_ERROR_ROWS = 50


class ReportPresenter:
    """Renders validation reports and structure rankings as rich tables."""

    def __init__(
        self, console: Console, max_value_errors: int = MAX_VALUE_ERROR_ROWS
    ) -> None:
        super().__init__()
        self.console = console
        self.max_value_errors = max_value_errors

    def present(self, report: ValidationReport, *, file_name: str = "") -> None:
        self.console.print()
        self.console.print(self._build_summary_table(report, file_name=file_name))
        if report.missing_required:
            self.console.print()
            self.console.print("[bold red]Missing required fields:[/bold red]")
            for name in report.missing_required:
                self.console.print(f"  [red]•[/red] {escape(name)}")
        if report.missing_recommended:
            self.console.print()
            self.console.print("[bold yellow]Missing recommended fields:[/bold yellow]")
            for name in report.missing_recommended:
                self.console.print(f"  [yellow]•[/yellow] {escape(name)}")
        if report.unknown_fields:
            self.console.print()
            self.console.print(self._build_unknown_table(report))
        if report.value_errors:
            self.console.print()
            self.console.print(self._build_value_error_table(report.value_errors))
            hidden = len(report.value_errors) - self.max_value_errors
            if hidden > 0:
                self.console.print(f"[dim]... and {hidden:,} more value errors[/dim]")
        self.console.print()
        self._print_status(report)

    def present_matches(self, matches: Sequence[StructureMatch]) -> None:
        if not matches:
            self.console.print(
                "[yellow]⚠[/yellow] No data structure matches these headers"
            )
            return
        table = Table(
            title="Matching Data Structures",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
            title_style="bold magenta",
        )
        table.add_column("Structure", style="cyan", no_wrap=True)
        table.add_column("Matches", justify="right", style="yellow", no_wrap=True)
        table.add_column("Match %", justify="right", style="green", no_wrap=True)
        table.add_column("Fields", style="dim", overflow="fold")
        for match in matches:
            table.add_row(
                escape(match.short_name),
                str(match.match_count),
                f"{match.match_percentage:.1f}%",
                escape(", ".join(match.matching_fields)),
            )
        self.console.print(table)

    def _build_summary_table(self, report: ValidationReport, *, file_name: str) -> Table:
        title = "Validation Summary"
        if file_name:
            title = f"{title}: {escape(file_name)}"
        table = Table(
            title=title,
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
            title_style="bold magenta",
        )
        table.add_column("Check", style="cyan", no_wrap=True)
        table.add_column("Result", justify="right", no_wrap=True)
        template = (
            f"yes ({escape(report.detected_shortname or '')})"
            if report.is_submission_template
            else "no"
        )
        table.add_row("Submission template", template)
        table.add_row("Total fields", str(report.total_fields))
        table.add_row("Known fields", f"[green]{report.valid_fields}[/green]")
        table.add_row(
            "Missing required", _count_cell(len(report.missing_required), "red")
        )
        table.add_row(
            "Missing recommended",
            _count_cell(len(report.missing_recommended), "yellow"),
        )
        table.add_row(
            "Unknown fields",
            _count_cell(len(report.outstanding_unknown_fields), "red"),
        )
        table.add_row("Ignored fields", str(len(report.ignored_fields)))
        table.add_row("Value errors", _count_cell(len(report.value_errors), "red"))
        table.add_row("Standardized values", str(report.transformations.total))
        return table

    def _build_unknown_table(self, report: ValidationReport) -> Table:
        table = Table(
            title="Unknown Fields",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
        )
        table.add_column("Column", style="cyan", no_wrap=True)
        table.add_column("Status", no_wrap=True)
        table.add_column("Suggestions", overflow="fold")
        for header in report.unknown_fields:
            status = (
                "[dim]ignored[/dim]"
                if header in report.ignored_fields
                else "[red]outstanding[/red]"
            )
            suggestions = report.suggestions.get(header, ())
            table.add_row(escape(header), status, _format_suggestions(suggestions))
        return table

    def _build_value_error_table(self, errors: Sequence[ValueErrorRecord]) -> Table:
        table = Table(
            title="Value Range Errors",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
        )
        table.add_column("Row", justify="right", style="yellow", no_wrap=True)
        table.add_column("Column", style="cyan", no_wrap=True)
        table.add_column("Value", style="red", overflow="fold")
        table.add_column("Expected", style="dim", overflow="fold")
        for error in errors[: self.max_value_errors]:
            column = escape(error.column)
            if error.is_mapped:
                column = f"{column} [dim]→ {escape(error.mapped_field)}[/dim]"
            table.add_row(
                str(error.row),
                column,
                escape(error.value) if error.value else "[dim](blank)[/dim]",
                escape(error.expected_range),
            )
        return table

    def _print_status(self, report: ValidationReport) -> None:
        if report.is_valid:
            self.console.print("[green]✓[/green] File is ready for submission")
            return
        problems: list[str] = []
        if report.missing_required:
            problems.append(f"{len(report.missing_required)} missing required")
        if report.outstanding_unknown_fields:
            problems.append(f"{len(report.outstanding_unknown_fields)} unknown")
        if report.value_errors:
            problems.append(f"{len(report.value_errors)} value errors")
        self.console.print(f"[red]✗[/red] File is not valid: {', '.join(problems)}")


def _count_cell(count: int, color: str) -> str:
    if count == 0:
        return "[green]0[/green]"
    return f"[{color}]{count}[/{color}]"


def _format_suggestions(suggestions: Sequence[SimilarField]) -> str:
    if not suggestions:
        return "[dim]none[/dim]"
    return ", ".join(
        f"{escape(s.name)} [dim]({s.similarity:.0%})[/dim]" for s in suggestions
    )
