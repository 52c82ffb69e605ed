from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...domain.entities.report import ValidationFailure, ValidationReport
    from ...domain.services.value_standardizer import CellChange


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


STAT_KEYS = (
    "files_loaded",
    "rows_loaded",
    "cells_standardized",
    "warnings",
    "errors",
)


@dataclass(slots=True)
class LogContext:
    file_name: str = ""
    short_name: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000

    def label(self) -> str:
        return ":".join(part for part in (self.file_name, self.short_name) if part)


class ConsoleLogger(LoggerPort):
    """Rich console logger gated by verbosity.

    Plain messages always print; ``verbose`` needs ``-v`` and ``debug`` needs
    ``-vv``. At debug level each line is prefixed with the current file.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: Counter[str] = Counter(dict.fromkeys(STAT_KEYS, 0))

    def set_context(self, **kwargs: str) -> None:
        context = self._context or LogContext()
        for key, value in kwargs.items():
            if key in LogContext.__slots__:
                setattr(context, key, value)
        self._context = context

    def clear_context(self) -> None:
        self._context = None

    def _emit(self, level: int, message: str, style: str | None = None) -> None:
        if self.verbosity < level:
            return
        text = f"{self._get_prefix()}{message}"
        self.console.print(f"[{style}]{text}[/{style}]" if style else text)

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        self._emit(level, message)

    @override
    def verbose(self, message: str) -> None:
        self._emit(LogLevel.VERBOSE, message, "dim")

    @override
    def debug(self, message: str) -> None:
        self._emit(LogLevel.DEBUG, message, "dim cyan")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_file_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None:
        self.set_context(file_name=filename)
        self._stats["files_loaded"] += 1
        self._stats["rows_loaded"] += row_count
        self.verbose(f"Loaded {row_count:,} rows from {escape(filename)}")
        if column_count is not None:
            self.debug(f"First row has {column_count} cells")

    @override
    def log_framing(self, *, is_template: bool, shortname: str | None) -> None:
        if not is_template:
            self.debug("First row treated as column headers")
            return
        self.set_context(short_name=shortname or "")
        self.verbose(f"Submission template detected: {escape(shortname or '')}")

    @override
    def log_transformations(self, changes: tuple[CellChange, ...]) -> None:
        self._stats["cells_standardized"] += len(changes)
        if self.verbosity < LogLevel.DEBUG:
            return
        for change in changes:
            self.debug(
                f"Standardized {change.rule.value} in {escape(change.header)}: "
                f"{escape(change.before)} → {escape(change.after)}"
            )

    @override
    def log_report(self, report: ValidationReport) -> None:
        self.debug(
            f"Validated {report.total_fields} fields: {report.valid_fields} known, "
            f"{len(report.unknown_fields)} unknown, "
            f"{len(report.value_errors)} value errors"
        )

    @override
    def log_failure(self, failure: ValidationFailure) -> None:
        self.error(f"{failure.kind.value}: {escape(failure.message)}")

    @override
    def log_mapping_changed(self, header: str, target: str | None) -> None:
        if target:
            self.verbose(f"Mapped {escape(header)} -> {escape(target)}")
        else:
            self.verbose(f"Cleared mapping for {escape(header)}")

    @override
    def log_ignore_toggled(self, header: str, *, ignored: bool) -> None:
        state = "Ignoring" if ignored else "No longer ignoring"
        self.verbose(f"{state} {escape(header)}")

    @override
    def log_read_discarded(self, filename: str, *, failed: bool) -> None:
        if failed:
            self.debug(f"Discarded failed read of {escape(filename)}: superseded")
        else:
            self.debug(f"Discarded stale read of {escape(filename)}")

    def log_final_stats(self) -> None:
        if self.verbosity < LogLevel.VERBOSE:
            return
        stats = self._stats
        lines = [
            "Validation Statistics:",
            f"  Files loaded: {stats['files_loaded']}",
            f"  Rows loaded: {stats['rows_loaded']:,}",
            f"  Cells standardized: {stats['cells_standardized']:,}",
        ]
        self.console.print()
        for line in lines:
            self.console.print(f"[dim]{line}[/dim]")
        for key, style in (("warnings", "yellow"), ("errors", "red")):
            if stats[key]:
                self.console.print(
                    f"[dim {style}]  {key.capitalize()}: {stats[key]}[/dim {style}]"
                )

    def get_stats(self) -> dict[str, int]:
        return dict(self._stats)

    def reset_stats(self) -> None:
        self._stats = Counter(dict.fromkeys(STAT_KEYS, 0))

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        label = self._context.label()
        return escape(f"[{label}] ") if label else ""
