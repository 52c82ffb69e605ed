from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...domain.entities.report import ValidationFailure, ValidationReport
    from ...domain.services.value_standardizer import CellChange


class NullLogger(LoggerPort):
    """Logger that discards everything, for library use and tests."""

    @override
    def info(self, message: str) -> None:
        pass

    @override
    def success(self, message: str) -> None:
        pass

    @override
    def warning(self, message: str) -> None:
        pass

    @override
    def error(self, message: str) -> None:
        pass

    @override
    def debug(self, message: str) -> None:
        pass

    @override
    def verbose(self, message: str) -> None:
        pass

    @override
    def log_file_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None:
        pass

    @override
    def log_framing(self, *, is_template: bool, shortname: str | None) -> None:
        pass

    @override
    def log_transformations(self, changes: tuple[CellChange, ...]) -> None:
        pass

    @override
    def log_report(self, report: ValidationReport) -> None:
        pass

    @override
    def log_failure(self, failure: ValidationFailure) -> None:
        pass

    @override
    def log_mapping_changed(self, header: str, target: str | None) -> None:
        pass

    @override
    def log_ignore_toggled(self, header: str, *, ignored: bool) -> None:
        pass

    @override
    def log_read_discarded(self, filename: str, *, failed: bool) -> None:
        pass
