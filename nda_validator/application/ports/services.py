from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.report import ValidationFailure, ValidationReport
    from ...domain.entities.schema import DataStructure
    from ...domain.services.value_standardizer import CellChange


@runtime_checkable
class LoggerPort(Protocol):
    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_file_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None: ...

    def log_framing(self, *, is_template: bool, shortname: str | None) -> None: ...

    def log_transformations(self, changes: tuple[CellChange, ...]) -> None: ...

    def log_report(self, report: ValidationReport) -> None: ...

    def log_failure(self, failure: ValidationFailure) -> None: ...

    def log_mapping_changed(self, header: str, target: str | None) -> None: ...

    def log_ignore_toggled(self, header: str, *, ignored: bool) -> None: ...

    def log_read_discarded(self, filename: str, *, failed: bool) -> None: ...


@runtime_checkable
class FileReaderPort(Protocol):
    async def read_text(self, path: Path) -> str: ...


@runtime_checkable
class SchemaRepositoryPort(Protocol):
    def load(self, path: Path) -> DataStructure: ...

    def load_many(self, paths: list[Path]) -> list[DataStructure]: ...
