"""Stateful validation session.

A session owns the raw table of the current file and the user's mapping
overlay. Every change (a new file, a mapping edit, an ignore toggle) runs
the full pipeline again and replaces the outcome; nothing is patched
incrementally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..config import ValidatorConfig
from ..constants import Messages
from ..domain.entities.mapping import MappingOverlay
from ..domain.entities.report import ValidationFailure
from ..domain.entities.schema import Schema
from ..domain.exceptions import (
    AcquisitionFailureError,
    MalformedInputError,
    ValidatorError,
)
from ..domain.services.template_exporter import export_filename
from .validation_pipeline import export_table, read_table, run_pipeline

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from ..domain.entities.report import ValidationOutcome, ValidationReport
    from ..domain.entities.schema import SchemaField
    from ..domain.entities.table import Framing, RawTable
    from .ports.services import FileReaderPort, LoggerPort


class ValidationSession:
    """Owns one file's table, the mapping overlay and the latest outcome.

    Example:
        >>> session = ValidationSession(schema, short_name="demographics02")
        >>> session.load_text(text)
        >>> session.set_mapping("subj_id", "subjectkey")
        >>> session.report.is_valid
    """

    def __init__(
        self,
        schema: Schema | Iterable[SchemaField],
        *,
        short_name: str | None = None,
        config: ValidatorConfig | None = None,
        logger: LoggerPort | None = None,
        file_reader: FileReaderPort | None = None,
    ) -> None:
        super().__init__()
        self.schema = Schema.coerce(schema)
        self.short_name = short_name
        self.config = config or ValidatorConfig()
        if logger is None:
            from ..infrastructure.logging.null_logger import NullLogger

            logger = NullLogger()
        self.logger = logger
        self._file_reader = file_reader
        self._table: RawTable | None = None
        self._framing: Framing | None = None
        self._overlay = MappingOverlay()
        self._outcome: ValidationOutcome | None = None
        self._generation = 0

    @property
    def overlay(self) -> MappingOverlay:
        return self._overlay

    @property
    def mapping(self) -> dict[str, str]:
        return dict(self._overlay.mapping)

    @property
    def ignored_headers(self) -> frozenset[str]:
        return self._overlay.ignored

    @property
    def table(self) -> RawTable | None:
        return self._table

    @property
    def framing(self) -> Framing | None:
        return self._framing

    @property
    def outcome(self) -> ValidationOutcome | None:
        return self._outcome

    @property
    def report(self) -> ValidationReport | None:
        if isinstance(self._outcome, ValidationFailure):
            return None
        return self._outcome

    @property
    def failure(self) -> ValidationFailure | None:
        if isinstance(self._outcome, ValidationFailure):
            return self._outcome
        return None

    @property
    def generation(self) -> int:
        return self._generation

    def load_text(
        self, text: str, *, filename: str = "<text>", reset_overlay: bool = True
    ) -> ValidationOutcome:
        """Replace the current file with ``text`` and validate it."""
        self._generation += 1
        return self._accept_text(text, filename=filename, reset_overlay=reset_overlay)

    async def load_file(
        self, path: Path, *, reset_overlay: bool = True
    ) -> ValidationOutcome | None:
        """Read ``path`` asynchronously, then validate it.

        Returns None when a newer load started while this read was pending;
        the late result is discarded and the newer state is kept.
        """
        self._generation += 1
        generation = self._generation
        reader = self._file_reader
        if reader is None:
            from ..infrastructure.io.file_reader import AsyncFileReader

            reader = AsyncFileReader(encoding=self.config.encoding)
            self._file_reader = reader
        try:
            text = await reader.read_text(path)
        except AcquisitionFailureError as e:
            if generation != self._generation:
                self.logger.log_read_discarded(path.name, failed=True)
                return None
            self._table = None
            self._framing = None
            return self._fail(e, reset_overlay=reset_overlay)
        if generation != self._generation:
            self.logger.log_read_discarded(path.name, failed=False)
            return None
        return self._accept_text(text, filename=path.name, reset_overlay=reset_overlay)

    def set_mapping(self, header: str, target: str | None) -> ValidationOutcome | None:
        self._overlay = self._overlay.with_mapping(header, target)
        self.logger.log_mapping_changed(header, target or None)
        return self._recompute()

    def toggle_ignored(self, header: str) -> ValidationOutcome | None:
        self._overlay = self._overlay.with_ignore_toggled(header)
        self.logger.log_ignore_toggled(header, ignored=self._overlay.is_ignored(header))
        return self._recompute()

    def reset_overlay(self) -> ValidationOutcome | None:
        self._overlay = MappingOverlay()
        return self._recompute()

    def export(self) -> str:
        """Return the corrected submission template for the current file.

        Raises:
            MalformedInputError: no successfully framed file is loaded.
        """
        if self._framing is None:
            raise MalformedInputError("No validated file to export.")
        return export_table(
            self._framing, self._overlay, self.short_name, config=self.config
        )

    def export_filename(self) -> str:
        return export_filename(self.short_name)

    def _accept_text(
        self, text: str, *, filename: str, reset_overlay: bool
    ) -> ValidationOutcome:
        if reset_overlay:
            self._overlay = MappingOverlay()
        self._framing = None
        try:
            self._table = read_table(text)
        except ValidatorError as e:
            self._table = None
            return self._fail(e, reset_overlay=False)
        first_row = self._table.rows[0]
        self.logger.log_file_loaded(filename, len(self._table), len(first_row))
        outcome = self._recompute(new_file=True)
        assert outcome is not None
        return outcome

    def _recompute(self, *, new_file: bool = False) -> ValidationOutcome | None:
        """Run the pipeline again over the current table and overlay.

        Framing and standardization depend only on the table, so they are
        logged once per loaded file rather than on every overlay edit.
        """
        if self._table is None:
            return self._outcome
        try:
            result = run_pipeline(
                self._table,
                self.schema,
                self._overlay,
                short_name=self.short_name,
                config=self.config,
            )
        except ValidatorError as e:
            self._framing = None
            return self._fail(e, reset_overlay=False)
        self._framing = result.framing
        if new_file:
            self.logger.log_framing(
                is_template=result.report.is_submission_template,
                shortname=result.report.detected_shortname,
            )
            self.logger.log_transformations(result.changes)
        self.logger.log_report(result.report)
        self._outcome = result.report
        return self._outcome

    def _fail(self, error: ValidatorError, *, reset_overlay: bool) -> ValidationFailure:
        if reset_overlay:
            self._overlay = MappingOverlay()
        message = str(error) or Messages.PARSE_FAILED
        failure = ValidationFailure(kind=error.kind, message=message)
        self.logger.log_failure(failure)
        self._outcome = failure
        return failure
