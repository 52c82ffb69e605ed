"""Unit tests for logger implementations."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from nda_validator.domain.entities.report import (
    TransformationCounts,
    ValidationFailure,
    ValidationReport,
)
from nda_validator.domain.exceptions import ErrorKind
from nda_validator.domain.services.value_standardizer import (
    CellChange,
    StandardizationRule,
)
from nda_validator.infrastructure.logging import (
    ConsoleLogger,
    LogContext,
    LogLevel,
    NullLogger,
)


def _make_logger(verbosity: int) -> tuple[ConsoleLogger, StringIO]:
    buffer = StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    return ConsoleLogger(console=console, verbosity=verbosity), buffer


def _report() -> ValidationReport:
    return ValidationReport(
        headers=("subjectkey",),
        total_fields=1,
        valid_fields=1,
        missing_required=(),
        missing_recommended=(),
        unknown_fields=(),
        value_errors=(),
        transformations=TransformationCounts(),
        is_submission_template=False,
        detected_shortname=None,
    )


class TestConsoleLogger:
    def test_initialization(self):
        logger = ConsoleLogger()

        assert logger.verbosity == 0
        assert logger.get_stats() == {
            "files_loaded": 0,
            "rows_loaded": 0,
            "cells_standardized": 0,
            "warnings": 0,
            "errors": 0,
        }

    def test_message_markers(self):
        logger, buffer = _make_logger(LogLevel.NORMAL)

        logger.info("plain message")
        logger.success("done")
        logger.warning("careful")
        logger.error("broken")

        output = buffer.getvalue()
        assert "plain message" in output
        assert "✓ done" in output
        assert "⚠ careful" in output
        assert "✗ broken" in output
        assert logger.get_stats()["warnings"] == 1
        assert logger.get_stats()["errors"] == 1

    def test_verbosity_gates_output(self):
        logger, buffer = _make_logger(LogLevel.NORMAL)

        logger.verbose("verbose detail")
        logger.debug("debug detail")

        assert buffer.getvalue() == ""

    def test_debug_level_shows_everything(self):
        logger, buffer = _make_logger(LogLevel.DEBUG)

        logger.verbose("verbose detail")
        logger.debug("debug detail")

        assert "verbose detail" in buffer.getvalue()
        assert "debug detail" in buffer.getvalue()

    def test_log_file_loaded(self):
        logger, buffer = _make_logger(LogLevel.VERBOSE)

        logger.log_file_loaded("data.csv", 12, 5)

        assert "Loaded 12 rows from data.csv" in buffer.getvalue()
        assert logger.get_stats()["files_loaded"] == 1
        assert logger.get_stats()["rows_loaded"] == 12

    def test_log_transformations(self):
        logger, buffer = _make_logger(LogLevel.DEBUG)
        change = CellChange(
            row_index=0,
            header="handedness",
            rule=StandardizationRule.HANDEDNESS,
            before="left",
            after="L",
        )

        logger.log_transformations((change,))

        assert "Standardized handedness in handedness: left → L" in buffer.getvalue()
        assert logger.get_stats()["cells_standardized"] == 1

    def test_log_framing(self):
        logger, buffer = _make_logger(LogLevel.VERBOSE)

        logger.log_framing(is_template=True, shortname="demographics")

        assert "Submission template detected: demographics" in buffer.getvalue()

    def test_log_report(self):
        logger, buffer = _make_logger(LogLevel.DEBUG)

        logger.log_report(_report())

        assert "Validated 1 fields: 1 known" in buffer.getvalue()

    def test_log_failure(self):
        logger, buffer = _make_logger(LogLevel.NORMAL)

        logger.log_failure(
            ValidationFailure(kind=ErrorKind.SCHEMA_MISMATCH, message="wrong name")
        )

        assert "SchemaMismatch: wrong name" in buffer.getvalue()
        assert logger.get_stats()["errors"] == 1

    def test_overlay_edits_with_markup_characters(self):
        """Headers and targets that look like rich markup print literally."""
        logger, buffer = _make_logger(LogLevel.VERBOSE)

        logger.log_mapping_changed("note[/x]", "[b]notes")
        logger.log_mapping_changed("note[/x]", None)
        logger.log_ignore_toggled("note[/x]", ignored=True)
        logger.log_ignore_toggled("note[/x]", ignored=False)

        lines = buffer.getvalue().splitlines()
        assert lines == [
            "Mapped note[/x] -> [b]notes",
            "Cleared mapping for note[/x]",
            "Ignoring note[/x]",
            "No longer ignoring note[/x]",
        ]

    def test_log_read_discarded(self):
        logger, buffer = _make_logger(LogLevel.DEBUG)

        logger.log_read_discarded("old[1].csv", failed=False)
        logger.log_read_discarded("old[1].csv", failed=True)

        output = buffer.getvalue()
        assert "Discarded stale read of old[1].csv" in output
        assert "Discarded failed read of old[1].csv: superseded" in output

    def test_context_prefix_at_debug(self):
        logger, buffer = _make_logger(LogLevel.DEBUG)
        logger.set_context(file_name="data.csv")

        logger.info("hello")
        logger.clear_context()
        logger.info("bye")

        lines = buffer.getvalue().splitlines()
        assert lines[0] == "[data.csv] hello"
        assert lines[1] == "bye"

    def test_final_stats(self):
        logger, buffer = _make_logger(LogLevel.VERBOSE)
        logger.log_file_loaded("data.csv", 3)
        logger.warning("careful")

        logger.log_final_stats()

        output = buffer.getvalue()
        assert "Validation Statistics:" in output
        assert "Files loaded: 1" in output
        assert "Warnings: 1" in output

    def test_reset_stats(self):
        logger, _ = _make_logger(LogLevel.NORMAL)
        logger.error("x")

        logger.reset_stats()

        assert logger.get_stats()["errors"] == 0


class TestLogContext:
    def test_elapsed(self):
        assert LogContext(file_name="a.csv").elapsed_ms() >= 0


class TestNullLogger:
    @pytest.mark.parametrize(
        "method", ["info", "success", "warning", "error", "debug", "verbose"]
    )
    def test_methods_are_silent(self, method: str, capsys):
        getattr(NullLogger(), method)("message")

        assert capsys.readouterr().out == ""

    def test_structured_methods(self, capsys):
        logger = NullLogger()

        logger.log_file_loaded("data.csv", 1)
        logger.log_framing(is_template=False, shortname=None)
        logger.log_transformations(())
        logger.log_report(_report())
        logger.log_failure(ValidationFailure(ErrorKind.MALFORMED_INPUT, "bad"))
        logger.log_mapping_changed("a", "b")
        logger.log_ignore_toggled("a", ignored=True)
        logger.log_read_discarded("data.csv", failed=False)

        assert capsys.readouterr().out == ""
