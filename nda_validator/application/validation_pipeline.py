"""Pure composition of the validation stages.

Every call recomputes the whole report from the raw table, the schema and
the current overlay; nothing is carried over between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..config import ValidatorConfig
from ..constants import Messages
from ..domain.entities.report import ValidationReport
from ..domain.entities.schema import Schema
from ..domain.exceptions import MalformedInputError, ValidatorError
from ..domain.services.csv_ingestor import (
    detect_framing,
    parse_table,
    validate_template_shortname,
)
from ..domain.services.range_validator import RangeValidator
from ..domain.services.schema_classifier import classify
from ..domain.services.structure_matcher import rank_structures
from ..domain.services.suggestion_engine import SuggestionEngine
from ..domain.services.template_exporter import export_template
from ..domain.services.value_standardizer import ValueStandardizer

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..domain.entities.mapping import MappingOverlay
    from ..domain.entities.report import TransformationCounts
    from ..domain.entities.schema import DataStructure, SchemaField
    from ..domain.entities.table import Framing, RawTable
    from ..domain.services.structure_matcher import StructureMatch
    from ..domain.services.value_standardizer import CellChange


@dataclass(frozen=True, slots=True)
class PipelineResult:
    report: ValidationReport
    framing: Framing
    changes: tuple[CellChange, ...]


def read_table(text: str) -> RawTable:
    """Parse file content, mapping any parser fault to MalformedInput."""
    try:
        table = parse_table(text)
    except ValidatorError:
        raise
    except Exception as e:
        raise MalformedInputError(Messages.PARSE_FAILED) from e
    if table.is_empty:
        raise MalformedInputError(Messages.EMPTY_FILE)
    return table


def prepare_framing(
    table: RawTable, short_name: str | None
) -> tuple[Framing, tuple[CellChange, ...], TransformationCounts]:
    framing = detect_framing(table.rows)
    if framing.is_template and short_name and framing.template_row is not None:
        validate_template_shortname(framing.template_row, short_name)
    standardized = ValueStandardizer().standardize(framing.header, framing.data_rows)
    return (
        framing.with_data_rows(standardized.rows),
        standardized.changes,
        standardized.counts,
    )


def run_pipeline(
    table: RawTable,
    schema: Schema | Iterable[SchemaField],
    overlay: MappingOverlay,
    *,
    short_name: str | None = None,
    config: ValidatorConfig | None = None,
) -> PipelineResult:
    """Run framing, standardization, classification, range checks and suggestions.

    Raises:
        MalformedInputError: the table has no usable header.
        SchemaMismatchError: the template row does not match ``short_name``.
    """
    config = config or ValidatorConfig()
    resolved_schema = Schema.coerce(schema)
    framing, changes, counts = prepare_framing(table, short_name)
    headers = framing.header
    mapping = overlay.mapping
    classification = classify(headers, resolved_schema)
    value_errors = RangeValidator(resolved_schema).validate_values(
        headers, framing.data_rows, mapping
    )
    engine = SuggestionEngine(
        resolved_schema,
        max_suggestions=config.max_suggestions,
        threshold=config.suggestion_threshold,
        fuzzy=config.fuzzy_suggestions,
    )
    report = ValidationReport(
        headers=headers,
        total_fields=len(headers),
        valid_fields=classification.valid_fields,
        missing_required=classification.missing_required,
        missing_recommended=classification.missing_recommended,
        unknown_fields=classification.unknown_fields,
        value_errors=tuple(value_errors),
        transformations=counts,
        is_submission_template=framing.is_template,
        detected_shortname=framing.detected_shortname,
        ignored_fields=overlay.ignored,
        suggestions=engine.suggest_all(classification.unknown_fields),
    )
    return PipelineResult(report=report, framing=framing, changes=changes)


def export_table(
    framing: Framing,
    overlay: MappingOverlay,
    short_name: str | None,
    *,
    config: ValidatorConfig | None = None,
) -> str:
    config = config or ValidatorConfig()
    return export_template(
        framing.header,
        framing.data_rows,
        overlay.mapping,
        overlay.ignored,
        short_name,
        quote_cells=config.quote_exported_cells,
    )


def match_structures(
    table: RawTable, structures: Iterable[DataStructure]
) -> list[StructureMatch]:
    """Rank candidate structures against the column headers of ``table``."""
    framing = detect_framing(table.rows)
    return rank_structures(framing.header, structures)
