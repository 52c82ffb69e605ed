"""Per-cell range checking against the resolved schema field."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from ...constants import Defaults, StandardizationRules
from ..entities.report import ValueErrorRecord
from ..entities.schema import Schema, SchemaField
from ..entities.table import cell_at
from ..entities.value_range import EnumRange, ValueRange, parse_value_range
from .value_standardizer import standardize_binary, standardize_handedness


def restandardize_for_range(value: str, value_range: ValueRange | None) -> str:
    """Apply the standardization implied by the shape of an enumeration.

    Only an enumeration of exactly ``{R, L}`` or exactly ``{0, 1}`` triggers a
    rewrite; the header name plays no part here.
    """
    if not isinstance(value_range, EnumRange):
        return value
    tokens = value_range.token_set()
    if tokens == StandardizationRules.HANDEDNESS_TOKENS:
        return standardize_handedness(value)
    if tokens == StandardizationRules.BINARY_TOKENS:
        return standardize_binary(value)
    return value


class RangeValidator:
    def __init__(self, schema: Schema | Iterable[SchemaField]) -> None:
        super().__init__()
        self.schema = Schema.coerce(schema)
        self._ranges: dict[str, ValueRange] = {}
        for schema_field in self.schema:
            parsed = parse_value_range(schema_field.value_range)
            if parsed is not None:
                self._ranges[schema_field.name] = parsed

    def range_for(self, field_name: str) -> ValueRange | None:
        return self._ranges.get(field_name)

    def validate_values(
        self,
        headers: Sequence[str],
        rows: Sequence[Sequence[str]],
        mapping: Mapping[str, str] | None = None,
    ) -> list[ValueErrorRecord]:
        """Check every data cell; ``rows`` excludes the header row.

        Row numbers in the returned records count the header as row 1, so the
        first data row is reported as row 2.
        """
        mapping = mapping or {}
        resolved = [(header, mapping.get(header) or header) for header in headers]
        errors: list[ValueErrorRecord] = []
        for row_index, row in enumerate(rows):
            for col_index, (header, mapped_field) in enumerate(resolved):
                value_range = self._ranges.get(mapped_field)
                if value_range is None:
                    continue
                value = restandardize_for_range(cell_at(row, col_index), value_range)
                if value_range.contains(value):
                    continue
                errors.append(
                    ValueErrorRecord(
                        row=row_index + Defaults.DATA_ROW_OFFSET,
                        column=header,
                        mapped_field=mapped_field,
                        value=value,
                        expected_range=value_range.original,
                    )
                )
        return errors


def validate_values(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    mapping: Mapping[str, str] | None,
    schema: Schema | Iterable[SchemaField],
) -> list[ValueErrorRecord]:
    return RangeValidator(schema).validate_values(headers, rows, mapping)
