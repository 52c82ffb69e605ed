from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..entities.report import Classification
from ..entities.schema import RequirementLevel, Schema, SchemaField


def classify(
    headers: Sequence[str],
    schema: Schema | Iterable[SchemaField],
) -> Classification:
    """Partition headers into required, recommended and unknown fields.

    Only the raw header text is compared. A mapping overlay changes range
    checks and export, never this classification. Fields with the ``Other``
    requirement level are neither required nor recommended and therefore
    show up as unknown when present.
    """
    resolved_schema = Schema.coerce(schema)
    required = resolved_schema.names_with_level(RequirementLevel.REQUIRED)
    recommended = resolved_schema.names_with_level(RequirementLevel.RECOMMENDED)
    known = set(required) | set(recommended)
    present = set(headers)
    return Classification(
        required=tuple(required),
        recommended=tuple(recommended),
        missing_required=tuple(name for name in required if name not in present),
        missing_recommended=tuple(
            name for name in recommended if name not in present
        ),
        unknown_fields=tuple(header for header in headers if header not in known),
        valid_fields=sum(1 for header in headers if header in known),
    )
