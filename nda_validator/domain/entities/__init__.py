from .mapping import MappingOverlay
from .report import (
    Classification,
    SimilarField,
    TransformationCounts,
    ValidationFailure,
    ValidationOutcome,
    ValidationReport,
    ValueErrorRecord,
)
from .schema import DataStructure, RequirementLevel, Schema, SchemaField
from .table import Framing, RawTable, Row
from .value_range import (
    EnumRange,
    Interval,
    IntervalRange,
    UnconstrainedRange,
    ValueRange,
    is_value_in_range,
    parse_value_range,
)

__all__ = [
    "Classification",
    "DataStructure",
    "EnumRange",
    "Framing",
    "Interval",
    "IntervalRange",
    "MappingOverlay",
    "RawTable",
    "RequirementLevel",
    "Row",
    "Schema",
    "SchemaField",
    "SimilarField",
    "TransformationCounts",
    "UnconstrainedRange",
    "ValidationFailure",
    "ValidationOutcome",
    "ValidationReport",
    "ValueErrorRecord",
    "ValueRange",
    "is_value_in_range",
    "parse_value_range",
]
