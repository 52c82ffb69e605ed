from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..exceptions import ErrorKind


@dataclass(frozen=True, slots=True)
class SimilarField:
    name: str
    similarity: float
    aliases: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ValueErrorRecord:
    row: int
    column: str
    mapped_field: str
    value: str
    expected_range: str

    @property
    def is_mapped(self) -> bool:
        return self.mapped_field != self.column


@dataclass(frozen=True, slots=True)
class TransformationCounts:
    handedness: int = 0
    binary: int = 0

    @property
    def total(self) -> int:
        return self.handedness + self.binary


@dataclass(frozen=True, slots=True)
class Classification:
    required: tuple[str, ...]
    recommended: tuple[str, ...]
    missing_required: tuple[str, ...]
    missing_recommended: tuple[str, ...]
    unknown_fields: tuple[str, ...]
    valid_fields: int


def _empty_suggestions() -> Mapping[str, tuple[SimilarField, ...]]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ValidationReport:
    headers: tuple[str, ...]
    total_fields: int
    valid_fields: int
    missing_required: tuple[str, ...]
    missing_recommended: tuple[str, ...]
    unknown_fields: tuple[str, ...]
    value_errors: tuple[ValueErrorRecord, ...]
    transformations: TransformationCounts
    is_submission_template: bool
    detected_shortname: str | None
    ignored_fields: frozenset[str] = frozenset()
    suggestions: Mapping[str, tuple[SimilarField, ...]] = field(
        default_factory=_empty_suggestions
    )

    @property
    def has_all_required_fields(self) -> bool:
        return not self.missing_required

    @property
    def has_valid_ranges(self) -> bool:
        return not self.value_errors

    @property
    def outstanding_unknown_fields(self) -> tuple[str, ...]:
        return tuple(f for f in self.unknown_fields if f not in self.ignored_fields)

    @property
    def is_valid(self) -> bool:
        return (
            not self.missing_required
            and not self.outstanding_unknown_fields
            and not self.value_errors
        )


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    kind: ErrorKind
    message: str

    @property
    def is_valid(self) -> bool:
        return False


ValidationOutcome = ValidationReport | ValidationFailure
