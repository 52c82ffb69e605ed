from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from ...constants import StandardizationRules
from ..entities.report import TransformationCounts
from ..entities.table import Row, freeze_rows

_HANDEDNESS_MAP = {
    "left": "L",
    "l": "L",
    "right": "R",
    "r": "R",
    "both": "B",
    "ambidextrous": "B",
}

_BINARY_MAP = {
    "true": "1",
    "false": "0",
    "t": "1",
    "f": "0",
}


def standardize_handedness(value: object) -> str:
    text = "" if value is None else str(value)
    return _HANDEDNESS_MAP.get(text.lower(), text)


def standardize_binary(value: object) -> str:
    text = "" if value is None else str(value)
    return _BINARY_MAP.get(text.lower(), text)


class StandardizationRule(StrEnum):
    HANDEDNESS = "handedness"
    BINARY = "binary"


_RULE_FUNCTIONS: dict[StandardizationRule, Callable[[object], str]] = {
    StandardizationRule.HANDEDNESS: standardize_handedness,
    StandardizationRule.BINARY: standardize_binary,
}


def rule_for_header(header: str) -> StandardizationRule | None:
    if header == StandardizationRules.HANDEDNESS_HEADER:
        return StandardizationRule.HANDEDNESS
    if (
        header.endswith(StandardizationRules.BINARY_SUFFIX)
        or StandardizationRules.BINARY_MARKER in header
    ):
        return StandardizationRule.BINARY
    return None


def apply_rule(rule: StandardizationRule, value: str) -> str:
    return _RULE_FUNCTIONS[rule](value)


@dataclass(frozen=True, slots=True)
class CellChange:
    row_index: int
    header: str
    rule: StandardizationRule
    before: str
    after: str


@dataclass(frozen=True, slots=True)
class StandardizationResult:
    rows: tuple[Row, ...]
    counts: TransformationCounts
    changes: tuple[CellChange, ...]


class ValueStandardizer:
    """Rewrites handedness and boolean cells into their NDA tokens.

    The rule for a column is chosen from its original header text, never from
    a mapped field name, and only cells whose text actually changed are
    counted.
    """

    def standardize(
        self, headers: Sequence[str], data_rows: Sequence[Sequence[str]]
    ) -> StandardizationResult:
        rules = [rule_for_header(header) for header in headers]
        counts = {rule: 0 for rule in StandardizationRule}
        changes: list[CellChange] = []
        standardized: list[list[str]] = []
        for row_index, row in enumerate(data_rows):
            new_row: list[str] = []
            for col_index, value in enumerate(row):
                rule = rules[col_index] if col_index < len(rules) else None
                if rule is None:
                    new_row.append(value)
                    continue
                updated = apply_rule(rule, value)
                if updated != value:
                    counts[rule] += 1
                    changes.append(
                        CellChange(
                            row_index=row_index,
                            header=headers[col_index],
                            rule=rule,
                            before=value,
                            after=updated,
                        )
                    )
                new_row.append(updated)
            standardized.append(new_row)
        return StandardizationResult(
            rows=freeze_rows(standardized),
            counts=TransformationCounts(
                handedness=counts[StandardizationRule.HANDEDNESS],
                binary=counts[StandardizationRule.BINARY],
            ),
            changes=tuple(changes),
        )
