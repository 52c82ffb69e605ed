from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Row = tuple[str, ...]


def freeze_rows(rows: Iterable[Sequence[str]]) -> tuple[Row, ...]:
    return tuple(tuple(row) for row in rows)


@dataclass(frozen=True, slots=True)
class RawTable:
    rows: tuple[Row, ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> RawTable:
        return cls(rows=freeze_rows(rows))

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows


@dataclass(frozen=True, slots=True)
class Framing:
    header: Row
    data_rows: tuple[Row, ...]
    is_template: bool
    template_row: Row | None = None

    @property
    def detected_shortname(self) -> str | None:
        if not self.is_template or not self.template_row:
            return None
        return self.template_row[0]

    def with_data_rows(self, data_rows: Iterable[Sequence[str]]) -> Framing:
        return Framing(
            header=self.header,
            data_rows=freeze_rows(data_rows),
            is_template=self.is_template,
            template_row=self.template_row,
        )


def cell_at(row: Sequence[str], index: int) -> str:
    return row[index] if index < len(row) else ""
