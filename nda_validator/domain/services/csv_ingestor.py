"""Line-level CSV parsing and submission-template framing detection.

Parsing is deliberately line oriented: a quoted cell may contain the
delimiter or doubled quotes, but never a line break.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ...constants import Messages, Patterns, TemplateFraming
from ..entities.table import Framing, RawTable, freeze_rows
from ..exceptions import MalformedInputError, SchemaMismatchError

if TYPE_CHECKING:
    from collections.abc import Sequence

_TRAILING_DIGITS_RE = re.compile(Patterns.TRAILING_DIGITS, re.ASCII)
_VERSION_RE = re.compile(Patterns.VERSION_NUMBER, re.ASCII)
_LINE_BREAK_RE = re.compile("\r?\n")


def parse_line(line: str) -> list[str]:
    """Split one CSV line into trimmed cells.

    A doubled quote always yields a literal quote character; a single quote
    toggles the quoted state, inside which commas are kept as data.

    Example:
        >>> parse_line('a,"b""c",d')
        ['a', 'b"c', 'd']
    """
    quote = TemplateFraming.QUOTE
    delimiter = TemplateFraming.DELIMITER
    cells: list[str] = []
    current: list[str] = []
    in_quotes = False
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == quote:
            if index + 1 < length and line[index + 1] == quote:
                current.append(quote)
                index += 2
                continue
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        index += 1
    cells.append("".join(current).strip())
    return cells


def parse_table(text: str) -> RawTable:
    lines = [line for line in _LINE_BREAK_RE.split(text) if line.strip()]
    return RawTable.from_rows(parse_line(line) for line in lines)


def is_template_row(row: Sequence[str]) -> bool:
    return len(row) <= TemplateFraming.MAX_TEMPLATE_CELLS and all(
        cell.strip() for cell in row
    )


def detect_framing(rows: Sequence[Sequence[str]]) -> Framing:
    """Decide whether the first row is template metadata or the header.

    Raises:
        MalformedInputError: no rows at all, or a template row without a
            header row below it.
    """
    if not rows:
        raise MalformedInputError(Messages.EMPTY_FILE)
    frozen = freeze_rows(rows)
    first = frozen[0]
    if is_template_row(first):
        if len(frozen) < 2:
            raise MalformedInputError(Messages.MISSING_HEADER_ROW)
        return Framing(
            header=frozen[1],
            data_rows=frozen[2:],
            is_template=True,
            template_row=first,
        )
    return Framing(header=first, data_rows=frozen[1:], is_template=False)


def expected_base_name(short_name: str) -> str:
    return _TRAILING_DIGITS_RE.sub("", short_name)


def validate_template_shortname(
    template_row: Sequence[str], expected_short_name: str
) -> None:
    """Check a template row such as ``("demographics", "02")``.

    Raises:
        SchemaMismatchError: the base name does not start with the expected
            base or the version is not purely numeric.
    """
    expected_base = expected_base_name(expected_short_name)
    actual_base = template_row[0] if template_row else ""
    actual_version = template_row[1] if len(template_row) > 1 else ""
    if not actual_base.startswith(expected_base) or not _VERSION_RE.match(
        actual_version
    ):
        raise SchemaMismatchError(actual_base, actual_version, expected_base)
