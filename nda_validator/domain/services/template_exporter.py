from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from ...constants import TemplateFraming
from ..entities.table import cell_at


def template_line(short_name: str | None) -> str:
    """Build the ``base,version`` first line of a submission template.

    The version is always the last two characters of the short name and the
    base everything before them, whatever the length of the numeric suffix.
    """
    name = short_name or ""
    cut = TemplateFraming.VERSION_SUFFIX_LENGTH
    return f"{name[:-cut]}{TemplateFraming.DELIMITER}{name[-cut:]}"


def quote_cell(cell: str) -> str:
    quote = TemplateFraming.QUOTE
    if any(ch in cell for ch in (TemplateFraming.DELIMITER, quote, "\n", "\r")):
        return quote + cell.replace(quote, quote * 2) + quote
    return cell


def export_template(
    headers: Sequence[str],
    data_rows: Sequence[Sequence[str]],
    mapping: Mapping[str, str] | None,
    ignored: Iterable[str] | None,
    short_name: str | None,
    *,
    quote_cells: bool = False,
) -> str:
    """Serialize the corrected table as a re-ingestable submission template.

    Ignored headers are dropped, the rest are renamed through ``mapping``.
    Cells are written verbatim unless ``quote_cells`` is set.
    """
    mapping = mapping or {}
    ignored_set = set(ignored or ())
    kept = [index for index, header in enumerate(headers) if header not in ignored_set]
    render = quote_cell if quote_cells else str
    delimiter = TemplateFraming.DELIMITER
    lines = [
        template_line(short_name),
        delimiter.join(render(mapping.get(headers[i]) or headers[i]) for i in kept),
    ]
    lines.extend(
        delimiter.join(render(cell_at(row, i)) for i in kept) for row in data_rows
    )
    return TemplateFraming.LINE_SEPARATOR.join(lines)


def export_filename(short_name: str | None) -> str:
    return f"{short_name or ''}_template.csv"
