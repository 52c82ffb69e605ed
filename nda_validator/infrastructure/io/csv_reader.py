"""pandas reader for NDA data-dictionary exports.

The dictionary lists one data element per row. Every cell is read as text
so that sizes such as ``020`` and tokens such as ``NA`` survive untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pandas as pd

from .exceptions import SchemaParseError, SchemaSourceNotFoundError

if TYPE_CHECKING:
    from pathlib import Path

ELEMENT_NAME_COLUMN = "ElementName"

# Data dictionary column -> SchemaField attribute
DICTIONARY_COLUMNS: dict[str, str] = {
    "ElementName": "name",
    "DataType": "type",
    "Size": "size",
    "Required": "required",
    "ElementDescription": "description",
    "ValueRange": "valueRange",
    "Notes": "notes",
    "Aliases": "aliases",
}


@dataclass(slots=True)
class CSVReadOptions:
    encoding: str = "utf-8"
    strip_column_names: bool = True


class DataDictionaryReader:
    def read(self, path: Path, options: CSVReadOptions | None = None) -> pd.DataFrame:
        """Load the dictionary as an all-text DataFrame.

        Raises:
            SchemaSourceNotFoundError: ``path`` is missing or not a file.
            SchemaParseError: pandas cannot read it, or the element name
                column is absent.
        """
        options = options or CSVReadOptions()
        if not path.is_file():
            reason = "Not a file" if path.exists() else "File not found"
            raise SchemaSourceNotFoundError(f"{reason}: {path}")
        frame = self._read_frame(path, options.encoding)
        if options.strip_column_names:
            frame = frame.rename(columns=lambda column: str(column).strip())
        if ELEMENT_NAME_COLUMN not in frame.columns:
            raise SchemaParseError(
                f"Data dictionary {path} has no {ELEMENT_NAME_COLUMN} column"
            )
        return frame

    def read_records(
        self, path: Path, options: CSVReadOptions | None = None
    ) -> list[dict[str, Any]]:
        """Element records keyed the way ``SchemaField`` validates them."""
        frame = self.read(path, options)
        known = [column for column in frame.columns if column in DICTIONARY_COLUMNS]
        elements = frame.loc[:, known].rename(columns=DICTIONARY_COLUMNS)
        elements = elements[elements["name"].str.strip().astype(bool)]
        return elements.to_dict(orient="records")

    def _read_frame(self, path: Path, encoding: str) -> pd.DataFrame:
        try:
            return pd.read_csv(path, dtype=str, keep_default_na=False, encoding=encoding)
        except FileNotFoundError as e:
            raise SchemaSourceNotFoundError(f"File not found: {path}") from e
        except pd.errors.EmptyDataError as e:
            raise SchemaParseError(f"Data dictionary is empty: {path}") from e
        except pd.errors.ParserError as e:
            raise SchemaParseError(f"Failed to parse data dictionary {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise SchemaParseError(
                f"Encoding error reading {path} as {encoding}: {e}"
            ) from e
