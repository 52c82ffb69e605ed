"""Loading data structure definitions from disk.

Two sources are understood: the NDA data-structure JSON document (or a bare
list of its ``dataElements``) and the data-dictionary CSV export.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ...domain.entities.schema import DataStructure
from .csv_reader import CSVReadOptions, DataDictionaryReader
from .exceptions import SchemaParseError, SchemaSourceNotFoundError

if TYPE_CHECKING:
    from pathlib import Path

# NDA names its dictionary exports "<shortName>_definitions.csv"
DICTIONARY_SUFFIX = "_definitions"


class SchemaLoader:
    def __init__(
        self,
        encoding: str = "utf-8",
        dictionary_reader: DataDictionaryReader | None = None,
    ) -> None:
        super().__init__()
        self.encoding = encoding
        self._dictionary_reader = dictionary_reader or DataDictionaryReader()

    def load(self, path: Path) -> DataStructure:
        """Load one data structure, inferring the format from the suffix.

        Raises:
            SchemaSourceNotFoundError: ``path`` is missing or not a file.
            SchemaParseError: the content is not a valid definition.
        """
        if not path.is_file():
            raise SchemaSourceNotFoundError(f"Schema file not found: {path}")
        if path.suffix.lower() == ".csv":
            return self._load_csv(path)
        return self._load_json(path)

    def load_many(self, paths: list[Path]) -> list[DataStructure]:
        return [self.load(path) for path in paths]

    def _load_json(self, path: Path) -> DataStructure:
        try:
            payload: Any = json.loads(path.read_text(encoding=self.encoding))
        except json.JSONDecodeError as e:
            raise SchemaParseError(f"Invalid JSON in {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise SchemaParseError(f"Encoding error reading {path}: {e}") from e
        if isinstance(payload, list):
            payload = {"shortName": path.stem, "dataElements": payload}
        if not isinstance(payload, dict):
            raise SchemaParseError(
                f"Expected an object or list in {path}, got {type(payload).__name__}"
            )
        payload.setdefault("shortName", path.stem)
        return self._build(payload, path)

    def _load_csv(self, path: Path) -> DataStructure:
        records = self._dictionary_reader.read_records(
            path, CSVReadOptions(encoding=self.encoding)
        )
        short_name = path.stem.removesuffix(DICTIONARY_SUFFIX)
        return self._build({"shortName": short_name, "dataElements": records}, path)

    def _build(self, payload: dict[str, Any], path: Path) -> DataStructure:
        try:
            structure = DataStructure.model_validate(payload)
            structure.to_schema()
        except ValidationError as e:
            raise SchemaParseError(f"Invalid data structure in {path}: {e}") from e
        except ValueError as e:
            raise SchemaParseError(f"Invalid data structure in {path}: {e}") from e
        return structure
