from .csv_reader import CSVReadOptions, DataDictionaryReader
from .exceptions import (
    SchemaParseError,
    SchemaSourceError,
    SchemaSourceNotFoundError,
    ValidatorInfrastructureError,
)
from .file_reader import AsyncFileReader
from .schema_loader import SchemaLoader

__all__ = [
    "AsyncFileReader",
    "CSVReadOptions",
    "DataDictionaryReader",
    "SchemaLoader",
    "SchemaParseError",
    "SchemaSourceError",
    "SchemaSourceNotFoundError",
    "ValidatorInfrastructureError",
]
