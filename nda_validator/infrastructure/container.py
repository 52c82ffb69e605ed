from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.validation_session import ValidationSession
from ..config import ValidatorConfig
from .io.csv_reader import DataDictionaryReader
from .io.file_reader import AsyncFileReader
from .io.schema_loader import SchemaLoader
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from ..application.ports.services import (
        FileReaderPort,
        LoggerPort,
        SchemaRepositoryPort,
    )
    from ..domain.entities.schema import DataStructure


class DependencyContainer:
    """Wires the concrete adapters used by the CLI.

    Each ``create_*`` method builds its product once and hands out the
    same instance afterwards.
    """

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: ValidatorConfig | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config or ValidatorConfig()
        self._logger_instance: LoggerPort | None = logger
        self._dictionary_reader_instance: DataDictionaryReader | None = None
        self._schema_loader_instance: SchemaRepositoryPort | None = None
        self._file_reader_instance: FileReaderPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_dictionary_reader(self) -> DataDictionaryReader:
        if self._dictionary_reader_instance is None:
            self._dictionary_reader_instance = DataDictionaryReader()
        return self._dictionary_reader_instance

    def create_schema_loader(self) -> SchemaRepositoryPort:
        if self._schema_loader_instance is None:
            self._schema_loader_instance = SchemaLoader(
                encoding=self.config.encoding,
                dictionary_reader=self.create_dictionary_reader(),
            )
        return self._schema_loader_instance

    def create_file_reader(self) -> FileReaderPort:
        if self._file_reader_instance is None:
            self._file_reader_instance = AsyncFileReader(encoding=self.config.encoding)
        return self._file_reader_instance

    def create_validation_session(
        self, structure: DataStructure, *, short_name: str | None = None
    ) -> ValidationSession:
        return ValidationSession(
            structure.to_schema(),
            short_name=short_name or structure.short_name or None,
            config=self.config,
            logger=self.create_logger(),
            file_reader=self.create_file_reader(),
        )
