"""Tests for the dependency container."""

from __future__ import annotations

from io import StringIO

from rich.console import Console

from nda_validator.application.validation_session import ValidationSession
from nda_validator.config import ValidatorConfig
from nda_validator.domain.entities.schema import DataStructure, SchemaField
from nda_validator.infrastructure.container import DependencyContainer
from nda_validator.infrastructure.io.file_reader import AsyncFileReader
from nda_validator.infrastructure.io.schema_loader import SchemaLoader
from nda_validator.infrastructure.logging import ConsoleLogger, NullLogger


class TestDependencyContainer:
    def test_console_logger_by_default(self):
        console = Console(file=StringIO())
        container = DependencyContainer(verbose=2, console=console)

        logger = container.create_logger()

        assert isinstance(logger, ConsoleLogger)
        assert logger.verbosity == 2
        assert logger.console is console

    def test_null_logger(self):
        container = DependencyContainer(use_null_logger=True)

        assert isinstance(container.create_logger(), NullLogger)

    def test_injected_logger(self):
        logger = NullLogger()

        assert DependencyContainer(logger=logger).create_logger() is logger

    def test_instances_are_reused(self):
        container = DependencyContainer(use_null_logger=True)

        assert container.create_logger() is container.create_logger()
        assert container.create_schema_loader() is container.create_schema_loader()
        assert container.create_file_reader() is container.create_file_reader()

    def test_adapters_follow_config(self):
        container = DependencyContainer(config=ValidatorConfig(encoding="latin-1"))

        loader = container.create_schema_loader()
        reader = container.create_file_reader()

        assert isinstance(loader, SchemaLoader)
        assert loader.encoding == "latin-1"
        assert isinstance(reader, AsyncFileReader)
        assert reader.encoding == "latin-1"

    def test_validation_session(self):
        container = DependencyContainer(use_null_logger=True)
        structure = DataStructure(
            short_name="demographics02", elements=[SchemaField(name="subjectkey")]
        )

        session = container.create_validation_session(structure)
        override = container.create_validation_session(structure, short_name="x01")

        assert isinstance(session, ValidationSession)
        assert session.short_name == "demographics02"
        assert session.schema.names() == ["subjectkey"]
        assert session.logger is container.create_logger()
        assert session.config is container.config
        assert override.short_name == "x01"
