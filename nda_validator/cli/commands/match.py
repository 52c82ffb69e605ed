"""Match command - Rank data structures by how well they fit a CSV file."""

from __future__ import annotations

import asyncio
from pathlib import Path

import click
from rich.console import Console

from ...application.validation_pipeline import match_structures, read_table
from ...config import ConfigLoader
from ...domain.exceptions import ValidatorError
from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.exceptions import SchemaSourceError
from ..logging_config import create_logger
from ..presenters.report import ReportPresenter

console = Console()


@click.command()
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument(
    "schema_files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a nda_validator.toml config file (default: ./nda_validator.toml)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def match_command(
    csv_file: Path,
    schema_files: tuple[Path, ...],
    config_file: Path | None,
    verbose: int,
) -> None:
    """Rank candidate data structures for the columns of CSV_FILE.

    Examples:

    \b
        nda-validator match data.csv structures/*.json
    """
    config = ConfigLoader.load(config_file=config_file)
    logger = create_logger(console, verbose)
    container = DependencyContainer(
        verbose=verbose, console=console, config=config, logger=logger
    )

    try:
        structures = container.create_schema_loader().load_many(list(schema_files))
    except SchemaSourceError as e:
        raise click.ClickException(str(e)) from e

    reader = container.create_file_reader()
    try:
        text = asyncio.run(reader.read_text(csv_file))
        table = read_table(text)
        matches = match_structures(table, structures)
    except ValidatorError as e:
        raise click.ClickException(str(e)) from e

    logger.verbose(f"Compared {len(structures)} structures")
    ReportPresenter(console).present_matches(matches)
