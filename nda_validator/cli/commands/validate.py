"""Validate command - Check a CSV file against an NDA data structure."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from ...config import ConfigLoader
from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.exceptions import SchemaSourceError
from ..logging_config import create_logger
from ..presenters.report import ReportPresenter

console = Console()


def _parse_mappings(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[tuple[str, str]]:
    mappings: list[tuple[str, str]] = []
    for value in values:
        header, sep, target = value.partition("=")
        if not sep or not header.strip():
            raise click.BadParameter(
                f"Expected HEADER=FIELD, got {value!r}", ctx=ctx, param=param
            )
        mappings.append((header.strip(), target.strip()))
    return mappings


@click.command()
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--schema",
    "schema_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Data structure definition (NDA JSON or data dictionary CSV)",
)
@click.option(
    "--short-name",
    help="Expected structure short name, e.g. demographics02 "
    "(default: taken from the schema)",
)
@click.option(
    "--map",
    "mappings",
    multiple=True,
    callback=_parse_mappings,
    metavar="HEADER=FIELD",
    help="Map a CSV column onto a schema field (repeatable)",
)
@click.option(
    "--ignore",
    "ignored",
    multiple=True,
    metavar="HEADER",
    help="Ignore an unknown column (repeatable)",
)
@click.option(
    "--export",
    "export_path",
    type=click.Path(path_type=Path),
    help="Write the corrected submission template to this file or directory",
)
@click.option(
    "--quote-cells",
    is_flag=True,
    help="Quote exported cells that contain a comma, a quote or a line break",
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
def validate_command(
    csv_file: Path,
    schema_file: Path,
    short_name: str | None,
    mappings: list[tuple[str, str]],
    ignored: tuple[str, ...],
    export_path: Path | None,
    quote_cells: bool,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Validate a CSV file against an NDA data structure.

    The file may be a plain CSV or a submission template whose first row
    names the structure. Values are standardized (handedness, binary
    flags), columns are checked against the schema and every cell is
    checked against its field's value range.

    Examples:

    \b
        # Validate a file and print the report
        nda-validator validate data.csv --schema demographics02.json

    \b
        # Map a misnamed column, ignore another and export the template
        nda-validator validate data.csv --schema demographics02.json \\
            --map subj_id=subjectkey --ignore notes --export out/
    """
    config = ConfigLoader.load(config_file=config_file)
    if quote_cells:
        config = replace(config, quote_exported_cells=True)
    logger = create_logger(console, verbose)
    container = DependencyContainer(
        verbose=verbose, console=console, config=config, logger=logger
    )

    try:
        structure = container.create_schema_loader().load(schema_file)
    except SchemaSourceError as e:
        raise click.ClickException(str(e)) from e
    logger.verbose(
        f"Loaded {len(structure.elements)} fields for "
        f"{escape(structure.short_name or schema_file.stem)}"
    )

    session = container.create_validation_session(structure, short_name=short_name)
    asyncio.run(session.load_file(csv_file))
    if session.failure is not None:
        raise click.ClickException(f"Could not validate {csv_file.name}")
    for header, field_name in mappings:
        session.set_mapping(header, field_name)
    for header in dict.fromkeys(ignored):
        if not session.overlay.is_ignored(header):
            session.toggle_ignored(header)

    report = session.report
    assert report is not None
    ReportPresenter(console).present(report, file_name=csv_file.name)

    if export_path is not None:
        target = export_path
        if target.is_dir():
            target = target / session.export_filename()
        target.write_text(session.export() + "\n", encoding=config.encoding)
        logger.success(f"Submission template written to {escape(str(target))}")

    logger.log_final_stats()

    if not report.is_valid:
        raise click.ClickException("Validation failed")
