import click

from .commands.match import match_command
from .commands.validate import validate_command


@click.group()
def app() -> None:
    """Validate CSV data against NDA data structures."""


app.add_command(validate_command, name="validate")
app.add_command(match_command, name="match")
__all__ = ["app"]
