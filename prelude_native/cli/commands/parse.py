"""Parse command - convert a native export to JSON or a CSV audit table.

A thin adapter between Click and ParseNativeUseCase: it builds the request,
runs the use case and writes the rendered document to stdout when no output
file is given. Diagnostics always go to stderr.
"""

from pathlib import Path

import click
from rich.console import Console

from ...application.models import ParseNativeRequest
from ...config import ConfigLoader
from ...constants import Defaults
from ...domain.entities.native import NativeDialect
from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.native_export import OUTPUT_FORMATS
from ..logging_config import create_logger
from .options import config_option, dialect_option, verbose_option

console = Console(stderr=True)


@click.command()
@click.argument("input_file", type=click.Path(path_type=Path))
@dialect_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=Defaults.OUTPUT_FORMAT,
    show_default=True,
    help="json (full document tree) or csv (one row per entry and comment)",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write to this file instead of stdout",
)
@config_option
@verbose_option
def parse_command(
    input_file: Path,
    dialect: str,
    output_format: str,
    output_path: Path | None,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Parse a Prelude native XML export.

    Examples:

    \b
        # Subject export to JSON on stdout
        prelude-native parse subjects.xml

    \b
        # Site export to a CSV audit table
        prelude-native parse sites.xml --dialect site --format csv --output sites.csv
    """
    config = ConfigLoader.load(config_file=config_file)
    container = DependencyContainer(
        verbose=verbose,
        console=console,
        config=config,
        logger=create_logger(console, verbose),
    )
    use_case = container.create_parse_use_case()

    response = use_case.execute(
        ParseNativeRequest(
            input_path=input_file,
            dialect=NativeDialect(dialect),
            output_format=output_format,
            output_path=output_path,
        )
    )
    if not response.success:
        raise click.ClickException("; ".join(response.errors))

    if output_path is None and response.rendered is not None:
        click.echo(response.rendered, nl=not response.rendered.endswith("\n"))
