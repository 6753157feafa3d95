from pathlib import Path

import click
from rich.console import Console

from ...application.models import ParseNativeRequest
from ...config import ConfigLoader
from ...domain.entities.native import NativeDialect
from ...infrastructure.container import DependencyContainer
from ..logging_config import create_logger
from ..presenters.summary import SummaryPresenter
from .options import config_option, dialect_option, verbose_option

console = Console()
diagnostics = Console(stderr=True)


@click.command()
@click.argument("input_file", type=click.Path(path_type=Path))
@dialect_option
@config_option
@verbose_option
def summary_command(
    input_file: Path,
    dialect: str,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Print per-record counts of forms, fields, entries and comments."""
    config = ConfigLoader.load(config_file=config_file)
    logger = create_logger(diagnostics, verbose)
    container = DependencyContainer(
        verbose=verbose, console=diagnostics, config=config, logger=logger
    )
    use_case = container.create_parse_use_case()

    response = use_case.execute(
        ParseNativeRequest(
            input_path=input_file,
            dialect=NativeDialect(dialect),
            output_format=None,
        )
    )
    if not response.success:
        raise click.ClickException("; ".join(response.errors))

    SummaryPresenter(console).present(response)
    logger.log_final_stats()
