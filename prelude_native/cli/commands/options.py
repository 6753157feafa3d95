"""Options shared by the parse and summary commands."""

from pathlib import Path

import click

from ...domain.entities.native import NativeDialect

dialect_option = click.option(
    "--dialect",
    type=click.Choice([dialect.value for dialect in NativeDialect]),
    default=NativeDialect.SUBJECT.value,
    show_default=True,
    help="Which record set the export contains: patients, sites or users",
)

config_option = click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a prelude_native.toml config file (default: ./prelude_native.toml)",
)

verbose_option = click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
