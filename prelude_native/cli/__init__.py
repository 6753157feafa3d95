import click

from .commands.parse import parse_command
from .commands.summary import summary_command


@click.group()
@click.version_option(package_name="prelude-native")
def app() -> None:
    pass


app.add_command(parse_command, name="parse")
app.add_command(summary_command, name="summary")
__all__ = ["app"]
