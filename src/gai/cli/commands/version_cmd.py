import click

from gai import __version__
from gai.cli.alias import alias


@alias("v")
@click.command("version")
def version_cmd() -> None:
    """Print the version of gai."""
    click.echo(click.style(f"gai version {__version__}", fg="green"))
