"""Version command - show upconf version."""

import click
from ... import __version__


@click.command()
def version():
    """Show upconf version."""
    click.echo(f"upconf version {__version__}")
