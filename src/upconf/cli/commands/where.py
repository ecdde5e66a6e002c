"""Where command - show which file the store resolves to."""

import sys
import click
from ...utils.errors import UpconfError
from ...utils.logging import get_logger
from ..utils import open_store, format_error

logger = get_logger("cli.where")


@click.command()
@click.pass_context
def where(ctx):
    """Print the configuration file path that would be loaded."""
    try:
        store = open_store(ctx)
    except UpconfError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    click.echo(store.file)
