"""Main CLI entry point for upconf."""

import logging
import click
from .commands.where import where
from .commands.values import show, get, set_value, clear
from .commands.version import version
from ..formats import FORMATS
from ..utils.logging import setup_logging, get_logger
from .. import __version__

logger = get_logger("cli.main")


@click.group()
@click.version_option(version=__version__, prog_name="upconf", message="%(prog)s version %(version)s")
@click.option('--file', '-f', 'file', default=None, help='Configuration file name or path')
@click.option('--dir', '-d', 'directory', type=click.Path(file_okay=False), default=None,
              help='Default directory for the file (defaults to cwd)')
@click.option('--format', 'fmt', type=click.Choice(sorted(FORMATS)), default='json', show_default=True,
              help='File format')
@click.option('--search/--no-search', default=True, show_default=True,
              help='Look for the file in parent directories')
@click.option('--verbose', '-v', is_flag=True, help='Log what the store is doing')
@click.pass_context
def cli(ctx, file, directory, fmt, search, verbose):
    """upconf - Read and write a project configuration file."""
    setup_logging(level=logging.DEBUG if verbose else logging.WARNING)
    ctx.ensure_object(dict)
    ctx.obj.update({
        "file": file,
        "dir": directory,
        "format": fmt,
        "search": search,
    })


cli.add_command(where)
cli.add_command(show)
cli.add_command(get)
cli.add_command(set_value)
cli.add_command(clear)
cli.add_command(version)
