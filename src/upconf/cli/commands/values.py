"""Value commands - show, read and change configuration keys."""

import sys
import click
from ...utils.errors import UpconfError
from ...utils.logging import get_logger
from ..utils import open_store, format_error, parse_value, dump_value

logger = get_logger("cli.values")


@click.command()
@click.pass_context
def show(ctx):
    """Print the whole configuration."""
    try:
        store = open_store(ctx)
        data = store.load_sync()
    except UpconfError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    click.echo(dump_value(data))


@click.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """
    Print the value stored at KEY.
    
    Nested keys use colons, e.g. database:host
    """
    try:
        store = open_store(ctx)
        store.load_sync()
    except UpconfError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    value = store.get(key)
    if value is None:
        click.echo(format_error(f"Key '{key}' is not set"), err=True)
        sys.exit(1)
    
    click.echo(dump_value(value))


@click.command(name="set")
@click.argument('key')
@click.argument('value')
@click.pass_context
def set_value(ctx, key, value):
    """
    Store VALUE at KEY and save the file.
    
    VALUE is read as JSON when possible (numbers, booleans, objects),
    otherwise as a plain string.
    """
    try:
        store = open_store(ctx)
        store.load_sync()
        store.set(key, parse_value(value))
        store.save_sync()
    except UpconfError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    logger.info(f"Set {key} in {store.file}")
    click.echo(f"✓ {key} saved to {store.file}")


@click.command()
@click.argument('key')
@click.pass_context
def clear(ctx, key):
    """Remove KEY and save the file."""
    try:
        store = open_store(ctx)
        store.load_sync()
        removed = store.clear(key)
        if removed:
            store.save_sync()
    except UpconfError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    
    if not removed:
        click.echo(format_error(f"Key '{key}' is not set"), err=True)
        sys.exit(1)
    
    click.echo(f"✓ {key} removed from {store.file}")
