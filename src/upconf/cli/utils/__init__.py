"""CLI utilities package."""

import json
import os
from typing import Any, Optional
import click
from ...stores.file import FileStore
from ...utils.logging import get_logger

logger = get_logger("cli.utils")


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.
    
    Args:
        message: Error message
        suggestion: Optional suggestion or help text
        
    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


def open_store(ctx: click.Context) -> FileStore:
    """Build the FileStore described by the group options."""
    opts = ctx.obj
    file = opts["file"]
    # Without a search the file is taken from --dir, not the cwd
    if file and not opts["search"] and opts["dir"] and not os.path.isabs(file):
        file = os.path.join(opts["dir"], file)
    
    store = FileStore(
        file=file,
        dir=opts["dir"],
        format=opts["format"],
        search=opts["search"],
    )
    logger.debug(f"Using configuration file {store.file}")
    return store


def parse_value(raw: str) -> Any:
    """Interpret a command-line value as JSON, falling back to the plain string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def dump_value(value: Any) -> str:
    """Render a value for terminal output."""
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2)


__all__ = ["format_error", "open_store", "parse_value", "dump_value"]
