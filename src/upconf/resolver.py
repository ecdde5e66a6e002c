"""Locate a configuration file by searching upward through parent directories."""

import os
from enum import Enum
from pathlib import Path
from typing import Optional, Union
from .utils.logging import get_logger

logger = get_logger("resolver")

PathLike = Union[str, Path]


class Probe(str, Enum):
    """What a candidate path turned out to be after following symlinks."""
    FILE = "file"
    DIRECTORY = "directory"
    MISSING = "missing"


class SearchStatus(str, Enum):
    """Outcome of a search."""
    FOUND = "found"
    FALLBACK = "fallback"
    UNRESOLVED = "unresolved"
    ABORTED = "aborted"


class Resolution:
    """Result of `resolve`: a status and, unless unresolved or aborted, a path."""

    def __init__(self, status: SearchStatus, path: Optional[str] = None):
        self.status = status
        self.path = path

    @property
    def aborted(self) -> bool:
        return self.status is SearchStatus.ABORTED

    def __eq__(self, other) -> bool:
        if not isinstance(other, Resolution):
            return NotImplemented
        return self.status == other.status and self.path == other.path

    def __repr__(self) -> str:
        return f"Resolution(status={self.status.value}, path={self.path!r})"


def probe(path: PathLike) -> Probe:
    """
    Classify `path` after resolving its whole symlink chain.

    Missing entries, dangling links, link loops and permission problems
    are all reported as MISSING.
    """
    try:
        real = Path(path).resolve(strict=True)
        is_dir = real.is_dir()
    except (OSError, RuntimeError):
        return Probe.MISSING
    return Probe.DIRECTORY if is_dir else Probe.FILE


def resolve(
    filename: PathLike,
    base_directory: Optional[PathLike] = None,
    default_directory: Optional[PathLike] = None
) -> Resolution:
    """
    Find the file that `filename` refers to.

    An absolute `filename` naming an existing file is returned as-is.
    Otherwise the search starts at `base_directory` and tests
    `<dir>/<filename>` in each ancestor up to the filesystem root. A
    same-named directory does not count as a match. If nothing is found,
    `<default_directory>/<filename>` is used even when it does not exist
    yet, so the caller can create it there.

    Args:
        filename: File name, relative or absolute
        base_directory: Directory to start from (defaults to cwd)
        default_directory: Fallback location (defaults to cwd)

    Returns:
        Resolution. ABORTED when the base directory is not a directory,
        UNRESOLVED when the fallback location is itself a directory.
    """
    filename = str(filename)
    cwd = os.getcwd()
    base = os.path.abspath(str(base_directory)) if base_directory else cwd
    default_dir = str(default_directory) if default_directory else cwd

    if Path(filename).is_absolute() and probe(filename) is Probe.FILE:
        logger.debug(f"Using absolute path {filename}")
        return Resolution(SearchStatus.FOUND, filename)

    if probe(base) is not Probe.DIRECTORY:
        logger.warning(f"Search aborted, base is not a directory: {base}")
        return Resolution(SearchStatus.ABORTED)

    current = base
    while True:
        candidate = os.path.join(current, filename)
        outcome = probe(candidate)
        logger.debug(f"Probed {candidate}: {outcome.value}")
        if outcome is Probe.FILE:
            return Resolution(SearchStatus.FOUND, candidate)

        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent

    fallback = os.path.join(default_dir, filename)
    if probe(fallback) is Probe.DIRECTORY:
        logger.warning(f"Default location is a directory, cannot use it: {fallback}")
        return Resolution(SearchStatus.UNRESOLVED)

    logger.debug(f"No {filename} found above {base}, falling back to {fallback}")
    return Resolution(SearchStatus.FALLBACK, fallback)
