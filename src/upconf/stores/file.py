"""File store: a memory store that persists to a single file on disk."""

import asyncio
import threading
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union
from ..options import parse_options
from ..resolver import resolve, SearchStatus
from ..utils.errors import ParseError, StoreIOError
from ..utils.logging import get_logger
from .memory import MemoryStore

logger = get_logger("stores.file")


class LoadState(str, Enum):
    """Where an instance is in its load lifecycle."""
    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"
    LOAD_FAILED = "load_failed"


class FileStore:
    """
    Configuration store bound to one file.

    Wraps a MemoryStore and adds load/save against `self.file` using the
    configured serializer. Every operation comes in a blocking form
    (`load_sync`, `save_sync`) and a coroutine form (`load`, `save`).

    Example:
        store = FileStore(file=".myapp.json", search=True)
        store.load_sync()
        store.set("editor:theme", "dark")
        store.save_sync()
    """

    def __init__(self, file: Optional[str] = None, **options):
        """
        Initialize the store.

        Args:
            file: Configuration file name or path (required)
            **options: dir, format, search, read_only

        Raises:
            ConfigurationError: If `file` is missing or options are invalid
        """
        opts = parse_options(file, **options)

        self.type = "file"
        self.file = opts.file
        self.dir = opts.dir
        self.format = opts.format
        self.state = LoadState.UNLOADED
        self.memory = MemoryStore(read_only=opts.read_only)
        self._lock = threading.RLock()

        if opts.search:
            self.search(self.dir)

    @property
    def store(self) -> Dict[str, Any]:
        return self.memory.store

    @store.setter
    def store(self, value: Dict[str, Any]) -> None:
        self.memory.store = value

    def get(self, key: Optional[str] = None) -> Any:
        return self.memory.get(key)

    def set(self, key: str, value: Any) -> bool:
        return self.memory.set(key, value)

    def clear(self, key: str) -> bool:
        return self.memory.clear(key)

    def merge(self, key: str, value: Any) -> bool:
        return self.memory.merge(key, value)

    def reset(self) -> bool:
        return self.memory.reset()

    def search(self, base: Optional[str] = None) -> Union[str, None, bool]:
        """
        Point this store at the file found by searching upward from `base`.

        Args:
            base: Directory to start from (defaults to cwd)

        Returns:
            The path now used by the store, None if nothing usable was
            found, or False if `base` is not a directory. In the last two
            cases `self.file` is left unchanged.
        """
        resolution = resolve(self.file, base, self.dir)

        if resolution.status is SearchStatus.ABORTED:
            return False

        if resolution.path:
            logger.debug(f"Resolved {self.file} to {resolution.path} ({resolution.status.value})")
            self.file = resolution.path

        return resolution.path

    def save_sync(self) -> None:
        """
        Write the current store to `self.file`, replacing its contents.

        Raises:
            StoreIOError: If the file cannot be written
        """
        self._write(self.store)

    async def save(self) -> None:
        """Coroutine form of `save_sync`."""
        await asyncio.to_thread(self.save_sync)

    def load_sync(self) -> Dict[str, Any]:
        """
        Replace the store with the contents of `self.file`.

        A missing file is created holding an empty mapping.

        Returns:
            The loaded store

        Raises:
            StoreIOError: If the file cannot be read or created
            ParseError: If the contents cannot be parsed; the store is
                left as it was
        """
        with self._lock:
            self.state = LoadState.LOADING
            try:
                data = self._read()
            except Exception:
                self.state = LoadState.LOAD_FAILED
                raise
            self.state = LoadState.LOADED
            return data

    async def load(self) -> Dict[str, Any]:
        """Coroutine form of `load_sync`."""
        return await asyncio.to_thread(self.load_sync)

    def _read(self) -> Dict[str, Any]:
        path = Path(self.file)

        if not path.exists():
            logger.info(f"Configuration file not found, creating {path}")
            self.store = {}
            self._write({})
            return self.store

        try:
            with open(path, 'r', encoding='utf-8') as f:
                contents = f.read()
        except UnicodeDecodeError as e:
            logger.error(f"Configuration file {path} is not valid UTF-8: {e}")
            raise ParseError() from e
        except OSError as e:
            logger.error(f"Could not read configuration file {path}: {e}")
            raise StoreIOError(f"Error reading configuration file {path}: {e}") from e

        try:
            data = self.format.parse(contents)
        except Exception as e:
            # The parser's own message is not surfaced, only chained
            logger.error(f"Could not parse configuration file {path}: {e}")
            raise ParseError() from e

        if not isinstance(data, dict):
            logger.error(f"Configuration file {path} does not hold a mapping: {type(data).__name__}")
            raise ParseError()

        self.store = data
        logger.info(f"Loaded configuration from {path}")
        return self.store

    def _write(self, value: Dict[str, Any]) -> None:
        path = Path(self.file)

        with self._lock:
            try:
                text = self.format.stringify(value)
                with open(path, 'w', encoding='utf-8') as f:
                    f.write(text)
            except OSError as e:
                logger.error(f"Could not write configuration file {path}: {e}")
                raise StoreIOError(f"Error writing configuration file {path}: {e}") from e

        logger.info(f"Saved configuration to {path}")
