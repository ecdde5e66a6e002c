"""upconf - File-backed configuration store with upward directory search."""

from . import formats
from .formats import Serializer, JsonFormat, YamlFormat, get_format
from .resolver import resolve, probe, Probe, Resolution, SearchStatus
from .stores import FileStore, MemoryStore, LoadState
from .utils.errors import UpconfError, ConfigurationError, StoreIOError, ParseError

__version__ = "0.1.0"

__all__ = [
    "FileStore",
    "MemoryStore",
    "LoadState",
    "formats",
    "Serializer",
    "JsonFormat",
    "YamlFormat",
    "get_format",
    "resolve",
    "probe",
    "Probe",
    "Resolution",
    "SearchStatus",
    "UpconfError",
    "ConfigurationError",
    "StoreIOError",
    "ParseError",
]
