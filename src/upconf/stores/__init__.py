"""Configuration stores."""

from .memory import MemoryStore
from .file import FileStore, LoadState

__all__ = ["MemoryStore", "FileStore", "LoadState"]
