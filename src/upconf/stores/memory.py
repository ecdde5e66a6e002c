"""In-memory key-value store with `:`-delimited nested keys."""

import time
from typing import Any, Dict, List, Optional
from ..utils.logging import get_logger

logger = get_logger("stores.memory")

SEPARATOR = ":"


def _split(key: str) -> List[str]:
    return [part for part in key.split(SEPARATOR) if part]


class MemoryStore:
    """
    Mutable configuration mapping.
    
    Keys address nested mappings with `:` separators, so
    `set("database:host", "db")` yields `{"database": {"host": "db"}}`.
    A read-only store refuses every mutation and reports False.
    """
    
    def __init__(self, read_only: bool = False):
        self.type = "memory"
        self.store: Dict[str, Any] = {}
        self.mtimes: Dict[str, float] = {}
        self.read_only = read_only
    
    def get(self, key: Optional[str] = None) -> Any:
        """Return the value at `key`, the whole store for no key, or None if missing."""
        target: Any = self.store
        for part in _split(key or ""):
            if not isinstance(target, dict) or part not in target:
                return None
            target = target[part]
        return target
    
    def set(self, key: str, value: Any) -> bool:
        """Set `value` at `key`, creating intermediate mappings as needed."""
        if self.read_only:
            return False
        
        parts = _split(key)
        if not parts:
            return False
        
        target = self.store
        for part in parts[:-1]:
            if not isinstance(target.get(part), dict):
                target[part] = {}
            target = target[part]
        
        target[parts[-1]] = value
        self.mtimes[parts[0]] = time.time()
        return True
    
    def clear(self, key: str) -> bool:
        """Remove the value at `key`."""
        if self.read_only:
            return False
        
        parts = _split(key)
        if not parts:
            return False
        
        target = self.store
        for part in parts[:-1]:
            target = target.get(part)
            if not isinstance(target, dict):
                return False
        
        if parts[-1] not in target:
            return False
        
        del target[parts[-1]]
        if len(parts) == 1:
            self.mtimes.pop(parts[0], None)
        return True
    
    def merge(self, key: str, value: Any) -> bool:
        """
        Deep merge `value` into the mapping at `key`.
        
        Non-mapping values, and keys that do not hold a mapping yet,
        behave like `set`.
        """
        if self.read_only:
            return False
        
        current = self.get(key)
        if not isinstance(value, dict) or not isinstance(current, dict):
            return self.set(key, value)
        
        for name, item in value.items():
            self.merge(f"{key}{SEPARATOR}{name}", item)
        return True
    
    def reset(self) -> bool:
        """Empty the store."""
        if self.read_only:
            return False
        
        self.store = {}
        self.mtimes = {}
        return True
    
    def load_sync(self) -> Dict[str, Any]:
        """Nothing to load for an in-memory store; return what it holds."""
        return self.store
