"""Process-lifetime storage for projects and issues."""

from app.store.locks import ReadWriteLock
from app.store.memory import MemoryStore

__all__ = ["MemoryStore", "ReadWriteLock"]
