"""Fusion dashboard storage layer."""

from __future__ import annotations

from pathlib import Path

from fusiondash.storage.base import StorageBackend
from fusiondash.storage.memory_store import MemoryStore
from fusiondash.storage.sqlite_store import SQLiteStore

__all__ = ["MemoryStore", "SQLiteStore", "StorageBackend", "open_store"]

_SNAPSHOT_SUFFIXES = {".json", ".yaml", ".yml"}


async def open_store(path: Path) -> StorageBackend:
    """Open a snapshot file or a SQLite database, chosen by file suffix."""
    if path.suffix in _SNAPSHOT_SUFFIXES:
        store: StorageBackend = MemoryStore.from_file(path)
    else:
        store = SQLiteStore(path)
    await store.initialize()
    return store
