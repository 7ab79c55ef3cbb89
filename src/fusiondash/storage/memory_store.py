"""In-memory store backed by a snapshot of table rows."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from fusiondash.storage.base import Query, StorageBackend

logger = logging.getLogger(__name__)


class MemoryStore(StorageBackend):
    """Serves reads from a ``{table: [row, ...]}`` mapping.

    Singleton tables (``account_config``, ``company_settings``) may be given
    either as a one-row list or as a bare mapping.
    """

    def __init__(self, tables: dict[str, Any] | None = None) -> None:
        self._tables: dict[str, list[dict[str, Any]]] = {}
        for name, rows in (tables or {}).items():
            self._tables[name] = [rows] if isinstance(rows, dict) else list(rows)

    @classmethod
    def from_file(cls, path: Path) -> MemoryStore:
        """Load a snapshot from a ``.json`` or ``.yaml``/``.yml`` file."""
        with open(path) as f:
            if path.suffix in {".yaml", ".yml"}:
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Snapshot must map table names to rows: {path}")
        logger.info("Loaded snapshot %s (%d tables)", path, len(data))
        return cls(data)

    async def initialize(self) -> None:
        pass

    async def close(self) -> None:
        pass

    async def _select(self, query: Query) -> list[dict[str, Any]]:
        rows = [
            dict(row)
            for row in self._tables.get(query.table, [])
            if all(row.get(col) == value for col, value in query.filters.items())
        ]
        if query.order_by:
            rows.sort(key=lambda row: row.get(query.order_by) or 0)
        return rows

    async def count(self, table: str) -> int:
        return len(self._tables.get(table, []))
