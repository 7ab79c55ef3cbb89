"""Read-only SQLite adapter over an existing dashboard database."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import aiosqlite

from fusiondash.storage.base import TABLES, Query, StorageBackend

logger = logging.getLogger(__name__)


class SQLiteStore(StorageBackend):
    """Reads entity rows from a SQLite file opened in read-only mode.

    Table names come from the fixed routing table in
    :mod:`fusiondash.storage.base`, never from caller input.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path
        self._db: aiosqlite.Connection | None = None

    async def initialize(self) -> None:
        if not self.db_path.exists():
            raise FileNotFoundError(f"No database at {self.db_path}")
        # as_uri() percent-encodes '#', '?' and '%' so mode=ro stays a query parameter
        uri = f"{self.db_path.resolve().as_uri()}?mode=ro"
        self._db = await aiosqlite.connect(uri, uri=True)
        self._db.row_factory = aiosqlite.Row
        logger.info("Opened SQLite store at %s (read-only)", self.db_path)

    async def close(self) -> None:
        if self._db:
            await self._db.close()
            self._db = None

    @property
    def db(self) -> aiosqlite.Connection:
        if self._db is None:
            raise RuntimeError("Store not initialized. Call initialize() first.")
        return self._db

    async def _select(self, query: Query) -> list[dict[str, Any]]:
        if query.table not in TABLES:
            raise ValueError(f"Unknown table: {query.table}")
        sql = f"SELECT * FROM {query.table}"
        params: list[Any] = []
        if query.filters:
            clauses = []
            for column, value in query.filters.items():
                clauses.append(f"{column} = ?")
                params.append(value)
            sql += " WHERE " + " AND ".join(clauses)
        if query.order_by:
            sql += f" ORDER BY {query.order_by}"
        cursor = await self.db.execute(sql, params)
        rows = await cursor.fetchall()
        return [dict(row) for row in rows]

    async def count(self, table: str) -> int:
        if table not in TABLES:
            raise ValueError(f"Unknown table: {table}")
        cursor = await self.db.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?", (table,)
        )
        if await cursor.fetchone() is None:
            return 0
        cursor = await self.db.execute(f"SELECT COUNT(*) FROM {table}")
        row = await cursor.fetchone()
        return row[0] if row else 0
