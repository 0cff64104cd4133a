"""
Catalog database access layer.

Goals:
- SQLite + aiosqlite, async/await friendly.
- One connection, opened once per process and injected into repositories.
- Explicit transactions: repositories group related writes with
  `async with db.transaction()` so they commit or roll back together.

Note:
- Row models live in `screensound.core.db.models`
- Schema/migrations live in `screensound.core.db.schema`
- Query functions live in `screensound.core.db.queries_*` modules
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from screensound.core.db.schema import ensure_schema as ensure_schema_sql

logger = logging.getLogger(__name__)


def _casefold(value: str | None) -> str | None:
    return value.casefold() if value is not None else None


class CatalogDb:
    """
    Async connection owner for the catalog DB.

    Usage:
        db = CatalogDb("screensound.db")
        await db.open()
        await db.ensure_schema()
        ... repositories ...
        await db.close()
    """

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = str(db_path)
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def open(self) -> None:
        if self._conn is not None:
            return
        self._conn = await aiosqlite.connect(self._db_path)
        self._conn.row_factory = aiosqlite.Row

        await self._conn.execute("PRAGMA foreign_keys = ON;")
        await self._conn.execute("PRAGMA journal_mode = WAL;")
        await self._conn.execute("PRAGMA synchronous = NORMAL;")

        # SQLite's lower()/LIKE only fold ASCII.
        await self._conn.create_function("casefold", 1, _casefold, deterministic=True)
        logger.debug("Opened catalog DB at %s", self._db_path)

    async def close(self) -> None:
        if self._conn is None:
            return
        await self._conn.close()
        self._conn = None

    def connection(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError("CatalogDb is not open. Call await db.open() first.")
        return self._conn

    async def ensure_schema(self) -> None:
        """Create or migrate schema to current version."""
        await ensure_schema_sql(self.connection())

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """
        Run a group of writes atomically.

        The connection opens a transaction implicitly on the first write;
        leaving the block commits, any exception rolls everything back and
        propagates.
        """
        conn = self.connection()
        try:
            yield conn
        except BaseException:
            await conn.rollback()
            raise
        else:
            await conn.commit()

    async def __aenter__(self) -> CatalogDb:
        await self.open()
        await self.ensure_schema()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
