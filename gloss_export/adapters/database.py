"""PostgreSQL adapter implementing the database port with asyncpg."""

from __future__ import annotations

from typing import Any, AsyncGenerator, Mapping, Optional

import asyncpg

from gloss_export.core.logging import get_logger
from gloss_export.core.ports import DatabasePort

logger = get_logger(__name__)


class DatabaseAdapter(DatabasePort):
    """Lazily-created asyncpg pool shared by every query in the process.

    The pool is capped at a single connection, so concurrent callers wait for
    it to be released.
    """

    def __init__(self, dsn: str, *, max_size: int = 1) -> None:
        self._dsn = dsn
        self._max_size = max_size
        self._pool: Optional[asyncpg.Pool] = None

    async def _get_pool(self) -> asyncpg.Pool:
        if self._pool is None:
            logger.info("Initializing PostgreSQL connection pool")
            self._pool = await asyncpg.create_pool(
                self._dsn,
                min_size=0,
                max_size=self._max_size,
            )
        return self._pool

    async def query(self, text: str, *params: Any) -> list[Mapping[str, Any]]:
        pool = await self._get_pool()
        return list(await pool.fetch(text, *params))

    async def query_cursor(
        self, text: str, *params: Any, batch_size: int = 1
    ) -> AsyncGenerator[Mapping[str, Any], None]:
        pool = await self._get_pool()
        # The connection goes back to the pool on every exit path, including
        # when the consumer stops iterating early and closes the generator.
        async with pool.acquire() as connection:
            async with connection.transaction():
                cursor = await connection.cursor(text, *params)
                while True:
                    rows = await cursor.fetch(batch_size)
                    if not rows:
                        break
                    for row in rows:
                        yield row

    async def close(self) -> None:
        """Close the pool if it was ever opened."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None


__all__ = ["DatabaseAdapter"]
