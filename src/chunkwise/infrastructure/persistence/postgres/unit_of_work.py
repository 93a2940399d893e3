"""PostgreSQL Unit of Work implementation."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from chunkwise.infrastructure.persistence.postgres.chunk_repository import (
    PostgresChunkRepository,
)
from chunkwise.infrastructure.persistence.postgres.document_repository import (
    PostgresDocumentRepository,
)

logger = logging.getLogger(__name__)


class PostgresUnitOfWork:
    """Repositories bound to a single pooled connection and its transaction."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn
        self._documents = PostgresDocumentRepository(conn)
        self._chunks = PostgresChunkRepository(conn)

    @property
    def documents(self) -> PostgresDocumentRepository:
        return self._documents

    @property
    def chunks(self) -> PostgresChunkRepository:
        return self._chunks

    async def commit(self) -> None:
        await self._conn.commit()

    async def rollback(self) -> None:
        await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory: commit when the block exits cleanly, else roll back."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        async with pool.connection() as conn:
            uow = PostgresUnitOfWork(conn)
            try:
                yield uow
            except BaseException:
                logger.debug("Rolling back unit of work")
                await uow.rollback()
                raise
            await uow.commit()

    return factory
