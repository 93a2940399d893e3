"""PostgreSQL async connection pool."""

import logging

from psycopg import OperationalError
from psycopg_pool import AsyncConnectionPool, PoolTimeout

logger = logging.getLogger(__name__)


def create_pool(conninfo: str, min_size: int = 2, max_size: int = 10) -> AsyncConnectionPool:
    """Create async connection pool.

    Pool is created with open=False. Caller must call await pool.open()
    before use (e.g. via PoolLifespanMiddleware in ASGI lifespan).
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )


async def ping(pool: AsyncConnectionPool, timeout: float = 2.0) -> bool:
    """True if a connection can be checked out and answers SELECT 1."""
    try:
        async with pool.connection(timeout=timeout) as conn:
            await conn.execute("SELECT 1")
    except (OperationalError, PoolTimeout) as exc:
        logger.warning("Database ping failed: %s", exc)
        return False
    return True
