from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg_pool import ConnectionPool

from clausemap.config.settings import Settings
from clausemap.logging.logger import Log

_pool: ConnectionPool | None = None


def conninfo_for(settings: Settings) -> str:
    return make_conninfo(
        host=settings.db_host,
        port=settings.db_port,
        dbname=settings.db_database,
        user=settings.db_username,
        password=settings.db_password,
    )


def init_pool(settings: Settings) -> None:
    """Open the shared pool backing the persistent document cache. Idempotent."""
    global _pool  # noqa: PLW0603
    if _pool is not None:
        return
    _pool = ConnectionPool(
        conninfo_for(settings),
        min_size=1,
        max_size=4,
        name="clausemap-cache",
        open=True,
    )
    Log.info("Cache connection pool opened", host=settings.db_host, db=settings.db_database)


def close_pool() -> None:
    global _pool  # noqa: PLW0603
    if _pool is None:
        return
    _pool.close()
    _pool = None
    Log.debug("Cache connection pool closed")


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Borrow a pooled connection. The caller commits its own writes.

    Raises:
        RuntimeError: if ``init_pool`` has not been called.
    """
    if _pool is None:
        raise RuntimeError("Connection pool not initialized. Call init_pool() first.")
    with _pool.connection() as conn:
        yield conn
