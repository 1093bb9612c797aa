import os
import uuid
from collections.abc import Generator

import psycopg
import pytest
from psycopg import sql

from clausemap.cache.postgres_storage import PostgresStorage
from clausemap.config.settings import Settings
from clausemap.database.connection import close_pool, conninfo_for, get_connection, init_pool


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "clausemap_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    # The pool connects lazily, so probe once to skip cleanly without a server.
    try:
        psycopg.connect(conninfo_for(test_settings), connect_timeout=2).close()
    except psycopg.Error as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    init_pool(test_settings)
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def storage(integration_pool: None) -> Generator[PostgresStorage, None, None]:
    table = f"document_cache_test_{uuid.uuid4().hex[:8]}"
    storage = PostgresStorage(table=table)
    storage.ensure_table()
    try:
        yield storage
    finally:
        with get_connection() as conn:
            conn.execute(sql.SQL("DROP TABLE IF EXISTS {}").format(sql.Identifier(table)))
            conn.commit()
