from psycopg import sql

from clausemap.cache.base import BaseStorage
from clausemap.database.connection import get_connection


class PostgresStorage(BaseStorage):
    """Durable key/value storage in a single two-column PostgreSQL table."""

    def __init__(self, table: str = "document_cache") -> None:
        self._table = sql.Identifier(table)

    def ensure_table(self) -> None:
        with get_connection() as conn:
            conn.execute(
                sql.SQL(
                    "CREATE TABLE IF NOT EXISTS {} (key TEXT PRIMARY KEY, value TEXT NOT NULL)"
                ).format(self._table)
            )
            conn.commit()

    def get_item(self, key: str) -> str | None:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    sql.SQL("SELECT value FROM {} WHERE key = %s").format(self._table),
                    (key,),
                )
                row = cur.fetchone()
        if row is None:
            return None
        return str(row[0])

    def set_item(self, key: str, value: str) -> None:
        with get_connection() as conn:
            conn.execute(
                sql.SQL(
                    """
                    INSERT INTO {} (key, value)
                    VALUES (%s, %s)
                    ON CONFLICT (key) DO UPDATE SET value = EXCLUDED.value
                    """
                ).format(self._table),
                (key, value),
            )
            conn.commit()

    def remove_item(self, key: str) -> None:
        with get_connection() as conn:
            conn.execute(
                sql.SQL("DELETE FROM {} WHERE key = %s").format(self._table),
                (key,),
            )
            conn.commit()

    def keys(self) -> list[str]:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(sql.SQL("SELECT key FROM {} ORDER BY key").format(self._table))
                rows = cur.fetchall()
        return [str(row[0]) for row in rows]
