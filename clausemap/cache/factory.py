from clausemap.cache.base import BaseStorage
from clausemap.cache.memory_storage import MemoryStorage
from clausemap.cache.postgres_storage import PostgresStorage
from clausemap.config.settings import Settings


class StorageFactory:
    """Creates the storage backend selected by settings."""

    BACKENDS = ("memory", "postgres")

    @classmethod
    def create(cls, settings: Settings) -> BaseStorage:
        """Build the configured backend.

        The postgres backend requires ``init_pool`` to have been called.
        """
        backend = settings.cache_backend.lower()
        if backend == "memory":
            return MemoryStorage()
        if backend == "postgres":
            storage = PostgresStorage(table=settings.db_cache_table)
            storage.ensure_table()
            return storage
        raise ValueError(
            f"Unknown cache backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
