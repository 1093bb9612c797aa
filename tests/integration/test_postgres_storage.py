import pytest

from clausemap.cache.document_cache import DocumentCache
from clausemap.cache.postgres_storage import PostgresStorage
from clausemap.risks.models import RiskRecord, Severity


@pytest.mark.integration
class TestPostgresStorage:
    def test_missing_key_returns_none(self, storage: PostgresStorage) -> None:
        assert storage.get_item("missing") is None

    def test_set_then_get(self, storage: PostgresStorage) -> None:
        storage.set_item("k", "v1")
        assert storage.get_item("k") == "v1"

    def test_set_overwrites(self, storage: PostgresStorage) -> None:
        storage.set_item("k", "v1")
        storage.set_item("k", "v2")
        assert storage.get_item("k") == "v2"
        assert storage.keys() == ["k"]

    def test_remove(self, storage: PostgresStorage) -> None:
        storage.set_item("k", "v1")
        storage.remove_item("k")
        storage.remove_item("never-set")
        assert storage.get_item("k") is None

    def test_keys_are_sorted(self, storage: PostgresStorage) -> None:
        for key in ("b", "a", "c"):
            storage.set_item(key, key)
        assert storage.keys() == ["a", "b", "c"]

    def test_ensure_table_is_idempotent(self, storage: PostgresStorage) -> None:
        storage.set_item("k", "v1")
        storage.ensure_table()
        assert storage.get_item("k") == "v1"


@pytest.mark.integration
class TestDocumentCacheOnPostgres:
    def test_patch_survives_new_cache_instance(self, storage: PostgresStorage) -> None:
        risk = RiskRecord(
            id="r1",
            severity=Severity.HIGH,
            severity_score=82.0,
            title="Non-compete",
            explanation="You may not work for a competitor for three years after leaving.",
            recommendations=["Ask to shorten the restricted period"],
        )
        DocumentCache(storage).patch("doc-1", summary="An employment contract.", risks=[risk])

        reopened = DocumentCache(storage)
        assert reopened.get_summary("doc-1") == "An employment contract."
        assert reopened.get_risks("doc-1") == [risk]
        assert reopened.get_current_doc_id() == "doc-1"

    def test_clear_all(self, storage: PostgresStorage) -> None:
        cache = DocumentCache(storage)
        cache.patch("doc-1", summary="One.")
        cache.patch("doc-2", summary="Two.")
        storage.set_item("unrelated", "keep")

        cache.clear_all()

        assert storage.keys() == ["unrelated"]
