import asyncio
from datetime import datetime, timezone
from typing import Any
from unittest.mock import AsyncMock, MagicMock

from clausemap.analysis.base import BaseAnalysisClient
from clausemap.analysis.exceptions import AnalysisNetworkError
from clausemap.cache.document_cache import DocumentCache
from clausemap.cache.memory_storage import MemoryStorage
from clausemap.documents.loader import DocumentLoader
from clausemap.risks.models import RiskRecord, Severity
from clausemap.risks.reconciler import RiskReconciler

_DOCUMENT: dict[str, Any] = {
    "doc_id": "doc-1",
    "filename": "lease.pdf",
    "summary": "A residential lease.",
    "summary_generated_at": 1772366400000,
    "risks_generated_at": 1772366460000,
    "risks": [
        {
            "id": "r1",
            "short_risk": "Deposit forfeiture",
            "explanation": "The landlord may keep the full deposit for minor damage.",
            "recommendations": ["Ask for an itemised deduction clause"],
            "severity_level": "high",
            "severity_score": 75,
            "page_number": 2,
        },
        {"id": "r1", "short_risk": "Duplicate", "severity_level": "low"},
    ],
}


def _make_loader(
    document: dict[str, Any] | None = None,
    error: Exception | None = None,
) -> tuple[DocumentLoader, DocumentCache, AsyncMock]:
    cache = DocumentCache(MemoryStorage())
    client = MagicMock(spec=BaseAnalysisClient)
    client.fetch_document = AsyncMock(
        return_value=document if document is not None else _DOCUMENT,
        side_effect=error,
    )
    return DocumentLoader(cache, client, RiskReconciler()), cache, client.fetch_document


def _cached_risk() -> RiskRecord:
    return RiskRecord(
        id="cached",
        severity=Severity.LOW,
        severity_score=10.0,
        title="Late fees",
        explanation="A small fee applies to payments made after the fifth.",
        recommendations=["Set up automatic payments"],
    )


class TestLoadRisks:
    def test_returns_cached_risks_without_fetching(self) -> None:
        loader, cache, fetch = _make_loader()
        cache.patch("doc-1", risks=[_cached_risk()])

        records = asyncio.run(loader.load_risks("doc-1"))

        assert [r.id for r in records] == ["cached"]
        fetch.assert_not_awaited()

    def test_fetches_reconciles_and_caches(self) -> None:
        loader, cache, fetch = _make_loader()

        records = asyncio.run(loader.load_risks("doc-1"))

        fetch.assert_awaited_once_with("doc-1")
        assert [r.id for r in records] == ["r1"]
        assert records[0].severity == Severity.HIGH
        assert records[0].page_number == 2
        doc = cache.get("doc-1")
        assert doc is not None
        assert doc.risks == records
        assert doc.filename == "lease.pdf"
        assert doc.risks_generated_at == datetime(2026, 3, 1, 12, 1, tzinfo=timezone.utc)

    def test_empty_cached_list_triggers_fetch(self) -> None:
        loader, cache, fetch = _make_loader()
        cache.patch("doc-1", risks=[])

        asyncio.run(loader.load_risks("doc-1"))

        fetch.assert_awaited_once()

    def test_malformed_timestamp_falls_back_to_now(self) -> None:
        loader, cache, _ = _make_loader({**_DOCUMENT, "risks_generated_at": "yesterday"})
        before = datetime.now(timezone.utc).replace(microsecond=0)

        asyncio.run(loader.load_risks("doc-1"))

        doc = cache.get("doc-1")
        assert doc is not None
        assert doc.risks_generated_at is not None
        assert doc.risks_generated_at >= before

    def test_fetch_failure_returns_empty_list(self) -> None:
        loader, cache, _ = _make_loader(error=AnalysisNetworkError("down"))

        records = asyncio.run(loader.load_risks("doc-1"))

        assert records == []
        assert cache.get("doc-1") is None


class TestLoadSummary:
    def test_returns_cached_summary(self) -> None:
        loader, cache, fetch = _make_loader()
        cache.patch("doc-1", summary="Cached summary.")

        assert asyncio.run(loader.load_summary("doc-1")) == "Cached summary."
        fetch.assert_not_awaited()

    def test_fetches_and_caches_summary(self) -> None:
        loader, cache, _ = _make_loader()

        summary = asyncio.run(loader.load_summary("doc-1"))

        assert summary == "A residential lease."
        doc = cache.get("doc-1")
        assert doc is not None
        assert doc.summary == "A residential lease."
        assert doc.summary_generated_at == datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

    def test_missing_summary_returns_none(self) -> None:
        loader, cache, _ = _make_loader({"doc_id": "doc-1"})

        assert asyncio.run(loader.load_summary("doc-1")) is None
        assert cache.get("doc-1") is None

    def test_fetch_failure_returns_none(self) -> None:
        loader, _, _ = _make_loader(error=AnalysisNetworkError("down"))
        assert asyncio.run(loader.load_summary("doc-1")) is None
