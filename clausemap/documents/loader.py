from datetime import datetime
from typing import Any

from clausemap.analysis.base import BaseAnalysisClient
from clausemap.analysis.exceptions import AnalysisError
from clausemap.cache.document_cache import DocumentCache
from clausemap.cache.models import from_epoch_ms, utc_now
from clausemap.logging.logger import Log
from clausemap.risks.models import RiskRecord
from clausemap.risks.reconciler import RiskReconciler


class DocumentLoader:
    """Cache-first read path for a document's summary and reconciled risks."""

    def __init__(
        self,
        cache: DocumentCache,
        client: BaseAnalysisClient,
        reconciler: RiskReconciler,
    ) -> None:
        self._cache = cache
        self._client = client
        self._reconciler = reconciler

    async def load_risks(self, doc_id: str) -> list[RiskRecord]:
        """Return cached risks, or fetch, reconcile and cache them.

        Returns an empty list when the document cannot be fetched.
        """
        cached = self._cache.get_risks(doc_id)
        if cached:
            Log.debug(f"Using {len(cached)} cached risks", doc_id=doc_id)
            return cached

        try:
            document = await self._client.fetch_document(doc_id)
        except AnalysisError as exc:
            Log.error(f"Failed to fetch risks: {exc}", doc_id=doc_id)
            return []

        records = self._reconciler.reconcile(document)
        fields: dict[str, Any] = {
            "risks": records,
            "risks_generated_at": _generated_at(document.get("risks_generated_at")),
        }
        if isinstance(document.get("filename"), str) and document["filename"]:
            fields["filename"] = document["filename"]
        self._cache.patch(doc_id, **fields)
        Log.info(f"Fetched and cached {len(records)} risks", doc_id=doc_id)
        return records

    async def load_summary(self, doc_id: str) -> str | None:
        cached = self._cache.get_summary(doc_id)
        if cached is not None:
            return cached

        try:
            document = await self._client.fetch_document(doc_id)
        except AnalysisError as exc:
            Log.error(f"Failed to fetch summary: {exc}", doc_id=doc_id)
            return None

        summary = document.get("summary")
        if not isinstance(summary, str) or not summary:
            return None
        self._cache.patch(
            doc_id,
            summary=summary,
            summary_generated_at=_generated_at(document.get("summary_generated_at")),
        )
        return summary


def _generated_at(raw: Any) -> datetime:
    """Server timestamp in epoch milliseconds, or now when missing or malformed."""
    try:
        value = from_epoch_ms(raw)
    except (TypeError, ValueError, OverflowError, OSError):
        value = None
    return value or utc_now()
