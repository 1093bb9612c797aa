import asyncio
import sys

from clausemap.analysis.factory import AnalysisClientFactory
from clausemap.cache.document_cache import DocumentCache
from clausemap.cache.factory import StorageFactory
from clausemap.config.settings import Settings
from clausemap.database.connection import close_pool, init_pool
from clausemap.documents.loader import DocumentLoader
from clausemap.highlight.mapper import map_highlights
from clausemap.highlight.pages import max_page, page_numbers, page_text_for, risks_on_page
from clausemap.logging.logger import Log
from clausemap.processing.orchestrator import build_orchestrator
from clausemap.risks import RiskReconciler, risk_level, risk_score


async def process_document(doc_id: str, settings: Settings) -> None:
    """Run analysis for one document, then report its reconciled risks."""
    cache = DocumentCache(
        StorageFactory.create(settings),
        key_prefix=settings.cache_key_prefix,
        current_doc_key=settings.cache_current_doc_key,
    )
    client = AnalysisClientFactory.create(settings)
    try:
        orchestrator = build_orchestrator(settings, cache, client)
        async for state in orchestrator.run(doc_id):
            Log.info(f"[{state.step.value}] {state.progress}%")

        loader = DocumentLoader(cache, client, RiskReconciler())
        records = await loader.load_risks(doc_id)
        score = risk_score(records)
        Log.info(
            f"Document {doc_id}: {len(records)} risks, "
            f"score {score}/100 ({risk_level(score)} Risk)"
        )
        last_page = max_page(records)
        for page in page_numbers(records):
            on_page = risks_on_page(records, page)
            spans = map_highlights(page_text_for(records, page), on_page)
            unplaced = sum(1 for r in on_page if not r.has_valid_highlight())
            Log.info(
                f"Page {page}/{last_page}: {len(spans)} highlighted spans, "
                f"{unplaced} risks without a position"
            )
    finally:
        await client.aclose()


def main(argv: list[str] | None = None) -> None:
    """Entry point: settings -> logging -> storage -> process one document."""
    args = sys.argv[1:] if argv is None else argv
    settings = Settings()
    Log.configure(settings.log_level)
    if len(args) != 1:
        Log.error("Usage: python -m clausemap.main <doc_id>")
        raise SystemExit(2)

    if settings.cache_backend.lower() == "postgres":
        init_pool(settings)
    try:
        asyncio.run(process_document(args[0], settings))
    finally:
        close_pool()


if __name__ == "__main__":
    main()
