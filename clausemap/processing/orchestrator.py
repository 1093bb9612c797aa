import asyncio
from collections.abc import AsyncIterator, Callable, Coroutine
from typing import Any

from clausemap.analysis.base import BaseAnalysisClient
from clausemap.cache.document_cache import DocumentCache
from clausemap.cache.models import utc_now
from clausemap.config.settings import Settings
from clausemap.logging.logger import Log
from clausemap.processing.models import ProcessingResult, ProcessingState, ProcessingStep
from clausemap.risks.reconciler import RiskReconciler


class ProcessingOrchestrator:
    """Runs summary and risk analysis for a freshly uploaded document.

    Flow: uploaded -> analyzing -> complete.
    Both remote calls run concurrently and settle independently: a failed call
    is logged and contributes nothing, the other still lands in the cache.
    The flow reaches ``complete`` once both have settled, whatever the outcome.
    """

    ANALYZING_START_PROGRESS = 25

    def __init__(
        self,
        cache: DocumentCache,
        client: BaseAnalysisClient,
        reconciler: RiskReconciler,
        *,
        tick_seconds: float = 0.5,
        tick_step: int = 5,
        ceiling: int = 90,
        handoff_delay_seconds: float = 2.0,
        on_complete: Callable[[str], None] | None = None,
    ) -> None:
        self._cache = cache
        self._client = client
        self._reconciler = reconciler
        self._tick_seconds = tick_seconds
        self._tick_step = tick_step
        self._ceiling = ceiling
        self._handoff_delay_seconds = handoff_delay_seconds
        self._on_complete = on_complete
        self._active = False
        self._result = ProcessingResult()
        # Strong references so detached calls outlive a cancelled run.
        self._inflight: set[asyncio.Task[None]] = set()

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def result(self) -> ProcessingResult:
        return self._result

    def cancel(self) -> None:
        """Stop reporting. In-flight calls keep running; their cache writes still land."""
        if self._active:
            Log.info("Processing view closed, suppressing further updates")
        self._active = False

    async def run(self, doc_id: str) -> AsyncIterator[ProcessingState]:
        """Yield progress states until both analysis calls have settled."""
        self._active = True
        self._result = ProcessingResult()
        Log.info("Processing document", doc_id=doc_id)

        yield ProcessingState(ProcessingStep.UPLOADED, 0)
        if not self._active:
            return

        progress = self.ANALYZING_START_PROGRESS
        yield ProcessingState(ProcessingStep.ANALYZING, progress)
        if not self._active:
            return

        pending: set[asyncio.Task[None]] = {
            self._spawn(self._summarize(doc_id)),
            self._spawn(self._analyze_risks(doc_id)),
        }
        while pending:
            _, pending = await asyncio.wait(pending, timeout=self._tick_seconds)
            if not self._active:
                return
            if pending and progress < self._ceiling:
                progress = min(self._ceiling, progress + self._tick_step)
                yield ProcessingState(ProcessingStep.ANALYZING, progress)
                if not self._active:
                    return

        Log.info(
            "Processing finished",
            doc_id=doc_id,
            summary_ready=self._result.summary_ready,
            risks_ready=self._result.risks_ready,
        )
        yield ProcessingState(ProcessingStep.COMPLETE, 100)

        await asyncio.sleep(self._handoff_delay_seconds)
        if self._active and self._on_complete is not None:
            self._on_complete(doc_id)

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
        task = asyncio.create_task(coro)
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        return task

    async def _summarize(self, doc_id: str) -> None:
        try:
            response = await self._client.summarize(doc_id)
        except Exception as exc:
            Log.warning(f"Summary generation failed: {exc}", doc_id=doc_id)
            return

        summary = response.get("summary")
        if not isinstance(summary, str) or not summary.strip():
            Log.warning("Summary response carried no summary", doc_id=doc_id)
            return
        try:
            self._cache.patch(doc_id, summary=summary, summary_generated_at=utc_now())
        except Exception as exc:
            Log.warning(f"Failed to cache summary: {exc}", doc_id=doc_id)
            return
        if self._active:
            self._result.summary_ready = True
        Log.info("Summary cached", doc_id=doc_id)

    async def _analyze_risks(self, doc_id: str) -> None:
        try:
            response = await self._client.analyze_risks(doc_id)
        except Exception as exc:
            Log.warning(f"Risk analysis failed: {exc}", doc_id=doc_id)
            return

        try:
            records = self._reconciler.reconcile(response)
            self._cache.patch(doc_id, risks=records, risks_generated_at=utc_now())
        except Exception as exc:
            Log.warning(f"Failed to reconcile and cache risks: {exc}", doc_id=doc_id)
            return
        if self._active:
            self._result.risks_ready = True
        Log.info(f"Cached {len(records)} risks", doc_id=doc_id)


def build_orchestrator(
    settings: Settings,
    cache: DocumentCache,
    client: BaseAnalysisClient,
    on_complete: Callable[[str], None] | None = None,
) -> ProcessingOrchestrator:
    """Build an orchestrator with timings taken from settings."""
    return ProcessingOrchestrator(
        cache,
        client,
        RiskReconciler(),
        tick_seconds=settings.progress_tick_seconds,
        tick_step=settings.progress_tick_step,
        ceiling=settings.progress_ceiling,
        handoff_delay_seconds=settings.handoff_delay_seconds,
        on_complete=on_complete,
    )
