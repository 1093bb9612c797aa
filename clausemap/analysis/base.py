from abc import ABC, abstractmethod
from typing import Any


class BaseAnalysisClient(ABC):
    """Contract for the remote service that summarizes documents and finds risks."""

    @abstractmethod
    async def summarize(self, doc_id: str) -> dict[str, Any]:
        """Trigger summary generation.

        Returns:
            The response object; ``summary`` holds the generated text.

        Raises:
            AnalysisError: on any failure.
        """

    @abstractmethod
    async def analyze_risks(self, doc_id: str) -> dict[str, Any]:
        """Trigger risk analysis.

        Returns:
            The response object, carrying ``risks`` or ``server_risks``, or the
            fallback triple ``risks_fallback``/``risks_raw_llm``/``risks``.

        Raises:
            AnalysisError: on any failure.
        """

    @abstractmethod
    async def fetch_document(self, doc_id: str) -> dict[str, Any]:
        """Fetch the stored analysis of a document.

        Raises:
            AnalysisError: on any failure.
        """

    async def aclose(self) -> None:
        """Release transport resources. No-op by default."""
