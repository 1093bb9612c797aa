from typing import Any

import httpx

from clausemap.analysis.base import BaseAnalysisClient
from clausemap.analysis.exceptions import AnalysisNetworkError, AnalysisResponseError
from clausemap.logging.logger import Log


class HttpAnalysisClient(BaseAnalysisClient):
    """Analysis service client over its JSON HTTP API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            transport=transport,
        )

    async def summarize(self, doc_id: str) -> dict[str, Any]:
        return await self._request("POST", "/summarize", json={"doc_id": doc_id})

    async def analyze_risks(self, doc_id: str) -> dict[str, Any]:
        return await self._request("POST", "/risks", json={"doc_id": doc_id})

    async def fetch_document(self, doc_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/document/{doc_id}")

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        Log.debug(f"{method} {path}")
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.TransportError as exc:
            raise AnalysisNetworkError(f"Analysis service network error: {exc}") from exc

        if response.is_error:
            raise AnalysisResponseError(
                f"Analysis service returned {response.status_code} for {method} {path}"
            )
        try:
            body = response.json()
        except ValueError as exc:
            raise AnalysisResponseError(f"Invalid JSON response: {exc}") from exc
        if not isinstance(body, dict):
            raise AnalysisResponseError("JSON response must be an object")
        return body
