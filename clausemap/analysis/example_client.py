"""Example analysis client.

Use this module as a reference when implementing new service adapters.
Implement BaseAnalysisClient and register the provider in AnalysisClientFactory.
"""

import copy
from typing import Any, ClassVar

from clausemap.analysis.base import BaseAnalysisClient

_PAGE_TEXT = (
    "12. Termination. Either party may terminate this Agreement at any time "
    "without notice. 13. Liability. The Supplier's liability is unlimited."
)


class ExampleAnalysisClient(BaseAnalysisClient):
    """Adapter that returns fixed responses in the fallback shape.

    No network calls. Useful for local development and tests.
    """

    SUMMARY_RESPONSE: ClassVar[dict[str, Any]] = {
        "summary": "A supply agreement with one-sided termination and unlimited liability.",
    }

    RISKS_RESPONSE: ClassVar[dict[str, Any]] = {
        "risks_fallback": True,
        "risks_raw_llm": (
            "```json\n"
            '[{"id": "r1", "short_risk": "Termination without notice", '
            '"explanation": "Review this clause with a legal professional", '
            '"recommendations": ["Negotiate a notice period"], '
            '"severity_level": "High", "severity_score": 80}, '
            '{"id": "r2", "short_risk": "Unlimited liability", '
            '"explanation": "The supplier carries uncapped exposure for any damages.", '
            '"recommendations": ["Consult a legal professional"], '
            '"severity_level": "Medium", "severity_score": 60}]\n'
            "```"
        ),
        "risks": [
            {
                "id": "r1",
                "severity_level": "high",
                "severity_score": 80,
                "snippet": "Either party may terminate this Agreement at any time without notice.",
                "label": "Termination",
                "page_number": 1,
                "page_text": _PAGE_TEXT,
                "highlight_start": 17,
                "highlight_end": 86,
                "original_text": "Either party may terminate this Agreement at any time without notice.",
            },
            {
                "id": "r2",
                "severity_level": "medium",
                "severity_score": 60,
                "snippet": "The Supplier's liability is unlimited.",
                "label": "Liability",
                "page_number": 1,
                "page_text": _PAGE_TEXT,
                "highlight_start": 102,
                "highlight_end": 140,
                "original_text": "The Supplier's liability is unlimited.",
            },
        ],
    }

    async def summarize(self, doc_id: str) -> dict[str, Any]:
        return {"doc_id": doc_id, **copy.deepcopy(self.SUMMARY_RESPONSE)}

    async def analyze_risks(self, doc_id: str) -> dict[str, Any]:
        return {"doc_id": doc_id, **copy.deepcopy(self.RISKS_RESPONSE)}

    async def fetch_document(self, doc_id: str) -> dict[str, Any]:
        return {
            "doc_id": doc_id,
            "filename": "example-agreement.pdf",
            **copy.deepcopy(self.SUMMARY_RESPONSE),
            **copy.deepcopy(self.RISKS_RESPONSE),
        }
