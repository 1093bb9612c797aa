from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypedDict


class Severity(str, Enum):
    """Ordinal risk level of a clause."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class LlmRisk(TypedDict, total=False):
    """Risk as emitted by the language model: rich text, no position."""

    id: str
    short_risk: str
    explanation: str
    recommendations: list[str]
    severity_level: str
    severity_score: float


class ServerRisk(TypedDict, total=False):
    """Risk as emitted by the regex fallback pass: positioned, coarse text."""

    id: str
    severity_level: str
    severity_score: float
    snippet: str
    label: str
    page_number: int
    page_text: str
    highlight_start: int
    highlight_end: int
    original_text: str


class UpstreamRisk(LlmRisk, ServerRisk, total=False):
    """Union of both upstream shapes, as produced by a merge or a standard payload."""


@dataclass(frozen=True)
class RiskRecord:
    """Canonical risk clause after reconciliation."""

    id: str
    severity: Severity
    severity_score: float
    title: str
    explanation: str
    recommendations: list[str] = field(default_factory=list)
    page_number: int = 1
    page_text: str = ""
    highlight_start: int = 0
    highlight_end: int = 0
    highlight_text: str = ""

    def has_valid_highlight(self) -> bool:
        return 0 <= self.highlight_start < self.highlight_end <= len(self.page_text)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "severity": self.severity.value,
            "severityScore": self.severity_score,
            "title": self.title,
            "explanation": self.explanation,
            "recommendations": list(self.recommendations),
            "pageNumber": self.page_number,
            "pageText": self.page_text,
            "highlightStart": self.highlight_start,
            "highlightEnd": self.highlight_end,
            "highlightText": self.highlight_text,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RiskRecord":
        """Rebuild a record written by ``to_dict``.

        Raises:
            KeyError, ValueError, TypeError: if the data is not a stored record.
            OverflowError: if a position is not finite.
        """
        return cls(
            id=str(data["id"]),
            severity=Severity(data["severity"]),
            severity_score=float(data["severityScore"]),
            title=str(data["title"]),
            explanation=str(data["explanation"]),
            recommendations=[str(r) for r in data["recommendations"]],
            page_number=int(data["pageNumber"]),
            page_text=str(data["pageText"]),
            highlight_start=int(data["highlightStart"]),
            highlight_end=int(data["highlightEnd"]),
            highlight_text=str(data.get("highlightText", "")),
        )
