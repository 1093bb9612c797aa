from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from clausemap.risks.models import RiskRecord

PLACEHOLDER_FILENAME = "Document"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_epoch_ms(value: datetime | None) -> int | None:
    if value is None:
        return None
    return round(value.timestamp() * 1000)


def from_epoch_ms(value: Any) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Timestamp must be epoch milliseconds, got {value!r}")
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


@dataclass(frozen=True)
class CachedDocument:
    """Last known snapshot of a document's analysis results."""

    doc_id: str
    filename: str
    uploaded_at: datetime
    summary: str | None = None
    summary_generated_at: datetime | None = None
    risks: list[RiskRecord] | None = None
    risks_generated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "docId": self.doc_id,
            "filename": self.filename,
            "uploadedAt": to_epoch_ms(self.uploaded_at),
            "summary": self.summary,
            "summaryGeneratedAt": to_epoch_ms(self.summary_generated_at),
            "risks": [r.to_dict() for r in self.risks] if self.risks is not None else None,
            "risksGeneratedAt": to_epoch_ms(self.risks_generated_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CachedDocument":
        """Rebuild a document written by ``to_dict``.

        Raises:
            KeyError, ValueError, TypeError: if the data is not a stored document.
            OverflowError, OSError: if a timestamp is out of range.
        """
        uploaded_at = from_epoch_ms(data["uploadedAt"])
        if uploaded_at is None:
            raise ValueError("uploadedAt is required")
        summary = data.get("summary")
        if summary is not None and not isinstance(summary, str):
            raise TypeError("summary must be a string")
        raw_risks = data.get("risks")
        if raw_risks is not None and not isinstance(raw_risks, list):
            raise TypeError("risks must be a list")
        return cls(
            doc_id=str(data["docId"]),
            filename=str(data["filename"]),
            uploaded_at=uploaded_at,
            summary=summary,
            summary_generated_at=from_epoch_ms(data.get("summaryGeneratedAt")),
            risks=[RiskRecord.from_dict(r) for r in raw_risks] if raw_risks is not None else None,
            risks_generated_at=from_epoch_ms(data.get("risksGeneratedAt")),
        )
