"""Reconciliation of server risk payloads into canonical risk records."""

import math
from typing import Any, assert_never

from clausemap.logging.logger import Log
from clausemap.risks.fallback_text import fallback_explanation, fallback_recommendations
from clausemap.risks.models import LlmRisk, RiskRecord, ServerRisk, Severity, UpstreamRisk
from clausemap.risks.payload import (
    FallbackPayload,
    RiskPayload,
    StandardPayload,
    classify_payload,
    parse_llm_risks,
)
from clausemap.risks.text_rules import is_generic_explanation, is_generic_recommendation


class RiskReconciler:
    """Turns a raw server payload into a deduplicated list of canonical risks.

    Records from the fallback shape are merged by id: the model supplies the
    text and severity, the regex pass supplies page and highlight positions.
    Boilerplate explanations and recommendations are replaced with text
    derived from the risk title.
    """

    def reconcile(self, payload: RiskPayload | dict[str, Any]) -> list[RiskRecord]:
        if not isinstance(payload, (FallbackPayload, StandardPayload)):
            payload = classify_payload(payload)

        upstream = self._collect(payload)
        unique = dedupe_by_id(upstream)
        records = [self._canonicalize(raw, index) for index, raw in enumerate(unique)]
        Log.debug(f"Reconciled {len(upstream)} upstream risks into {len(records)} records")
        return records

    def _collect(self, payload: RiskPayload) -> list[UpstreamRisk]:
        match payload:
            case FallbackPayload(raw_llm=raw_llm, server_risks=server_risks):
                llm_risks = parse_llm_risks(raw_llm)
                if llm_risks is None:
                    Log.warning("Falling back to server risks only")
                    return list(server_risks)
                return merge_fallback(llm_risks, server_risks)
            case StandardPayload(risks=risks):
                return list(risks)
            case _:
                assert_never(payload)

    def _canonicalize(self, raw: UpstreamRisk, index: int) -> RiskRecord:
        title = _text(raw.get("short_risk")) or _text(raw.get("label")) or f"Risk {index + 1}"
        snippet = _text(raw.get("original_text")) or _text(raw.get("snippet"))

        explanation = _text(raw.get("explanation")).strip()
        if is_generic_explanation(explanation):
            explanation = fallback_explanation(title, snippet)

        recommendations = _specific_recommendations(raw.get("recommendations"))
        if not recommendations:
            recommendations = fallback_recommendations(title)

        return RiskRecord(
            id=str(raw["id"]),
            severity=normalize_severity(raw.get("severity_level")),
            severity_score=_clamp_score(_to_float(raw.get("severity_score"), 0.0)),
            title=title,
            explanation=explanation,
            recommendations=recommendations,
            page_number=max(1, _to_int(raw.get("page_number"), 1)),
            page_text=_text(raw.get("page_text")),
            highlight_start=_to_int(raw.get("highlight_start"), 0),
            highlight_end=_to_int(raw.get("highlight_end"), 0),
            highlight_text=snippet,
        )


def merge_fallback(
    llm_risks: list[LlmRisk],
    server_risks: list[ServerRisk],
) -> list[UpstreamRisk]:
    """Attach page and position data from server risks to model risks with the same id.

    A model risk without a matching server risk is kept as given.
    """
    server_by_id = {str(r["id"]): r for r in server_risks if r.get("id") not in (None, "")}
    merged: list[UpstreamRisk] = []
    for llm_risk in llm_risks:
        record = UpstreamRisk(**llm_risk)
        server = server_by_id.get(str(llm_risk.get("id")))
        if server is not None:
            if "page_number" in server:
                record["page_number"] = server["page_number"]
            if "page_text" in server:
                record["page_text"] = server["page_text"]
            if "highlight_start" in server:
                record["highlight_start"] = server["highlight_start"]
            if "highlight_end" in server:
                record["highlight_end"] = server["highlight_end"]
            record["original_text"] = _text(server.get("original_text")) or _text(
                server.get("snippet")
            )
            record["snippet"] = _text(server.get("snippet"))
            record["label"] = _text(server.get("label"))
        merged.append(record)
    return merged


def dedupe_by_id(risks: list[UpstreamRisk]) -> list[UpstreamRisk]:
    """Keep the first risk for each id; risks without an id are dropped."""
    seen: set[str] = set()
    unique: list[UpstreamRisk] = []
    for risk in risks:
        risk_id = risk.get("id")
        if risk_id is None or risk_id == "":
            continue
        key = str(risk_id)
        if key in seen:
            continue
        seen.add(key)
        unique.append(risk)
    return unique


def normalize_severity(value: Any) -> Severity:
    if isinstance(value, str):
        try:
            return Severity(value.strip().lower())
        except ValueError:
            pass
    return Severity.MEDIUM


def no_risks_placeholder() -> RiskRecord:
    """Record shown in place of an empty risk list. Never cached."""
    return RiskRecord(
        id="no-risks",
        severity=Severity.LOW,
        severity_score=0.0,
        title="No Significant Risks Identified",
        explanation=(
            "No significant risks were found in the document based on the analysis. "
            "You should still read the document carefully."
        ),
        recommendations=["Check the document for any business-specific concerns."],
    )


def _specific_recommendations(raw: Any) -> list[str]:
    if not isinstance(raw, list):
        return []
    return [
        rec.strip()
        for rec in raw
        if isinstance(rec, str) and not is_generic_recommendation(rec)
    ]


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _to_float(value: Any, default: float) -> float:
    if isinstance(value, bool) or value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def _to_int(value: Any, default: int) -> int:
    number = _to_float(value, float("nan"))
    if math.isnan(number):
        return default
    return int(number)


def _clamp_score(score: float) -> float:
    return max(0.0, min(100.0, score))
