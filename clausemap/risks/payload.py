"""Classification of server risk payloads into fallback and standard shapes."""

import json
from dataclasses import dataclass, field
from typing import Any

from clausemap.logging.logger import Log
from clausemap.risks.models import LlmRisk, ServerRisk, UpstreamRisk


@dataclass(frozen=True)
class FallbackPayload:
    """The server could not parse the model output; both raw parts are attached."""

    raw_llm: str
    server_risks: list[ServerRisk] = field(default_factory=list)


@dataclass(frozen=True)
class StandardPayload:
    """Risks already merged and well-formed on the server side."""

    risks: list[UpstreamRisk] = field(default_factory=list)


RiskPayload = FallbackPayload | StandardPayload


def classify_payload(raw: Any) -> RiskPayload:
    """Decide once which shape a document or risks response carries.

    The fallback shape needs ``risks_fallback`` set to true, a non-empty
    ``risks_raw_llm`` string and a ``risks`` list. Otherwise records are read
    from ``risks`` or, for risks-trigger responses, from ``server_risks``.
    """
    if not isinstance(raw, dict):
        Log.warning(f"Risk payload is not an object: {type(raw).__name__}")
        return StandardPayload()

    risks = raw.get("risks")
    raw_llm = raw.get("risks_raw_llm")
    if (
        raw.get("risks_fallback") is True
        and isinstance(raw_llm, str)
        and raw_llm.strip()
        and isinstance(risks, list)
    ):
        return FallbackPayload(raw_llm=raw_llm, server_risks=_objects_only(risks))

    if isinstance(risks, list):
        return StandardPayload(risks=_objects_only(risks))
    server_risks = raw.get("server_risks")
    if isinstance(server_risks, list):
        return StandardPayload(risks=_objects_only(server_risks))
    return StandardPayload()


def strip_code_fences(raw: str) -> str:
    """Remove a leading ```json (or bare ```) fence and a trailing ``` fence."""
    cleaned = raw.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[len("```json"):]
    elif cleaned.startswith("```"):
        cleaned = cleaned[len("```"):]
    if cleaned.endswith("```"):
        cleaned = cleaned[: -len("```")]
    return cleaned.strip()


def parse_llm_risks(raw: str) -> list[LlmRisk] | None:
    """Parse the raw model blob into risk objects.

    Returns:
        The parsed risks, or None when the blob is not a JSON array.
    """
    try:
        parsed = json.loads(strip_code_fences(raw))
    except json.JSONDecodeError as exc:
        Log.warning(f"Failed to parse raw LLM risks: {exc}")
        return None

    if not isinstance(parsed, list):
        Log.warning(f"Raw LLM risks is not an array: {type(parsed).__name__}")
        return None
    return _objects_only(parsed)


def _objects_only(items: list[Any]) -> list[Any]:
    return [item for item in items if isinstance(item, dict)]
