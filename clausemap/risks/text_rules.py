"""Detection of boilerplate risk text and keyword categorisation of risk titles."""

from enum import Enum

_MIN_EXPLANATION_LENGTH = 20

GENERIC_EXPLANATION_FRAGMENTS: tuple[str, ...] = (
    "no explanation provided",
    "explanation not provided",
    "this clause requires attention",
    "review this clause",
    "review this clause with a legal professional",
    "consult a legal professional",
    "seek legal advice",
    "risk identified in document",
)

GENERIC_RECOMMENDATION_FRAGMENTS: tuple[str, ...] = (
    "review this clause with a legal professional",
    "consult with a legal professional",
    "seek legal advice",
    "contact a lawyer",
    "review this clause",
    "consult a legal professional",
)


class RiskCategory(str, Enum):
    TERMINATION = "termination"
    LIABILITY = "liability"
    PENALTY = "penalty"
    INDEMNIFICATION = "indemnification"
    WARRANTY = "warranty"
    CONFIDENTIALITY = "confidentiality"
    GOVERNING_LAW = "governing_law"
    ASSIGNMENT = "assignment"
    NOTICE = "notice"
    AUTOMATIC_RENEWAL = "automatic_renewal"
    GENERAL = "general"


# Order matters: the first rule whose keyword occurs in the title wins.
CATEGORY_RULES: tuple[tuple[tuple[str, ...], RiskCategory], ...] = (
    (("termination",), RiskCategory.TERMINATION),
    (("liabilit",), RiskCategory.LIABILITY),
    (("penalt",), RiskCategory.PENALTY),
    (("indemnif",), RiskCategory.INDEMNIFICATION),
    (("warrant",), RiskCategory.WARRANTY),
    (("confident",), RiskCategory.CONFIDENTIALITY),
    (("governing law", "jurisdiction"), RiskCategory.GOVERNING_LAW),
    (("assign",), RiskCategory.ASSIGNMENT),
    (("notice",), RiskCategory.NOTICE),
    (("automatic", "auto-renew"), RiskCategory.AUTOMATIC_RENEWAL),
)


def _contains_any(text: str, fragments: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(fragment in lowered for fragment in fragments)


def is_generic_explanation(text: str | None) -> bool:
    """True when an explanation is missing, too short, or boilerplate."""
    cleaned = (text or "").strip()
    if len(cleaned) < _MIN_EXPLANATION_LENGTH:
        return True
    return _contains_any(cleaned, GENERIC_EXPLANATION_FRAGMENTS)


def is_generic_recommendation(text: str | None) -> bool:
    """True when a recommendation is blank or boilerplate."""
    cleaned = (text or "").strip()
    if not cleaned:
        return True
    return _contains_any(cleaned, GENERIC_RECOMMENDATION_FRAGMENTS)


def categorize(title: str) -> RiskCategory:
    lowered = title.lower()
    for keywords, category in CATEGORY_RULES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return RiskCategory.GENERAL
