import math
from collections.abc import Sequence

from clausemap.risks.models import RiskRecord

HIGH_RISK_THRESHOLD = 70
MEDIUM_RISK_THRESHOLD = 40


def risk_score(records: Sequence[RiskRecord]) -> int:
    """Document score: mean severity score, rounded half up, clamped to 0..100."""
    if not records:
        return 0
    mean = sum(r.severity_score for r in records) / len(records)
    return max(0, min(100, math.floor(mean + 0.5)))


def risk_level(score: int) -> str:
    if score >= HIGH_RISK_THRESHOLD:
        return "High"
    if score >= MEDIUM_RISK_THRESHOLD:
        return "Medium"
    return "Low"
