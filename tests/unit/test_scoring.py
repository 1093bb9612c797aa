import pytest

from clausemap.risks.models import RiskRecord, Severity
from clausemap.risks.scoring import risk_level, risk_score


def _record(score: float) -> RiskRecord:
    return RiskRecord(
        id=f"r{score}",
        severity=Severity.MEDIUM,
        severity_score=score,
        title="Risk",
        explanation="A specific explanation of the risk.",
    )


class TestRiskScore:
    def test_empty_is_zero(self) -> None:
        assert risk_score([]) == 0

    def test_single_record(self) -> None:
        assert risk_score([_record(100)]) == 100

    def test_mean(self) -> None:
        assert risk_score([_record(40), _record(60)]) == 50

    def test_rounds_half_up(self) -> None:
        assert risk_score([_record(40), _record(41)]) == 41

    def test_clamped(self) -> None:
        assert risk_score([_record(150)]) == 100
        assert risk_score([_record(-10)]) == 0


class TestRiskLevel:
    @pytest.mark.parametrize(
        ("score", "level"),
        [(0, "Low"), (39, "Low"), (40, "Medium"), (69, "Medium"), (70, "High"), (100, "High")],
    )
    def test_thresholds(self, score: int, level: str) -> None:
        assert risk_level(score) == level
