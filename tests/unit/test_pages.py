from clausemap.highlight.pages import max_page, page_numbers, page_text_for, risks_on_page
from clausemap.risks.models import RiskRecord, Severity


def _record(risk_id: str, page: int, text: str = "") -> RiskRecord:
    return RiskRecord(
        id=risk_id,
        severity=Severity.MEDIUM,
        severity_score=50.0,
        title="Risk",
        explanation="A specific explanation of the risk.",
        page_number=page,
        page_text=text,
    )


class TestPageNumbers:
    def test_distinct_sorted(self) -> None:
        records = [_record("a", 3), _record("b", 1), _record("c", 3)]
        assert page_numbers(records) == [1, 3]

    def test_defaults_to_first_page(self) -> None:
        assert page_numbers([]) == [1]
        assert max_page([]) == 1

    def test_max_page(self) -> None:
        assert max_page([_record("a", 2), _record("b", 5)]) == 5


class TestPageText:
    def test_first_record_with_text(self) -> None:
        records = [_record("a", 2), _record("b", 2, "page two"), _record("c", 2, "other")]
        assert page_text_for(records, 2) == "page two"

    def test_missing_page(self) -> None:
        assert page_text_for([_record("a", 1, "text")], 4) == ""


class TestRisksOnPage:
    def test_filters_by_page(self) -> None:
        records = [_record("a", 1), _record("b", 2), _record("c", 1)]
        assert [r.id for r in risks_on_page(records, 1)] == ["a", "c"]
