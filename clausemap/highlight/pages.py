"""Page navigation over a reconciled risk list."""

from collections.abc import Sequence

from clausemap.risks.models import RiskRecord


def page_numbers(records: Sequence[RiskRecord]) -> list[int]:
    if not records:
        return [1]
    return sorted({r.page_number for r in records})


def max_page(records: Sequence[RiskRecord]) -> int:
    return max(page_numbers(records))


def page_text_for(records: Sequence[RiskRecord], page: int) -> str:
    """Text of ``page`` taken from the first risk on it that carries any."""
    for record in records:
        if record.page_number == page and record.page_text:
            return record.page_text
    return ""


def risks_on_page(records: Sequence[RiskRecord], page: int) -> list[RiskRecord]:
    return [r for r in records if r.page_number == page]
