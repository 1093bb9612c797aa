"""Maps reconciled risks onto non-overlapping character ranges of a page."""

from collections.abc import Iterable

from clausemap.highlight.models import HighlightSpan, HighlightTier, Segment
from clausemap.risks.models import RiskRecord, Severity

_TIERS: dict[Severity, HighlightTier] = {
    Severity.HIGH: HighlightTier.STRONG,
    Severity.MEDIUM: HighlightTier.MIDDLE,
    Severity.LOW: HighlightTier.WEAK,
}


def map_highlights(page_text: str, risks_on_page: Iterable[RiskRecord]) -> list[HighlightSpan]:
    """Compute ordered, non-overlapping highlight spans for a page.

    Ranges outside ``0 <= start < end <= len(page_text)`` are discarded.
    Ranges are taken in ascending start order (ties keep input order). A range
    fully covered by an earlier one is dropped; a partially covered one keeps
    only the part past the earlier range's end.
    """
    candidates = [
        HighlightSpan(risk.highlight_start, risk.highlight_end, risk.severity)
        for risk in risks_on_page
        if 0 <= risk.highlight_start < risk.highlight_end <= len(page_text)
    ]
    candidates.sort(key=lambda span: span.start)

    spans: list[HighlightSpan] = []
    cursor = 0
    for candidate in candidates:
        start = max(candidate.start, cursor)
        if candidate.end > start:
            spans.append(HighlightSpan(start, candidate.end, candidate.severity))
        cursor = max(cursor, candidate.end)
    return spans


def render_segments(page_text: str, risks_on_page: Iterable[RiskRecord]) -> list[Segment]:
    """Split the page into alternating plain and highlighted segments.

    The segments' text always concatenates back to ``page_text``. With no valid
    highlights the whole page, even an empty one, is a single plain segment.
    """
    spans = map_highlights(page_text, risks_on_page)
    if not spans:
        return [Segment(page_text)]

    segments: list[Segment] = []
    cursor = 0
    for span in spans:
        if span.start > cursor:
            segments.append(Segment(page_text[cursor:span.start]))
        segments.append(Segment(page_text[span.start:span.end], span.severity))
        cursor = span.end
    if cursor < len(page_text):
        segments.append(Segment(page_text[cursor:]))
    return segments


def severity_class(severity: Severity | None) -> HighlightTier:
    if severity is None:
        return HighlightTier.WEAK
    return _TIERS.get(severity, HighlightTier.WEAK)
