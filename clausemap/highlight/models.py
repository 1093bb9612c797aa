from dataclasses import dataclass
from enum import Enum

from clausemap.risks.models import Severity


class HighlightTier(str, Enum):
    """Visual emphasis levels; styling itself belongs to the presentation layer."""

    STRONG = "strong"
    MIDDLE = "middle"
    WEAK = "weak"


@dataclass(frozen=True, slots=True)
class HighlightSpan:
    """Half-open character range ``[start, end)`` over one page's text."""

    start: int
    end: int
    severity: Severity


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of page text; ``severity`` is None for plain text."""

    text: str
    severity: Severity | None = None

    @property
    def is_highlighted(self) -> bool:
        return self.severity is not None
