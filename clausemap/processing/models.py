from dataclasses import dataclass
from enum import Enum


class ProcessingStep(str, Enum):
    UPLOADED = "uploaded"
    ANALYZING = "analyzing"
    COMPLETE = "complete"


@dataclass(frozen=True, slots=True)
class ProcessingState:
    """Progress snapshot reported to the processing view."""

    step: ProcessingStep
    progress: int


@dataclass(slots=True)
class ProcessingResult:
    """Per-call readiness flags, used only for user feedback."""

    summary_ready: bool = False
    risks_ready: bool = False
