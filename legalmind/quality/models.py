from dataclasses import dataclass, field
from enum import Enum


class QualityLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class QualityReport:
    """Confidence in the extracted text, with issues ordered as they were found."""

    quality: QualityLevel
    word_count: int
    issues: list[str] = field(default_factory=list)
