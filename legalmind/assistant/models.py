from dataclasses import dataclass

from legalmind.analysis.models import FallbackAnalysis, VerdictAnalysis
from legalmind.quality.models import QualityReport


@dataclass(frozen=True)
class PreparedJudgment:
    """Normalized text of an upload plus extraction metadata."""

    document_name: str
    text: str
    page_count: int
    file_size: int
    extraction_seconds: float
    quality: QualityReport


@dataclass(frozen=True)
class AnalysisOutcome:
    """Either a full analysis or a labelled fallback together with the error that caused it."""

    analysis: VerdictAnalysis | None = None
    fallback: FallbackAnalysis | None = None
    error: Exception | None = None

    @property
    def degraded(self) -> bool:
        return self.analysis is None
