import re

from legalmind.config.settings import Settings
from legalmind.logging.logger import Log
from legalmind.quality.models import QualityLevel, QualityReport

LEGAL_KEYWORDS: tuple[str, ...] = ("判決", "原告", "被告", "法院", "案", "事實", "理由")

ISSUE_TOO_SHORT = "文字內容過少，可能為掃描檔"
ISSUE_FEW_KEYWORDS = "缺少判決書常見關鍵字"
ISSUE_NOISY = "可能包含無法辨識的字元"

# CJK ideographs, word characters, whitespace, CJK symbols/punctuation, fullwidth forms.
_RECOGNIZED_CHAR = re.compile(r"[\u4e00-\u9fff\w\s\u3000-\u303f\uff00-\uffef]")


class QualityAssessor:
    """Scores normalized judgment text as high, medium or low confidence."""

    def __init__(
        self,
        *,
        min_words: int = 100,
        min_keywords: int = 3,
        max_noise_ratio: float = 0.3,
        high_min_words: int = 500,
        medium_min_words: int = 200,
    ) -> None:
        self._min_words = min_words
        self._min_keywords = min_keywords
        self._max_noise_ratio = max_noise_ratio
        self._high_min_words = high_min_words
        self._medium_min_words = medium_min_words

    @classmethod
    def from_settings(cls, settings: Settings) -> "QualityAssessor":
        return cls(
            min_words=settings.quality_min_words,
            min_keywords=settings.quality_min_keywords,
            max_noise_ratio=settings.quality_max_noise_ratio,
            high_min_words=settings.quality_high_min_words,
            medium_min_words=settings.quality_medium_min_words,
        )

    def assess(self, text: str) -> QualityReport:
        word_count = len(text.split())
        issues: list[str] = []

        if word_count < self._min_words:
            issues.append(ISSUE_TOO_SHORT)
        if keyword_hits(text) < self._min_keywords:
            issues.append(ISSUE_FEW_KEYWORDS)
        if noise_ratio(text) > self._max_noise_ratio:
            issues.append(ISSUE_NOISY)

        report = QualityReport(
            quality=self._classify(word_count, len(issues)),
            word_count=word_count,
            issues=issues,
        )
        Log.info(
            f"Text quality {report.quality.value}: {word_count} words, {len(issues)} issues"
        )
        return report

    def _classify(self, word_count: int, issue_count: int) -> QualityLevel:
        if issue_count == 0 and word_count > self._high_min_words:
            return QualityLevel.HIGH
        if issue_count <= 1 and word_count > self._medium_min_words:
            return QualityLevel.MEDIUM
        return QualityLevel.LOW


def keyword_hits(text: str) -> int:
    """Number of distinct legal keywords present in the text."""
    return sum(1 for keyword in LEGAL_KEYWORDS if keyword in text)


def noise_ratio(text: str) -> float:
    if not text:
        return 0.0
    recognized = len(_RECOGNIZED_CHAR.findall(text))
    return (len(text) - recognized) / len(text)
