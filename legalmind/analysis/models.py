from dataclasses import dataclass


@dataclass(frozen=True)
class CaseInfo:
    """Docket number, court and parties of a judgment."""

    case_number: str
    court: str
    plaintiff: str
    defendant: str

    def to_dict(self) -> dict[str, object]:
        return {
            "caseNumber": self.case_number,
            "court": self.court,
            "parties": {"plaintiff": self.plaintiff, "defendant": self.defendant},
        }


@dataclass(frozen=True)
class VerdictAnalysis:
    """Structured analysis of one judgment. Every list field is non-empty."""

    summary: str
    case_info: CaseInfo
    favorable_points: tuple[str, ...]
    unfavorable_points: tuple[str, ...]
    legal_grounds: tuple[str, ...]
    appealable_issues: tuple[str, ...]
    recommended_strategy: str

    def to_dict(self) -> dict[str, object]:
        return {
            "summary": self.summary,
            "caseInfo": self.case_info.to_dict(),
            "favorablePoints": list(self.favorable_points),
            "unfavorablePoints": list(self.unfavorable_points),
            "legalGrounds": list(self.legal_grounds),
            "appealableIssues": list(self.appealable_issues),
            "recommendedStrategy": self.recommended_strategy,
        }


@dataclass(frozen=True)
class FallbackAnalysis:
    """Reduced-confidence result of the regex extractor, shown when the LLM path fails.

    It carries only the recovered case fields and is never a stand-in for a
    ``VerdictAnalysis``.
    """

    case_info: CaseInfo
    reason: str
    notice: str
    degraded: bool = True
