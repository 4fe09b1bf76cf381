from legalmind.analysis.models import CaseInfo, FallbackAnalysis, VerdictAnalysis
from legalmind.analysis.requestor import AnalysisRequestor

__all__ = ["AnalysisRequestor", "CaseInfo", "FallbackAnalysis", "VerdictAnalysis"]
