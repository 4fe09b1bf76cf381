"""Regex fallback that recovers basic case fields without the LLM."""

import re

from legalmind.analysis.models import CaseInfo, FallbackAnalysis

CASE_NUMBER_NOT_FOUND = "未找到案號"
COURT_NOT_FOUND = "未找到法院"
PLAINTIFF_NOT_FOUND = "未找到原告"
DEFENDANT_NOT_FOUND = "未找到被告"

FALLBACK_NOTICE = "AI 分析暫時無法使用，以下僅為從判決書文字擷取的基本資訊，請手動確認。"

_CASE_NUMBER_PATTERNS = (
    re.compile(r"\d+\s*年度\s*\S+?\s*字\s*第\s*\d+\s*號"),
    re.compile(r"案號[：:\s]*([^\s]+)"),
)

# Priority order: district, high (with branch), supreme, supreme administrative, IP.
_COURT_PATTERNS = (
    re.compile(r"(?:臺灣|台灣|福建)[\u4e00-\u9fff]{2,4}?地方法院"),
    re.compile(r"(?:臺灣|台灣)?高等法院(?:[\u4e00-\u9fff]{2,3}?分院)?"),
    re.compile(r"最高法院"),
    re.compile(r"最高行政法院"),
    re.compile(r"智慧財產(?:及商業)?法院"),
)

_PLAINTIFF = re.compile(r"原告\s*[：:]\s*([^\s被上。，,；;]+)")
_DEFENDANT = re.compile(r"被告\s*[：:]\s*([^\s。，,；;]+)")


def extract_basic_info(text: str) -> CaseInfo:
    """Best-effort case fields; any field not found holds its sentinel."""
    return CaseInfo(
        case_number=_case_number(text),
        court=_court(text),
        plaintiff=_first_group(_PLAINTIFF, text) or PLAINTIFF_NOT_FOUND,
        defendant=_first_group(_DEFENDANT, text) or DEFENDANT_NOT_FOUND,
    )


def build_fallback_analysis(text: str, reason: str) -> FallbackAnalysis:
    return FallbackAnalysis(
        case_info=extract_basic_info(text),
        reason=reason,
        notice=FALLBACK_NOTICE,
    )


def _case_number(text: str) -> str:
    docket, labelled = _CASE_NUMBER_PATTERNS
    match = docket.search(text)
    if match:
        return re.sub(r"\s+", "", match.group(0))
    return _first_group(labelled, text) or CASE_NUMBER_NOT_FOUND


def _court(text: str) -> str:
    for pattern in _COURT_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0)
    return COURT_NOT_FOUND


def _first_group(pattern: re.Pattern[str], text: str) -> str:
    match = pattern.search(text)
    return match.group(1).strip() if match else ""
