"""Turns a raw LLM reply into a VerdictAnalysis or one specific failure.

The steps run in order and stop at the first failure: locate the JSON span,
parse it, check the top-level fields, then the nested case info. The result
is a tagged value so callers decide how to react (re-prompt, fall back).
"""

import json
import re
from dataclasses import dataclass
from typing import Any

from legalmind.analysis.exceptions import (
    AnalysisError,
    AnalysisFailureReason,
    MalformedJsonError,
    NoJsonFoundError,
    SchemaViolationError,
)
from legalmind.analysis.models import CaseInfo, VerdictAnalysis

_JSON_SPAN = re.compile(r"\{[\s\S]*\}")

_REQUIRED_FIELDS: tuple[tuple[str, type], ...] = (
    ("summary", str),
    ("caseInfo", dict),
    ("favorablePoints", list),
    ("unfavorablePoints", list),
    ("legalGrounds", list),
    ("appealableIssues", list),
    ("recommendedStrategy", str),
)
_CASE_INFO_FIELDS = ("caseNumber", "court")
_PARTY_FIELDS = ("plaintiff", "defendant")


@dataclass(frozen=True)
class AnalysisFailure:
    reason: AnalysisFailureReason
    detail: str
    field: str | None = None

    def to_error(self) -> AnalysisError:
        if self.reason is AnalysisFailureReason.NO_JSON_FOUND:
            return NoJsonFoundError(self.detail)
        if self.reason is AnalysisFailureReason.MALFORMED_JSON:
            return MalformedJsonError(self.detail)
        return SchemaViolationError(self.detail, field=self.field or "")


@dataclass(frozen=True)
class ReplyParseResult:
    analysis: VerdictAnalysis | None = None
    failure: AnalysisFailure | None = None

    @property
    def ok(self) -> bool:
        return self.analysis is not None


def parse_analysis_reply(raw: str) -> ReplyParseResult:
    """Run the span -> parse -> schema pipeline over one LLM reply."""
    span = extract_json_span(raw)
    if span is None:
        return _failed(AnalysisFailureReason.NO_JSON_FOUND, "No JSON object found in reply")

    try:
        data = json.loads(span)
    except json.JSONDecodeError as exc:
        return _failed(AnalysisFailureReason.MALFORMED_JSON, f"Invalid JSON in reply: {exc}")
    if not isinstance(data, dict):
        return _failed(AnalysisFailureReason.MALFORMED_JSON, "Reply JSON must be an object")

    field = first_schema_violation(data)
    if field is not None:
        return _failed(
            AnalysisFailureReason.SCHEMA_VIOLATION,
            f"Missing or invalid field: {field}",
            field=field,
        )
    return ReplyParseResult(analysis=build_analysis(data))


def extract_json_span(raw: str) -> str | None:
    """Greedy span from the first ``{`` to the last ``}``."""
    match = _JSON_SPAN.search(raw)
    return match.group(0) if match else None


def first_schema_violation(data: dict[str, Any]) -> str | None:
    """Dotted path of the first missing or mis-shaped field, or None."""
    for field, shape in _REQUIRED_FIELDS:
        if not _has_shape(data.get(field), shape):
            return field

    case_info = data["caseInfo"]
    for field in _CASE_INFO_FIELDS:
        if not _is_filled(case_info.get(field)):
            return f"caseInfo.{field}"
    parties = case_info.get("parties")
    if not isinstance(parties, dict):
        return "caseInfo.parties"
    for field in _PARTY_FIELDS:
        if not _is_filled(parties.get(field)):
            return f"caseInfo.parties.{field}"
    return None


def build_analysis(data: dict[str, Any]) -> VerdictAnalysis:
    """Build the model from data that already passed ``first_schema_violation``."""
    case_info = data["caseInfo"]
    parties = case_info["parties"]
    return VerdictAnalysis(
        summary=data["summary"].strip(),
        case_info=CaseInfo(
            case_number=case_info["caseNumber"].strip(),
            court=case_info["court"].strip(),
            plaintiff=parties["plaintiff"].strip(),
            defendant=parties["defendant"].strip(),
        ),
        favorable_points=_items(data["favorablePoints"]),
        unfavorable_points=_items(data["unfavorablePoints"]),
        legal_grounds=_items(data["legalGrounds"]),
        appealable_issues=_items(data["appealableIssues"]),
        recommended_strategy=data["recommendedStrategy"].strip(),
    )


def _has_shape(value: Any, shape: type) -> bool:
    if shape is list:
        return (
            isinstance(value, list)
            and len(value) > 0
            and all(_is_filled(item) for item in value)
        )
    return isinstance(value, shape)


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _items(values: list[str]) -> tuple[str, ...]:
    return tuple(item.strip() for item in values)


def _failed(
    reason: AnalysisFailureReason, detail: str, field: str | None = None
) -> ReplyParseResult:
    return ReplyParseResult(failure=AnalysisFailure(reason=reason, detail=detail, field=field))
