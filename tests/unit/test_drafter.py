from unittest.mock import MagicMock

import pytest

from legalmind.analysis.models import VerdictAnalysis
from legalmind.analysis.validator import parse_analysis_reply
from legalmind.drafting.drafter import DocumentDrafter, format_filing
from legalmind.drafting.exceptions import (
    DraftError,
    DraftFailureReason,
    InvalidFilingTypeError,
)
from legalmind.drafting.models import DraftDocument, FilingType
from legalmind.llm.exceptions import LlmTransportError


@pytest.fixture()
def analysis(analysis_reply: str) -> VerdictAnalysis:
    result = parse_analysis_reply(analysis_reply)
    assert result.analysis is not None
    return result.analysis


def _make_drafter(client: MagicMock, **kwargs: object) -> DocumentDrafter:
    return DocumentDrafter(client, model="drafting-model", **kwargs)  # type: ignore[arg-type]


class TestFilingType:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (FilingType.COMPLAINT, FilingType.COMPLAINT),
            ("民事上訴狀", FilingType.CIVIL_APPEAL),
            ("criminal_appeal", FilingType.CRIMINAL_APPEAL),
            ("DEFENSE_BRIEF", FilingType.DEFENSE_BRIEF),
        ],
    )
    def test_parse_accepts_member_title_or_name(
        self, value: FilingType | str, expected: FilingType
    ) -> None:
        assert FilingType.parse(value) is expected

    @pytest.mark.parametrize("value", ["行政訴訟狀", "", "appeal"])
    def test_parse_rejects_unknown(self, value: str) -> None:
        with pytest.raises(InvalidFilingTypeError):
            FilingType.parse(value)

    def test_is_a_closed_set_of_four(self) -> None:
        assert len(FilingType) == 4


class TestDraft:
    def test_returns_draft_document(self, analysis: VerdictAnalysis) -> None:
        client = MagicMock()
        client.create_message.return_value = "民事上訴狀\n\n上訴人王小明"
        draft = _make_drafter(client).draft(analysis, "民事上訴狀")
        assert draft == DraftDocument(
            filing_type=FilingType.CIVIL_APPEAL, body="民事上訴狀\n\n上訴人王小明"
        )

    def test_unknown_filing_type_rejected_before_llm_call(
        self, analysis: VerdictAnalysis
    ) -> None:
        client = MagicMock()
        with pytest.raises(InvalidFilingTypeError):
            _make_drafter(client).draft(analysis, "支付命令聲請狀")
        client.create_message.assert_not_called()

    def test_prompt_names_filing_type_and_analysis(self, analysis: VerdictAnalysis) -> None:
        client = MagicMock()
        client.create_message.return_value = "答辯狀 內容"
        _make_drafter(client).draft(analysis, FilingType.DEFENSE_BRIEF)
        prompt = client.create_message.call_args.kwargs["prompt"]
        assert "撰寫答辯狀" in prompt
        assert "112年度訴字第789號" in prompt
        assert "書狀格式" in prompt

    def test_uses_drafting_model_and_budget(self, analysis: VerdictAnalysis) -> None:
        client = MagicMock()
        client.create_message.return_value = "起訴狀"
        _make_drafter(client, max_tokens=4000).draft(analysis, FilingType.COMPLAINT)
        kwargs = client.create_message.call_args.kwargs
        assert kwargs["model"] == "drafting-model"
        assert kwargs["max_tokens"] == 4000

    def test_truncates_source_text(self, analysis: VerdictAnalysis) -> None:
        client = MagicMock()
        client.create_message.return_value = "起訴狀"
        source = "甲" * 50 + "乙" * 50
        _make_drafter(client, source_text_limit=50).draft(
            analysis, FilingType.COMPLAINT, source_text=source
        )
        prompt = client.create_message.call_args.kwargs["prompt"]
        assert "甲" * 50 in prompt
        assert "乙" not in prompt

    def test_includes_custom_instructions(self, analysis: VerdictAnalysis) -> None:
        client = MagicMock()
        client.create_message.return_value = "起訴狀"
        _make_drafter(client).draft(
            analysis, FilingType.COMPLAINT, custom_instructions="請強調時效問題"
        )
        prompt = client.create_message.call_args.kwargs["prompt"]
        assert "特殊要求：請強調時效問題" in prompt

    def test_prompt_omits_optional_sections(self, analysis: VerdictAnalysis) -> None:
        client = MagicMock()
        client.create_message.return_value = "起訴狀"
        _make_drafter(client).draft(analysis, FilingType.COMPLAINT)
        prompt = client.create_message.call_args.kwargs["prompt"]
        assert "特殊要求" not in prompt
        assert "原文節錄" not in prompt

    def test_whitespace_output_is_empty_output_failure(self, analysis: VerdictAnalysis) -> None:
        client = MagicMock()
        client.create_message.return_value = "  \n\t "
        with pytest.raises(DraftError) as exc_info:
            _make_drafter(client).draft(analysis, FilingType.COMPLAINT)
        assert exc_info.value.reason is DraftFailureReason.EMPTY_OUTPUT

    def test_transport_error_propagates(self, analysis: VerdictAnalysis) -> None:
        client = MagicMock()
        client.create_message.side_effect = LlmTransportError("down", status_code=500)
        with pytest.raises(LlmTransportError):
            _make_drafter(client).draft(analysis, FilingType.COMPLAINT)

    def test_from_settings(self, analysis: VerdictAnalysis) -> None:
        settings = MagicMock()
        settings.drafting_model = "big-model"
        settings.drafting_max_tokens = 4000
        settings.llm_temperature = 0.3
        settings.llm_top_p = 0.9
        settings.draft_source_text_limit = 10
        client = MagicMock()
        client.create_message.return_value = "起訴狀"
        DocumentDrafter.from_settings(settings, client).draft(analysis, FilingType.COMPLAINT)
        assert client.create_message.call_args.kwargs["model"] == "big-model"


class TestFormatFiling:
    def test_prepends_missing_label(self) -> None:
        body = format_filing("上訴人王小明", FilingType.CIVIL_APPEAL)
        assert body == "民事上訴狀\n\n上訴人王小明"

    def test_keeps_existing_label(self) -> None:
        body = format_filing("刑事上訴狀\n上訴人", FilingType.CRIMINAL_APPEAL)
        assert body.count("刑事上訴狀") == 1

    def test_label_far_from_top_is_prepended(self) -> None:
        body = format_filing("甲" * 300 + "答辯狀", FilingType.DEFENSE_BRIEF)
        assert body.startswith("答辯狀\n\n")

    def test_collapses_blank_line_runs(self) -> None:
        body = format_filing("起訴狀\n\n\n\n\n一、事實\n \n\n二、理由", FilingType.COMPLAINT)
        assert body == "起訴狀\n\n一、事實\n\n二、理由"

    def test_keeps_single_blank_line(self) -> None:
        body = format_filing("起訴狀\n\n一、事實", FilingType.COMPLAINT)
        assert body == "起訴狀\n\n一、事實"

    def test_normalizes_citations_and_commas(self) -> None:
        body = format_filing("起訴狀\n依民法第 184 條， 請求賠償", FilingType.COMPLAINT)
        assert body == "起訴狀\n依民法第184條，請求賠償"

    def test_strips_surrounding_whitespace(self) -> None:
        assert format_filing("\n\n起訴狀  \n", FilingType.COMPLAINT) == "起訴狀"

    def test_empty_raises(self) -> None:
        with pytest.raises(DraftError):
            format_filing("", FilingType.COMPLAINT)
