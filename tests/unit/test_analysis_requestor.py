"""Tests for the AnalysisRequestor (LLM-backed judgment analysis)."""

import json
from unittest.mock import MagicMock, patch

import pytest

from legalmind.analysis.exceptions import (
    MalformedJsonError,
    NoJsonFoundError,
    SchemaViolationError,
)
from legalmind.analysis.requestor import AnalysisRequestor
from legalmind.llm.exceptions import LlmConfigurationError, LlmTransportError


def _make_requestor(client: MagicMock | None = None, **kwargs: object) -> AnalysisRequestor:
    if client is None:
        client = MagicMock()
    return AnalysisRequestor(client, model="analysis-model", **kwargs)  # type: ignore[arg-type]


def _mock_reply(client: MagicMock, content: str) -> None:
    client.create_message.return_value = content


class TestAnalyzeSuccess:
    def test_returns_verdict_analysis(self, analysis_reply: str) -> None:
        client = MagicMock()
        _mock_reply(client, analysis_reply)
        analysis = _make_requestor(client).analyze("判決全文")
        assert analysis.case_info.court == "臺灣臺北地方法院"
        assert analysis.favorable_points == ("法院駁回原告精神慰撫金之請求。",)

    def test_embeds_text_verbatim_in_prompt(self, analysis_reply: str) -> None:
        client = MagicMock()
        _mock_reply(client, analysis_reply)
        _make_requestor(client).analyze("原告：王小明 {不是 placeholder}")
        prompt = client.create_message.call_args.kwargs["prompt"]
        assert "原告：王小明 {不是 placeholder}" in prompt

    def test_prompt_includes_schema_and_json_only_instruction(self, analysis_reply: str) -> None:
        client = MagicMock()
        _mock_reply(client, analysis_reply)
        _make_requestor(client).analyze("text")
        prompt = client.create_message.call_args.kwargs["prompt"]
        assert "recommendedStrategy" in prompt
        assert "只包含一個有效的 JSON 物件" in prompt

    def test_calls_llm_with_model_and_budget(self, analysis_reply: str) -> None:
        client = MagicMock()
        _mock_reply(client, analysis_reply)
        _make_requestor(client, max_tokens=1234, top_p=0.8).analyze("text")
        kwargs = client.create_message.call_args.kwargs
        assert kwargs["model"] == "analysis-model"
        assert kwargs["max_tokens"] == 1234
        assert kwargs["top_p"] == 0.8

    def test_keeps_low_temperature(self, analysis_reply: str) -> None:
        client = MagicMock()
        _mock_reply(client, analysis_reply)
        _make_requestor(client, temperature=0.2).analyze("text")
        assert client.create_message.call_args.kwargs["temperature"] == 0.2

    def test_clamps_high_temperature(self, analysis_reply: str) -> None:
        client = MagicMock()
        _mock_reply(client, analysis_reply)
        _make_requestor(client, temperature=1.0).analyze("text")
        assert client.create_message.call_args.kwargs["temperature"] == 0.5


class TestAnalyzeFailures:
    def test_no_braces_raises_no_json_found(self) -> None:
        client = MagicMock()
        _mock_reply(client, "我無法提供分析。")
        with pytest.raises(NoJsonFoundError):
            _make_requestor(client).analyze("text")

    def test_no_braces_is_not_malformed(self) -> None:
        client = MagicMock()
        _mock_reply(client, "我無法提供分析。")
        with pytest.raises(NoJsonFoundError) as exc_info:
            _make_requestor(client).analyze("text")
        assert not isinstance(exc_info.value, MalformedJsonError)

    def test_broken_json_raises_malformed(self) -> None:
        client = MagicMock()
        _mock_reply(client, '{"summary": }')
        with pytest.raises(MalformedJsonError):
            _make_requestor(client).analyze("text")

    def test_missing_legal_grounds_raises_schema_violation(
        self, analysis_payload: dict[str, object]
    ) -> None:
        del analysis_payload["legalGrounds"]
        client = MagicMock()
        _mock_reply(client, json.dumps(analysis_payload))
        with pytest.raises(SchemaViolationError, match="legalGrounds") as exc_info:
            _make_requestor(client).analyze("text")
        assert exc_info.value.field == "legalGrounds"

    def test_empty_favorable_points_raises_schema_violation(
        self, analysis_payload: dict[str, object]
    ) -> None:
        analysis_payload["favorablePoints"] = []
        client = MagicMock()
        _mock_reply(client, json.dumps(analysis_payload))
        with pytest.raises(SchemaViolationError) as exc_info:
            _make_requestor(client).analyze("text")
        assert exc_info.value.field == "favorablePoints"

    def test_transport_error_propagates(self) -> None:
        client = MagicMock()
        client.create_message.side_effect = LlmTransportError("502", status_code=502)
        with pytest.raises(LlmTransportError):
            _make_requestor(client).analyze("text")

    def test_configuration_error_propagates(self) -> None:
        client = MagicMock()
        client.create_message.side_effect = LlmConfigurationError("no key")
        with pytest.raises(LlmConfigurationError):
            _make_requestor(client).analyze("text")


class TestFromSettings:
    def test_uses_analysis_model_and_budget(self, analysis_reply: str) -> None:
        settings = MagicMock()
        settings.analysis_model = "fast-model"
        settings.analysis_max_tokens = 3000
        settings.llm_temperature = 0.3
        settings.llm_top_p = 0.9
        client = MagicMock()
        _mock_reply(client, analysis_reply)
        AnalysisRequestor.from_settings(settings, client).analyze("text")
        kwargs = client.create_message.call_args.kwargs
        assert kwargs["model"] == "fast-model"
        assert kwargs["max_tokens"] == 3000


class TestDebugLogging:
    def test_logs_prompt_in_debug(self, analysis_reply: str) -> None:
        client = MagicMock()
        _mock_reply(client, analysis_reply)
        with patch("legalmind.analysis.requestor.Log") as mock_log:
            _make_requestor(client).analyze("test text")
            assert "prompt" in mock_log.debug.call_args_list[0].args[0].lower()

    def test_logs_rejection_as_warning(self) -> None:
        client = MagicMock()
        _mock_reply(client, "no json")
        with patch("legalmind.analysis.requestor.Log") as mock_log:
            with pytest.raises(NoJsonFoundError):
                _make_requestor(client).analyze("text")
            assert "no_json_found" in mock_log.warning.call_args.args[0]
