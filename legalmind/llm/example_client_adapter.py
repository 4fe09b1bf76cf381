"""Offline LLM client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseLlmClient and register the provider in LlmClientFactory.
"""

import json
from typing import ClassVar

from legalmind.llm.client_base import BaseLlmClient

DRAFTING_PROMPT_MARKER = "書狀格式"


class ExampleClientAdapter(BaseLlmClient):
    """Returns a fixed analysis JSON, or a fixed filing for drafting prompts.

    No network calls. Useful for local development and UI work without an
    API key. Drafting prompts are recognised by ``DRAFTING_PROMPT_MARKER``.
    """

    DEFAULT_ANALYSIS: ClassVar[dict[str, object]] = {
        "summary": "範例摘要：本件為侵權行為損害賠償事件，法院判決被告應給付原告部分金額。",
        "caseInfo": {
            "caseNumber": "112年度訴字第1號",
            "court": "臺灣臺北地方法院",
            "parties": {"plaintiff": "範例原告", "defendant": "範例被告"},
        },
        "favorablePoints": ["法院未採納原告請求之全部金額。"],
        "unfavorablePoints": ["法院認定被告具有過失。"],
        "legalGrounds": ["民法第184條"],
        "appealableIssues": ["過失相抵之比例認定有再行爭執之空間。"],
        "recommendedStrategy": "範例策略：蒐集有利證據並於法定期間內提起上訴。",
    }
    DEFAULT_DRAFT: ClassVar[str] = "範例書狀\n\n一、事實及理由：（範例內容）"

    def create_message(
        self,
        *,
        model: str,
        prompt: str,
        max_tokens: int,
        temperature: float | None = None,
        top_p: float | None = None,
    ) -> str:
        _ = model, max_tokens, temperature, top_p
        if DRAFTING_PROMPT_MARKER in prompt:
            return self.DEFAULT_DRAFT
        return json.dumps(self.DEFAULT_ANALYSIS, ensure_ascii=False)
