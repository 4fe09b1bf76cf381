import os
from typing import Any

import httpx

from legalmind.llm.client_base import BaseLlmClient
from legalmind.llm.exceptions import (
    LlmConfigurationError,
    LlmResponseError,
    LlmTransportError,
)

DEFAULT_API_URL = "https://api.anthropic.com/v1/messages"
API_KEY_ENV = "LLM_API_KEY"


class AnthropicClientAdapter(BaseLlmClient):
    """LLM client for the Anthropic messages API over plain HTTP.

    The bearer credential comes from ``api_key`` or, when that is empty, from
    the ``LLM_API_KEY`` environment variable at call time.
    """

    def __init__(
        self,
        *,
        api_key: str = "",
        api_url: str = DEFAULT_API_URL,
        api_version: str = "2023-06-01",
        timeout_seconds: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._api_url = api_url
        self._api_version = api_version
        self._client = httpx.Client(timeout=timeout_seconds, transport=transport)

    def create_message(
        self,
        *,
        model: str,
        prompt: str,
        max_tokens: int,
        temperature: float | None = None,
        top_p: float | None = None,
    ) -> str:
        api_key = self._resolve_api_key()
        payload: dict[str, Any] = {
            "model": model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if temperature is not None:
            payload["temperature"] = temperature
        if top_p is not None:
            payload["top_p"] = top_p

        try:
            response = self._client.post(
                self._api_url, headers=self._headers(api_key), json=payload
            )
        except httpx.RequestError as exc:
            raise LlmTransportError(f"LLM provider network error: {exc}") from exc

        if response.is_error:
            raise LlmTransportError(
                f"LLM request failed ({response.status_code}): {self._error_detail(response)}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise LlmResponseError("LLM response body is not valid JSON") from exc
        return self._first_text_block(data)

    def close(self) -> None:
        self._client.close()

    def _resolve_api_key(self) -> str:
        api_key = self._api_key or os.environ.get(API_KEY_ENV, "")
        if not api_key:
            raise LlmConfigurationError(
                f"LLM API key is not configured; set {API_KEY_ENV}"
            )
        return api_key

    def _headers(self, api_key: str) -> dict[str, str]:
        return {
            "content-type": "application/json",
            "authorization": f"Bearer {api_key}",
            "x-api-key": api_key,
            "anthropic-version": self._api_version,
        }

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.reason_phrase or response.text[:200]
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        return response.reason_phrase

    @staticmethod
    def _first_text_block(data: object) -> str:
        content = data.get("content") if isinstance(data, dict) else None
        if not isinstance(content, list) or not content:
            raise LlmResponseError("LLM response has no content blocks")
        for block in content:
            if isinstance(block, dict) and block.get("type") == "text":
                return str(block.get("text") or "")
        raise LlmResponseError("LLM response has no text block")
