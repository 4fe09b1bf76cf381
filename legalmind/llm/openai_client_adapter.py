import os

import httpx
import openai

from legalmind.llm.client_base import BaseLlmClient
from legalmind.llm.exceptions import (
    LlmConfigurationError,
    LlmResponseError,
    LlmTransportError,
)

API_KEY_ENV = "LLM_API_KEY"


class OpenAIClientAdapter(BaseLlmClient):
    """LLM client built on the OpenAI-compatible chat completions API.

    Like the Anthropic adapter, an empty ``api_key`` falls back to the
    ``LLM_API_KEY`` environment variable at call time.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._api_key = api_key
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_message(
        self,
        *,
        model: str,
        prompt: str,
        max_tokens: int,
        temperature: float | None = None,
        top_p: float | None = None,
    ) -> str:
        client = self._client_for_call()
        sampling: dict[str, float] = {}
        if temperature is not None:
            sampling["temperature"] = temperature
        if top_p is not None:
            sampling["top_p"] = top_p
        try:
            response = client.chat.completions.create(
                model=model,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
                **sampling,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise LlmTransportError(f"LLM provider network error: {exc}") from exc
        except openai.APIStatusError as exc:
            raise LlmTransportError(
                f"LLM request failed ({exc.status_code}): {exc.message}",
                status_code=exc.status_code,
            ) from exc
        except openai.APIError as exc:
            raise LlmTransportError(f"LLM provider API error: {exc}") from exc

        if not response.choices:
            raise LlmResponseError("LLM returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise LlmResponseError("LLM returned empty response")
        return content

    def close(self) -> None:
        self._client.close()

    def _client_for_call(self) -> openai.OpenAI:
        if self._api_key:
            return self._client
        api_key = os.environ.get(API_KEY_ENV, "")
        if not api_key:
            raise LlmConfigurationError(
                f"LLM API key is not configured; set {API_KEY_ENV}"
            )
        return self._client.with_options(api_key=api_key)
