"""LLM-backed structured analysis of judgment text."""

from pathlib import Path

from legalmind.analysis.exceptions import MalformedJsonError
from legalmind.analysis.models import VerdictAnalysis
from legalmind.analysis.validator import parse_analysis_reply
from legalmind.config.settings import Settings
from legalmind.llm.client_base import BaseLlmClient
from legalmind.logging.logger import Log
from legalmind.prompts.loader import ANALYSIS_PROMPT, load_json_schema, load_prompt_template

_MAX_TEMPERATURE = 0.5


class AnalysisRequestor:
    """Prompts the LLM with normalized judgment text and validates the JSON reply."""

    def __init__(
        self,
        client: BaseLlmClient,
        *,
        model: str,
        max_tokens: int = 3000,
        temperature: float = 0.3,
        top_p: float | None = 0.9,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = max(0.0, min(_MAX_TEMPERATURE, temperature))
        self._top_p = top_p
        self._prompt_template = load_prompt_template(ANALYSIS_PROMPT, prompt_template_path)
        self._json_schema = load_json_schema(json_schema_path)

    @classmethod
    def from_settings(cls, settings: Settings, client: BaseLlmClient) -> "AnalysisRequestor":
        return cls(
            client,
            model=settings.analysis_model,
            max_tokens=settings.analysis_max_tokens,
            temperature=settings.llm_temperature,
            top_p=settings.llm_top_p,
        )

    def analyze(self, text: str) -> VerdictAnalysis:
        """Analyze normalized judgment text.

        Raises:
            NoJsonFoundError, MalformedJsonError, SchemaViolationError:
                the reply could not be used.
            LlmError: the LLM call itself failed.
        """
        prompt = self._build_prompt(text)
        Log.debug(f"Analysis prompt:\n{prompt}")

        raw_reply = self._client.create_message(
            model=self._model,
            prompt=prompt,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            top_p=self._top_p,
        )
        Log.debug(f"AI raw reply:\n{raw_reply}")

        result = parse_analysis_reply(raw_reply)
        if result.failure is not None:
            Log.warning(
                f"Analysis reply rejected ({result.failure.reason.value}): "
                f"{result.failure.detail}"
            )
            raise result.failure.to_error()
        analysis = result.analysis
        if analysis is None:
            raise MalformedJsonError("Reply produced no analysis")

        Log.info(
            f"Analysis complete for {analysis.case_info.case_number}: "
            f"{len(analysis.appealable_issues)} appealable issues"
        )
        return analysis

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.format(
            judgment_text=text,
            json_schema=self._json_schema,
        )
