import json
import re
from pathlib import Path

from legalmind.analysis.models import VerdictAnalysis
from legalmind.config.settings import Settings
from legalmind.drafting.exceptions import DraftError, DraftFailureReason
from legalmind.drafting.models import DraftDocument, FilingType
from legalmind.llm.client_base import BaseLlmClient
from legalmind.logging.logger import Log
from legalmind.prompts.loader import DRAFTING_PROMPT, load_prompt_template
from legalmind.text.normalizer import normalize_citation_spacing, normalize_comma_spacing

# The filing title must appear within this many leading characters.
_HEADER_WINDOW = 200
_BLANK_LINE_RUN = re.compile(r"\n(?:[ \t\u3000]*\n){2,}")


class DocumentDrafter:
    """Drafts a court filing from a VerdictAnalysis through the LLM."""

    def __init__(
        self,
        client: BaseLlmClient,
        *,
        model: str,
        max_tokens: int = 4000,
        temperature: float | None = 0.3,
        top_p: float | None = 0.9,
        source_text_limit: int = 2000,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._top_p = top_p
        self._source_text_limit = source_text_limit
        self._prompt_template = load_prompt_template(DRAFTING_PROMPT, prompt_template_path)

    @classmethod
    def from_settings(cls, settings: Settings, client: BaseLlmClient) -> "DocumentDrafter":
        return cls(
            client,
            model=settings.drafting_model,
            max_tokens=settings.drafting_max_tokens,
            temperature=settings.llm_temperature,
            top_p=settings.llm_top_p,
            source_text_limit=settings.draft_source_text_limit,
        )

    def draft(
        self,
        analysis: VerdictAnalysis,
        filing_type: FilingType | str,
        *,
        source_text: str | None = None,
        custom_instructions: str | None = None,
    ) -> DraftDocument:
        """Draft one filing.

        Raises:
            InvalidFilingTypeError: before any LLM call, for unknown filing types.
            DraftError: the LLM returned only whitespace.
            LlmError: the LLM call itself failed.
        """
        kind = FilingType.parse(filing_type)
        prompt = self._build_prompt(analysis, kind, source_text, custom_instructions)
        Log.debug(f"Drafting prompt:\n{prompt}")

        raw_reply = self._client.create_message(
            model=self._model,
            prompt=prompt,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            top_p=self._top_p,
        )
        body = format_filing(raw_reply, kind)
        Log.info(f"Drafted {kind.value}: {len(body)} chars")
        return DraftDocument(filing_type=kind, body=body)

    def _build_prompt(
        self,
        analysis: VerdictAnalysis,
        kind: FilingType,
        source_text: str | None,
        custom_instructions: str | None,
    ) -> str:
        instructions = ""
        if custom_instructions and custom_instructions.strip():
            instructions = f"\n特殊要求：{custom_instructions.strip()}\n"
        excerpt = ""
        if source_text and source_text.strip():
            excerpt = (
                f"\n判決書原文節錄（前 {self._source_text_limit} 字）：\n"
                f"{source_text.strip()[: self._source_text_limit]}\n"
            )
        return self._prompt_template.format(
            filing_type=kind.value,
            analysis_json=json.dumps(analysis.to_dict(), ensure_ascii=False, indent=2),
            custom_instructions=instructions,
            source_excerpt=excerpt,
        )


def format_filing(content: str, filing_type: FilingType) -> str:
    """Presentation-only cleanup of drafted prose.

    Raises:
        DraftError: if ``content`` is empty or whitespace.
    """
    formatted = content.strip()
    if not formatted:
        raise DraftError("LLM returned an empty draft", reason=DraftFailureReason.EMPTY_OUTPUT)

    if filing_type.value not in formatted[:_HEADER_WINDOW]:
        formatted = f"{filing_type.value}\n\n{formatted}"
    formatted = _BLANK_LINE_RUN.sub("\n\n", formatted)
    formatted = normalize_citation_spacing(formatted)
    formatted = normalize_comma_spacing(formatted)
    return formatted.strip()
