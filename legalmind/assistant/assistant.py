import time

from legalmind.analysis.exceptions import AnalysisError
from legalmind.analysis.models import VerdictAnalysis
from legalmind.analysis.requestor import AnalysisRequestor
from legalmind.assistant.models import AnalysisOutcome, PreparedJudgment
from legalmind.config.settings import Settings
from legalmind.document.loader import DocumentLoader
from legalmind.document.models import UploadedDocument
from legalmind.drafting.drafter import DocumentDrafter
from legalmind.drafting.models import DraftDocument, FilingType
from legalmind.extraction.basic_info import build_fallback_analysis
from legalmind.llm.client_base import BaseLlmClient
from legalmind.llm.exceptions import LlmError
from legalmind.llm.factory import LlmClientFactory
from legalmind.llm.health import check_connection
from legalmind.logging.logger import Log
from legalmind.pdf.factory import PdfExtractorFactory
from legalmind.quality.assessor import QualityAssessor
from legalmind.text.normalizer import normalize


class JudgmentAssistant:
    """Runs the judgment pipeline stages for a UI layer.

    Pipeline: load -> normalize -> assess -> analyze -> draft.
    Holds no per-document state; see JudgmentSession for that.
    """

    def __init__(
        self,
        *,
        loader: DocumentLoader,
        assessor: QualityAssessor,
        requestor: AnalysisRequestor,
        drafter: DocumentDrafter,
        client: BaseLlmClient,
        connection_check_model: str,
    ) -> None:
        self._loader = loader
        self._assessor = assessor
        self._requestor = requestor
        self._drafter = drafter
        self._client = client
        self._connection_check_model = connection_check_model

    def prepare(self, document: UploadedDocument) -> PreparedJudgment:
        """Extract, normalize and score the text of an uploaded judgment."""
        Log.info(f"Preparing '{document.name}' ({document.size_bytes} bytes)")
        started = time.perf_counter()
        pages = self._loader.load(document)
        text = normalize(pages)
        elapsed = time.perf_counter() - started

        return PreparedJudgment(
            document_name=document.name,
            text=text,
            page_count=len(pages),
            file_size=document.size_bytes,
            extraction_seconds=elapsed,
            quality=self._assessor.assess(text),
        )

    def analyze(self, text: str) -> VerdictAnalysis:
        return self._requestor.analyze(text)

    def analyze_with_fallback(self, text: str) -> AnalysisOutcome:
        """Analyze, degrading to the labelled regex fallback when the LLM path fails."""
        try:
            return AnalysisOutcome(analysis=self._requestor.analyze(text))
        except (AnalysisError, LlmError) as exc:
            Log.error(f"Analysis failed, returning basic case info only: {exc}")
            return AnalysisOutcome(
                fallback=build_fallback_analysis(text, reason=str(exc)),
                error=exc,
            )

    def draft(
        self,
        analysis: VerdictAnalysis,
        filing_type: FilingType | str,
        *,
        source_text: str | None = None,
        custom_instructions: str | None = None,
    ) -> DraftDocument:
        return self._drafter.draft(
            analysis,
            filing_type,
            source_text=source_text,
            custom_instructions=custom_instructions,
        )

    def check_connection(self) -> bool:
        return check_connection(self._client, self._connection_check_model)

    def close(self) -> None:
        """Close the shared LLM client."""
        self._client.close()


def build_assistant(settings: Settings) -> JudgmentAssistant:
    """Build a JudgmentAssistant with all adapters chosen by settings."""
    Log.configure(settings.log_level)
    client = LlmClientFactory.create(settings)
    extractor = PdfExtractorFactory.create(settings)
    return JudgmentAssistant(
        loader=DocumentLoader.from_settings(settings, extractor),
        assessor=QualityAssessor.from_settings(settings),
        requestor=AnalysisRequestor.from_settings(settings, client),
        drafter=DocumentDrafter.from_settings(settings, client),
        client=client,
        connection_check_model=settings.analysis_model,
    )
