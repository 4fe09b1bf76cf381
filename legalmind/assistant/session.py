from legalmind.assistant.assistant import JudgmentAssistant
from legalmind.assistant.exceptions import AnalysisRequiredError, NoDocumentError
from legalmind.assistant.models import AnalysisOutcome, PreparedJudgment
from legalmind.document.models import UploadedDocument
from legalmind.drafting.models import DraftDocument, FilingType
from legalmind.logging.logger import Log


class JudgmentSession:
    """State of one user's work on a single judgment.

    Uploading a new document discards the previous text, analysis and drafts.
    Callers must not run the same action concurrently on one session.
    """

    def __init__(self, assistant: JudgmentAssistant) -> None:
        self._assistant = assistant
        self.document: UploadedDocument | None = None
        self.prepared: PreparedJudgment | None = None
        self.outcome: AnalysisOutcome | None = None
        self.drafts: dict[FilingType, DraftDocument] = {}

    def reset(self) -> None:
        self.document = None
        self.prepared = None
        self.outcome = None
        self.drafts = {}

    def upload(self, document: UploadedDocument) -> PreparedJudgment:
        self.reset()
        prepared = self._assistant.prepare(document)
        self.document = document
        self.prepared = prepared
        return prepared

    def analyze(self) -> AnalysisOutcome:
        if self.prepared is None:
            raise NoDocumentError("Upload a judgment before analyzing")
        self.outcome = self._assistant.analyze_with_fallback(self.prepared.text)
        self.drafts = {}
        return self.outcome

    def draft(
        self,
        filing_type: FilingType | str,
        custom_instructions: str | None = None,
    ) -> DraftDocument:
        kind = FilingType.parse(filing_type)
        if self.prepared is None or self.outcome is None or self.outcome.analysis is None:
            raise AnalysisRequiredError("A successful analysis is required before drafting")
        draft = self._assistant.draft(
            self.outcome.analysis,
            kind,
            source_text=self.prepared.text,
            custom_instructions=custom_instructions,
        )
        self.drafts[kind] = draft
        Log.info(f"Session now holds {len(self.drafts)} drafts")
        return draft
