"""One actionable, user-facing message per failure kind."""

from legalmind.analysis.exceptions import (
    MalformedJsonError,
    NoJsonFoundError,
    SchemaViolationError,
)
from legalmind.assistant.exceptions import AnalysisRequiredError, NoDocumentError
from legalmind.document.exceptions import (
    EmptyExtractionError,
    InvalidInputError,
    NoExtractableTextError,
)
from legalmind.drafting.exceptions import DraftError, InvalidFilingTypeError
from legalmind.llm.exceptions import (
    LlmConfigurationError,
    LlmResponseError,
    LlmTransportError,
)

DEFAULT_MESSAGE = "處理失敗，請稍後再試。"

_MESSAGES: tuple[tuple[type[Exception], str], ...] = (
    (InvalidInputError, "請上傳 10MB 以內、未加密的 PDF 判決書檔案。"),
    (NoExtractableTextError, "PDF 中找不到可擷取的文字，檔案可能是掃描圖片，請改用含文字的 PDF。"),
    (EmptyExtractionError, "文字擷取後內容為空，請確認檔案內容後重新上傳。"),
    (LlmConfigurationError, "尚未設定 AI 服務金鑰，請在環境變數中設定 LLM_API_KEY。"),
    (LlmTransportError, "AI 服務連線失敗，請稍後再試。"),
    (LlmResponseError, "AI 服務回應格式錯誤，請稍後再試。"),
    (NoJsonFoundError, "AI 回應中未找到結構化分析結果，請重新分析。"),
    (MalformedJsonError, "AI 回應的 JSON 格式有誤，請重新分析。"),
    (SchemaViolationError, "AI 分析結果缺少必要欄位（{field}），請重新分析。"),
    (DraftError, "AI 未產生任何書狀內容，請重新產生。"),
    (InvalidFilingTypeError, "不支援的書狀類型，請選擇民事上訴狀、刑事上訴狀、答辯狀或起訴狀。"),
    (NoDocumentError, "請先上傳判決書 PDF。"),
    (AnalysisRequiredError, "請先完成判決分析，再產生書狀。"),
)


def user_message(exc: Exception) -> str:
    for exc_type, message in _MESSAGES:
        if isinstance(exc, exc_type):
            if isinstance(exc, SchemaViolationError):
                return message.format(field=exc.field)
            return message
    return DEFAULT_MESSAGE
