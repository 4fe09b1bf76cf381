from legalmind.config.settings import Settings
from legalmind.document.exceptions import InvalidInputError, NoExtractableTextError
from legalmind.document.models import ExtractedPage, UploadedDocument
from legalmind.logging.logger import Log
from legalmind.pdf.base import BasePdfExtractor
from legalmind.pdf.exceptions import PdfExtractionError


class DocumentLoader:
    """Guards an upload's type and size, then decodes it into text-bearing pages."""

    def __init__(
        self,
        extractor: BasePdfExtractor,
        *,
        max_upload_bytes: int,
        supported_media_type: str = "application/pdf",
    ) -> None:
        self._extractor = extractor
        self._max_upload_bytes = max_upload_bytes
        self._supported_media_type = supported_media_type

    @classmethod
    def from_settings(cls, settings: Settings, extractor: BasePdfExtractor) -> "DocumentLoader":
        return cls(
            extractor,
            max_upload_bytes=settings.max_upload_bytes,
            supported_media_type=settings.supported_media_type,
        )

    def load(self, document: UploadedDocument) -> list[ExtractedPage]:
        """Decode the document into its non-empty pages.

        Type and size are checked before the PDF is touched.

        Raises:
            InvalidInputError: wrong media type, empty or oversized upload,
                or bytes that cannot be opened as a PDF.
            NoExtractableTextError: no page yielded any text.
        """
        self._validate(document)
        try:
            pages = self._extractor.extract_pages(document.content)
        except PdfExtractionError as exc:
            raise InvalidInputError(f"'{document.name}' is not a readable PDF: {exc}") from exc

        non_empty = [page for page in pages if page.text.strip()]
        if not non_empty:
            raise NoExtractableTextError(
                f"No extractable text in '{document.name}' ({len(pages)} pages decoded)"
            )
        Log.info(
            f"Loaded '{document.name}': {len(non_empty)} of {len(pages)} pages with text"
        )
        return non_empty

    def _validate(self, document: UploadedDocument) -> None:
        if document.media_type != self._supported_media_type:
            raise InvalidInputError(
                f"Unsupported media type '{document.media_type}', "
                f"expected '{self._supported_media_type}'"
            )
        if document.size_bytes <= 0:
            raise InvalidInputError(f"'{document.name}' is empty")
        if document.size_bytes > self._max_upload_bytes:
            raise InvalidInputError(
                f"'{document.name}' is {document.size_bytes} bytes, "
                f"limit is {self._max_upload_bytes} bytes"
            )
