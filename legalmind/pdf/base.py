from abc import ABC, abstractmethod

from legalmind.document.models import ExtractedPage


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract_pages(self, pdf_bytes: bytes) -> list[ExtractedPage]:
        """Extract the text of every decodable page.

        Each page's text runs are joined with single spaces in the order the
        decoder yields them. A page that fails to decode is logged and left
        out; it does not fail the document.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Pages in document order, possibly with empty text.

        Raises:
            PdfExtractionError: if the document itself cannot be opened.
        """
