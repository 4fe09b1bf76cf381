import pymupdf

from legalmind.document.models import ExtractedPage
from legalmind.logging.logger import Log
from legalmind.pdf.base import BasePdfExtractor
from legalmind.pdf.exceptions import PdfExtractionError

_TEXT_BLOCK = 0


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts per-page text from PDF using PyMuPDF text spans."""

    def extract_pages(self, pdf_bytes: bytes) -> list[ExtractedPage]:
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf could not open document: {exc}") from exc

        pages: list[ExtractedPage] = []
        with doc:
            for index, page in enumerate(doc):
                number = index + 1
                try:
                    runs = self._spans(page.get_text("dict"))
                except Exception as exc:
                    Log.warning(f"pymupdf skipped page {number}: {exc}")
                    continue
                pages.append(ExtractedPage(number=number, text=" ".join(runs)))
        return pages

    @staticmethod
    def _spans(page_dict: dict) -> list[str]:
        runs: list[str] = []
        for block in page_dict.get("blocks", []):
            if block.get("type") != _TEXT_BLOCK:
                continue
            for line in block.get("lines", []):
                for span in line.get("spans", []):
                    text = span.get("text", "")
                    if text:
                        runs.append(text)
        return runs
