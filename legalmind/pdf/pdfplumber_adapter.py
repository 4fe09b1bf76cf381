import io

import pdfplumber

from legalmind.document.models import ExtractedPage
from legalmind.logging.logger import Log
from legalmind.pdf.base import BasePdfExtractor
from legalmind.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts per-page text from PDF using pdfplumber."""

    def extract_pages(self, pdf_bytes: bytes) -> list[ExtractedPage]:
        try:
            pdf = pdfplumber.open(io.BytesIO(pdf_bytes))
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not open document: {exc}") from exc

        pages: list[ExtractedPage] = []
        with pdf:
            try:
                page_list = pdf.pages
            except Exception as exc:
                raise PdfExtractionError(f"pdfplumber could not read page tree: {exc}") from exc
            for number, page in enumerate(page_list, start=1):
                try:
                    runs = [line["text"] for line in page.extract_text_lines()]
                except Exception as exc:
                    Log.warning(f"pdfplumber skipped page {number}: {exc}")
                    continue
                pages.append(ExtractedPage(number=number, text=" ".join(runs)))
        return pages
