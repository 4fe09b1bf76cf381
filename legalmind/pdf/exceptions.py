class PdfExtractionError(Exception):
    """Raised when a PDF cannot be opened for text extraction."""
