class DocumentError(Exception):
    """Base exception for all document loading and text extraction errors."""


class InvalidInputError(DocumentError):
    """Raised when the upload has the wrong media type, size or is not a readable PDF."""


class NoExtractableTextError(DocumentError):
    """Raised when every page is empty or failed to decode (likely an image-only scan)."""


class EmptyExtractionError(DocumentError):
    """Raised when normalization leaves nothing but whitespace."""
