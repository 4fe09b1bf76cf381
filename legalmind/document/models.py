from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedDocument:
    """A file selected or dropped by the user, held only for the active session."""

    content: bytes
    media_type: str
    size_bytes: int
    name: str = ""


@dataclass(frozen=True)
class ExtractedPage:
    """Text recovered from one PDF page (1-based ``number``)."""

    number: int
    text: str
