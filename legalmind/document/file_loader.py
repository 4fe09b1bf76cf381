import mimetypes
from pathlib import Path

from legalmind.document.models import UploadedDocument


def read_uploaded_document(path: Path, media_type: str | None = None) -> UploadedDocument:
    """Read a file from disk into an UploadedDocument.

    The media type is guessed from the file extension unless given explicitly;
    an unknown extension yields ``application/octet-stream`` so the loader can
    reject it.

    Raises:
        FileNotFoundError: if the file does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    content = path.read_bytes()
    if media_type is None:
        guessed, _ = mimetypes.guess_type(path.name)
        media_type = guessed or "application/octet-stream"
    return UploadedDocument(
        content=content,
        media_type=media_type,
        size_bytes=len(content),
        name=path.name,
    )
