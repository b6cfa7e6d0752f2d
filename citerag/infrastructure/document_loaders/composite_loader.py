import logging
import mimetypes
from pathlib import Path

from citerag.core.errors import (
    EmptyContentError,
    ExtractionError,
    FileTooLargeError,
    UnsupportedFormatError,
)
from citerag.core.models.document import ExtractedDocument

from .pdf_loader import PDFLoader
from .docx_loader import DocxLoader
from .text_loader import TextLoader

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 10 * 1024 * 1024
MIN_CONTENT_CHARS = 50

mimetypes.add_type("text/markdown", ".md")
mimetypes.add_type(
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document", ".docx"
)


def guess_mime_type(path: Path) -> str:
    """MIME type from the file extension ("" when unknown)."""
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type or ""


class CompositeLoader:
    """Extracts plain text from PDF, Word and text payloads."""

    def __init__(
        self,
        max_file_size: int = MAX_FILE_SIZE,
        min_content_chars: int = MIN_CONTENT_CHARS,
    ):
        self._loaders = [
            PDFLoader(),
            DocxLoader(),
            TextLoader(),
        ]
        self._max_file_size = max_file_size
        self._min_content_chars = min_content_chars

    def supports(self, mime_type: str) -> bool:
        return any(loader.supports(mime_type) for loader in self._loaders)

    def extract(self, data: bytes, mime_type: str, file_name: str = "") -> ExtractedDocument:
        """Extract trimmed plain text.

        Raises:
            FileTooLargeError: Payload exceeds max_file_size.
            UnsupportedFormatError: No loader for mime_type.
            ExtractionError: Loader failed to parse the payload.
            EmptyContentError: Text shorter than min_content_chars.
        """
        if len(data) > self._max_file_size:
            raise FileTooLargeError(
                f"File size {len(data)} exceeds {self._max_file_size} bytes"
            )

        loader = next((c for c in self._loaders if c.supports(mime_type)), None)
        if loader is None:
            raise UnsupportedFormatError(f"Unsupported file type: {mime_type or 'unknown'}")

        try:
            text = loader.load(data)
        except Exception as e:
            logger.error(f"Failed to load {file_name or mime_type}: {e}")
            raise ExtractionError(f"Failed to process file {file_name}".rstrip(), cause=e) from e

        text = (text or "").strip()
        if len(text) < self._min_content_chars:
            raise EmptyContentError(
                "File appears to be empty or too short "
                f"(minimum {self._min_content_chars} characters required)"
            )

        return ExtractedDocument(
            text=text,
            file_name=file_name,
            mime_type=mime_type,
            size=len(data),
        )

    def extract_file(self, file_path: Path) -> ExtractedDocument:
        """Read a file from disk and extract it by its guessed MIME type."""
        return self.extract(
            file_path.read_bytes(),
            guess_mime_type(file_path),
            file_name=file_path.name,
        )
