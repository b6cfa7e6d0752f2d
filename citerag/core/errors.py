"""Error taxonomy for the RAG pipeline."""
from typing import Optional


class RagError(Exception):
    """Base class for pipeline errors.

    Carries a human-readable message and, where available, the underlying
    cause. ``str()`` appends the cause so callers can surface both.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class ConfigError(RagError):
    """Invalid chunking or component configuration."""


class EmptyInputError(RagError):
    """Chunking produced nothing to index."""


class EmptyContentError(RagError):
    """Extracted document text is empty or too short."""


class UnsupportedFormatError(RagError):
    """MIME type has no registered extractor."""


class ExtractionError(RagError):
    """Extractor failed to parse the document."""


class FileTooLargeError(RagError):
    """Payload exceeds the extractor's size limit."""


class EmbeddingError(RagError):
    """Embedding provider call failed."""


class StoreUnavailableError(RagError):
    """Vector index service call failed."""


class GenerationError(RagError):
    """Generative model call failed."""
