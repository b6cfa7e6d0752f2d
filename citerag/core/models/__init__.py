"""Domain models."""
from .document import (
    Chunk,
    ChunkingStats,
    DocumentStats,
    ExtractedDocument,
    IndexMatch,
    IndexStats,
    NoChunks,
    RerankedResult,
    SearchResult,
    StoredVector,
)
from .answer import (
    Answered,
    Citation,
    GeneratedAnswer,
    GenerationParams,
    InsufficientContext,
    QueryMetadata,
    QueryResult,
)

__all__ = [
    "Chunk",
    "ChunkingStats",
    "DocumentStats",
    "ExtractedDocument",
    "IndexMatch",
    "IndexStats",
    "NoChunks",
    "RerankedResult",
    "SearchResult",
    "StoredVector",
    "Answered",
    "Citation",
    "GeneratedAnswer",
    "GenerationParams",
    "InsufficientContext",
    "QueryMetadata",
    "QueryResult",
]
