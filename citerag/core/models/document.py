"""Document domain models."""
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Chunk:
    """Position-tagged slice of a source document."""
    text: str
    source: str
    position: int
    start_char: int
    end_char: int
    chunk_size: int

    def to_metadata(self) -> dict[str, Any]:
        """Metadata stored next to the vector (text is stored separately)."""
        return {
            "source": self.source,
            "position": self.position,
            "start_char": self.start_char,
            "end_char": self.end_char,
            "chunk_size": self.chunk_size,
        }


@dataclass
class StoredVector:
    """Chunk plus its embedding, as upserted into the index."""
    id: str
    embedding: list[float]
    chunk: Chunk
    timestamp: float


@dataclass
class IndexMatch:
    """Raw match from a vector index adapter.

    ``score`` is always a similarity (higher = closer).
    """
    id: str
    score: float
    document: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchResult:
    """Search result from the vector index."""
    id: str
    chunk: Chunk
    score: float
    timestamp: float

    @property
    def text(self) -> str:
        return self.chunk.text

    @property
    def source(self) -> str:
        return self.chunk.source

    @property
    def position(self) -> int:
        return self.chunk.position


@dataclass
class RerankedResult(SearchResult):
    """Search result with its blended rerank score."""
    rerank_score: float
    original_score: float


@dataclass
class ChunkingStats:
    """Aggregate chunk statistics for one document."""
    total_chunks: int
    avg_chunk_size: int
    avg_tokens: int
    min_chunk_size: int
    max_chunk_size: int
    total_tokens: int


@dataclass(frozen=True)
class NoChunks:
    """Chunking produced nothing; there is nothing to index."""


@dataclass
class DocumentStats:
    """Indexing summary returned to callers."""
    chunks_created: int
    avg_chunk_size: int
    avg_tokens: int
    total_tokens: int
    vectors_stored: int
    processing_time_ms: int = 0


@dataclass
class IndexStats:
    """Vector index statistics."""
    total_vectors: int
    dimension: int
    fullness: float = 0.0


@dataclass
class ExtractedDocument:
    """Plain text extracted from an uploaded file."""
    text: str
    file_name: str
    mime_type: str
    size: int
