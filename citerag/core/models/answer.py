"""Answer domain models."""
from dataclasses import asdict, dataclass, field
from typing import Union


@dataclass
class Citation:
    """Reference from an answer back to a source chunk."""
    source: str
    position: int
    text: str
    relevance_score: float


@dataclass
class GenerationParams:
    """Decoding parameters for the generative model."""
    temperature: float = 0.3
    top_p: float = 0.8
    top_k: int | None = 40
    max_output_tokens: int = 1024


@dataclass
class GeneratedAnswer:
    answer: str
    citations: list[Citation]
    tokens_used: int
    model_name: str


@dataclass
class QueryMetadata:
    """Per-query counters and timing."""
    total_chunks: int = 0
    retrieved_chunks: int = 0
    reranked_chunks: int = 0
    tokens_used: int = 0
    model: str = "none"
    processing_time_ms: int = 0


@dataclass
class Answered:
    """Query answered from retrieved context."""
    answer: str
    citations: list[Citation]
    metadata: QueryMetadata

    def to_dict(self) -> dict:
        return {"status": "answered", **asdict(self)}


@dataclass
class InsufficientContext:
    """Nothing was retrieved; the answer is a fixed notice."""
    answer: str
    metadata: QueryMetadata
    citations: list[Citation] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"status": "insufficient_context", **asdict(self)}


QueryResult = Union[Answered, InsufficientContext]
