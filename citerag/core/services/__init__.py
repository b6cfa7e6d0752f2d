"""Core business services."""
from .chunking import ChunkingConfig, chunk_text, estimate_tokens, get_chunking_stats
from .embedding_service import EmbeddingGateway
from .vector_index import VectorIndexClient
from .retriever import Retriever
from .reranker import HybridReranker
from .answer_service import AnswerSynthesizer
from .rag_service import RAGService

__all__ = [
    "ChunkingConfig",
    "chunk_text",
    "estimate_tokens",
    "get_chunking_stats",
    "EmbeddingGateway",
    "VectorIndexClient",
    "Retriever",
    "HybridReranker",
    "AnswerSynthesizer",
    "RAGService",
]
