"""Vector store implementations."""
from .chroma_store import ChromaVectorStore
from .memory_store import InMemoryVectorStore

__all__ = ["ChromaVectorStore", "InMemoryVectorStore"]
