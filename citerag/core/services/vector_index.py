"""Vector index client - stores and searches chunk vectors."""

import logging
import time
import uuid
from typing import Any, Callable, TypeVar

from ..errors import RagError, StoreUnavailableError
from ..models.document import Chunk, IndexMatch, IndexStats, SearchResult, StoredVector
from ..protocols.vector_store import VectorStoreProtocol
from .embedding_service import EmbeddingGateway

logger = logging.getLogger(__name__)

T = TypeVar("T")


def generate_vector_id() -> str:
    """Time + random id, unique across store calls."""
    return f"doc_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


class VectorIndexClient:
    """Client over the vector index service.

    Embeds through the gateway and normalizes index matches into
    ``SearchResult``. Index failures are raised as StoreUnavailableError
    and never retried here.
    """

    def __init__(self, vector_store: VectorStoreProtocol, embeddings: EmbeddingGateway):
        self._store = vector_store
        self._embeddings = embeddings

    def _call(self, operation: str, fn: Callable[[], T]) -> T:
        try:
            return fn()
        except RagError:
            raise
        except Exception as e:
            raise StoreUnavailableError(f"Vector store {operation} failed", cause=e) from e

    def store(self, chunks: list[Chunk]) -> list[str]:
        """Embed and upsert chunks.

        Returns:
            Assigned vector ids, in chunk order.
        """
        if not chunks:
            return []

        embeddings = self._embeddings.embed_batch([c.text for c in chunks])

        records: list[StoredVector] = []
        seen: set[str] = set()
        for chunk, embedding in zip(chunks, embeddings):
            vector_id = generate_vector_id()
            while vector_id in seen:
                vector_id = generate_vector_id()
            seen.add(vector_id)
            records.append(
                StoredVector(
                    id=vector_id,
                    embedding=embedding,
                    chunk=chunk,
                    timestamp=time.time(),
                )
            )

        self._call(
            "upsert",
            lambda: self._store.upsert(
                ids=[r.id for r in records],
                embeddings=[r.embedding for r in records],
                documents=[r.chunk.text for r in records],
                metadatas=[
                    {**r.chunk.to_metadata(), "timestamp": r.timestamp} for r in records
                ],
            ),
        )

        logger.info(f"Stored {len(records)} vectors")
        return [r.id for r in records]

    def search(self, query_text: str, top_k: int = 5) -> list[SearchResult]:
        """Embed the query and return the closest chunks, best first."""
        query_embedding = self._embeddings.embed(query_text)
        matches = self._call(
            "query",
            lambda: self._store.query(query_embedding=query_embedding, n_results=top_k),
        )

        results = [self._to_search_result(m) for m in matches]
        results.sort(key=lambda r: r.score, reverse=True)
        return results[:top_k]

    def clear(self) -> None:
        """Remove all stored vectors."""
        self._call("delete", self._store.delete_all)
        logger.info("Vector index cleared")

    def stats(self) -> IndexStats:
        return self._call("stats", self._store.describe_stats)

    @staticmethod
    def _to_search_result(match: IndexMatch) -> SearchResult:
        meta: dict[str, Any] = match.metadata or {}
        text = match.document or meta.get("text", "")
        chunk = Chunk(
            text=text,
            source=str(meta.get("source", "Unknown")),
            position=int(meta.get("position", 0)),
            start_char=int(meta.get("start_char", 0)),
            end_char=int(meta.get("end_char", 0)),
            chunk_size=int(meta.get("chunk_size", len(text))),
        )
        return SearchResult(
            id=match.id,
            chunk=chunk,
            score=float(match.score or 0.0),
            timestamp=float(meta.get("timestamp", 0.0)),
        )
