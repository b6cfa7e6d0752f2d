"""Vector store protocol for dependency injection."""
from typing import Protocol, runtime_checkable

from ..models.document import IndexMatch, IndexStats


@runtime_checkable
class VectorStoreProtocol(Protocol):
    """Protocol for an ANN vector index service."""

    def upsert(
        self,
        ids: list[str],
        embeddings: list[list[float]],
        documents: list[str],
        metadatas: list[dict]
    ) -> None:
        """Insert or replace documents in the store.

        Args:
            ids: Document IDs.
            embeddings: Document embeddings.
            documents: Document texts.
            metadatas: Document metadata.
        """
        ...

    def query(
        self,
        query_embedding: list[float],
        n_results: int = 5
    ) -> list[IndexMatch]:
        """Search by embedding.

        Args:
            query_embedding: Query vector.
            n_results: Number of results to return.

        Returns:
            Matches with similarity scores, best first.
        """
        ...

    def delete_all(self) -> None:
        """Remove every stored vector."""
        ...

    def describe_stats(self) -> IndexStats:
        """Get vector count, dimension and fullness."""
        ...
