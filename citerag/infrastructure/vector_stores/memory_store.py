import logging
import threading
from typing import Optional

import numpy as np

from citerag.core.models.document import IndexMatch, IndexStats

logger = logging.getLogger(__name__)


class InMemoryVectorStore:
    """Process-local vector store with brute-force cosine search.

    Nothing is persisted. Useful for local runs and tests.
    """

    def __init__(self, capacity: Optional[int] = None):
        """Initialize store.

        Args:
            capacity: Nominal vector capacity used for the fullness ratio.
        """
        self._capacity = capacity
        self._lock = threading.Lock()
        self._vectors: dict[str, np.ndarray] = {}
        self._documents: dict[str, str] = {}
        self._metadatas: dict[str, dict] = {}

    def upsert(
        self,
        ids: list[str],
        embeddings: list[list[float]],
        documents: list[str],
        metadatas: list[dict],
    ) -> None:
        with self._lock:
            for vector_id, embedding, document, metadata in zip(
                ids, embeddings, documents, metadatas
            ):
                self._vectors[vector_id] = np.asarray(embedding, dtype=float)
                self._documents[vector_id] = document
                self._metadatas[vector_id] = dict(metadata)

    def query(
        self, query_embedding: list[float], n_results: int = 5
    ) -> list[IndexMatch]:
        with self._lock:
            if not self._vectors:
                return []
            ids = list(self._vectors)
            matrix = np.stack([self._vectors[i] for i in ids])
            documents = [self._documents[i] for i in ids]
            metadatas = [dict(self._metadatas[i]) for i in ids]

        query = np.asarray(query_embedding, dtype=float)
        norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
        norms[norms == 0] = 1.0
        scores = np.dot(matrix, query) / norms

        order = np.argsort(-scores, kind="stable")[:n_results]
        return [
            IndexMatch(
                id=ids[i],
                score=float(scores[i]),
                document=documents[i],
                metadata=metadatas[i],
            )
            for i in order
        ]

    def delete_all(self) -> None:
        with self._lock:
            self._vectors.clear()
            self._documents.clear()
            self._metadatas.clear()

    def describe_stats(self) -> IndexStats:
        with self._lock:
            count = len(self._vectors)
            dimension = len(next(iter(self._vectors.values()))) if count else 0
        fullness = count / self._capacity if self._capacity else 0.0
        return IndexStats(total_vectors=count, dimension=dimension, fullness=fullness)
