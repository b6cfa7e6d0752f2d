"""Embedding gateway - uniform access to the embedding provider."""

import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from ..errors import EmbeddingError
from ..protocols.embedder import EmbedderProtocol

logger = logging.getLogger(__name__)


class EmbeddingGateway:
    """Wraps an embedder; batches run as independent parallel calls."""

    def __init__(self, embedder: EmbedderProtocol, max_workers: int = 8):
        """Initialize gateway.

        Args:
            embedder: Embedding provider.
            max_workers: Concurrent provider calls during a batch.
        """
        self._embedder = embedder
        self._max_workers = max(1, max_workers)

    def embed(self, text: str) -> list[float]:
        """Embed a single text.

        Raises:
            EmbeddingError: If the provider call fails.
        """
        try:
            vector = self._embedder.encode(text)
        except Exception as e:
            raise EmbeddingError("Failed to generate embedding", cause=e) from e
        return np.asarray(vector, dtype=float).ravel().tolist()

    def embed_batch(self, texts: list[str]) -> list[list[float]]:
        """Embed texts concurrently, preserving input order.

        The whole batch fails if any single call fails.
        """
        if not texts:
            return []

        workers = min(self._max_workers, len(texts))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            vectors = list(executor.map(self.embed, texts))

        logger.debug(f"Embedded batch of {len(vectors)} texts")
        return vectors
