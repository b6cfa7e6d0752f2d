"""Retriever - similarity search over indexed chunks."""

import logging
from typing import Optional

from ..models.document import SearchResult
from .vector_index import VectorIndexClient

logger = logging.getLogger(__name__)


class Retriever:
    """Fetches candidate chunks for a question."""

    def __init__(self, index: VectorIndexClient, top_k: int = 8):
        """Initialize retriever.

        Args:
            index: Vector index client.
            top_k: Default number of candidates.
        """
        self._index = index
        self._top_k = top_k

    def retrieve(self, question: str, top_k: Optional[int] = None) -> list[SearchResult]:
        """Return up to top_k chunks; an empty list means nothing is indexed."""
        top_k = top_k or self._top_k
        results = self._index.search(question, top_k=top_k)
        logger.info(
            f"Retrieve: {len(results)}/{top_k} candidates for '{question[:50]}...'"
        )
        return results
