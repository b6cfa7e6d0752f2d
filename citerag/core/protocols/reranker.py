"""Reranker protocol for dependency injection."""
from typing import Protocol, runtime_checkable

from ..models.document import RerankedResult, SearchResult


@runtime_checkable
class RerankerProtocol(Protocol):
    """Second-pass scorer over retrieved candidates."""

    def rerank(
        self,
        query: str,
        results: list[SearchResult],
        top_k: int = 3,
    ) -> list[RerankedResult]:
        """Rescore candidates and keep the best ones.

        Args:
            query: User question.
            results: Candidates in retrieval order.
            top_k: Maximum number of results returned.

        Returns:
            At most top_k results, highest rerank_score first.
        """
        ...
