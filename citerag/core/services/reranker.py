"""Reranker - blends vector similarity with lexical and positional signals."""

import logging

from ..errors import ConfigError
from ..models.document import RerankedResult, SearchResult
from ..strategies.scoring import (
    RerankWeights,
    blend_scores,
    extract_keywords,
    position_boost,
    term_frequency_score,
)

logger = logging.getLogger(__name__)


class HybridReranker:
    """Lightweight reranker with no external model or service."""

    def __init__(self, weights: RerankWeights | None = None):
        self._weights = weights or RerankWeights()

    @property
    def weights(self) -> RerankWeights:
        return self._weights

    def rerank(
        self,
        query: str,
        results: list[SearchResult],
        top_k: int = 3,
    ) -> list[RerankedResult]:
        """Rescore and keep the best top_k results.

        Args:
            query: User query.
            results: Retrieved candidates, in retrieval order.
            top_k: Number of results to keep.

        Returns:
            Results sorted by rerank score; equal scores keep input order.

        Raises:
            ConfigError: If top_k is negative.
        """
        if top_k < 0:
            raise ConfigError(f"top_k must be >= 0, got {top_k}")

        query_terms = extract_keywords(query)

        reranked = []
        for result in results:
            tf = term_frequency_score(query_terms, extract_keywords(result.text))
            boost = position_boost(result.position, self._weights)
            reranked.append(
                RerankedResult(
                    id=result.id,
                    chunk=result.chunk,
                    score=result.score,
                    timestamp=result.timestamp,
                    rerank_score=blend_scores(result.score, tf, boost, self._weights),
                    original_score=result.score,
                )
            )

        reranked = sorted(reranked, key=lambda r: r.rerank_score, reverse=True)[:top_k]

        if logger.isEnabledFor(logging.DEBUG):
            top_scores = ", ".join(f"{r.rerank_score:.2f}" for r in reranked)
            logger.debug(f"Rerank top-{top_k} scores: [{top_scores}]")

        return reranked
