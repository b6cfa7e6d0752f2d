"""Scoring strategies used by the reranker."""
from .scoring import (
    STOP_WORDS,
    RerankWeights,
    blend_scores,
    extract_keywords,
    position_boost,
    term_frequency_score,
)

__all__ = [
    "STOP_WORDS",
    "RerankWeights",
    "blend_scores",
    "extract_keywords",
    "position_boost",
    "term_frequency_score",
]
