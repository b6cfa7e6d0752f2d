import re
from dataclasses import dataclass

from ..errors import ConfigError

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "is", "are", "was", "were", "be", "been", "have",
    "has", "had", "do", "does", "did", "will", "would", "could", "should",
    "may", "might", "must", "can", "this", "that", "these", "those",
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
})

MIN_KEYWORD_LENGTH = 3

_NON_WORD_RE = re.compile(r"[^\w\s]")


@dataclass(frozen=True)
class RerankWeights:
    """Blend of rerank signals.

    The defaults are tunable configuration, not derived constants.

    Attributes:
        similarity: Weight of the original vector similarity.
        term_frequency: Weight of query keyword overlap.
        position: Weight of the positional prior.
        position_decay: Boost lost per chunk position.
        position_floor: Lowest boost any position can get.
    """
    similarity: float = 0.7
    term_frequency: float = 0.2
    position: float = 0.1
    position_decay: float = 0.1
    position_floor: float = 0.1

    def __post_init__(self) -> None:
        if self.position_decay < 0:
            raise ConfigError(f"position_decay must be >= 0, got {self.position_decay}")
        if self.position_floor < 0:
            raise ConfigError(f"position_floor must be >= 0, got {self.position_floor}")


def extract_keywords(text: str) -> list[str]:
    """Lowercase word tokens without punctuation, short tokens or stop words."""
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return [
        word for word in cleaned.split()
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS
    ]


def term_frequency_score(query_terms: list[str], content_terms: list[str]) -> float:
    """Share of query keywords present in the content.

    Repeated query keywords count once per occurrence.
    """
    if not query_terms:
        return 0.0
    content_set = set(content_terms)
    matching = [term for term in query_terms if term in content_set]
    return len(matching) / len(query_terms)


def position_boost(position: int, weights: RerankWeights = RerankWeights()) -> float:
    """Prior favouring chunks early in their document."""
    return max(weights.position_floor, 1.0 - position * weights.position_decay)


def blend_scores(
    original_score: float,
    term_frequency: float,
    boost: float,
    weights: RerankWeights = RerankWeights(),
) -> float:
    return (
        original_score * weights.similarity
        + term_frequency * weights.term_frequency
        + boost * weights.position
    )
