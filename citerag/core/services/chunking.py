"""Chunking - split raw text into overlapping, position-tagged chunks."""

import math
from dataclasses import dataclass
from typing import Sequence

from ..errors import ConfigError
from ..models.document import Chunk, ChunkingStats, NoChunks

CHARS_PER_TOKEN = 3.5


@dataclass(frozen=True)
class ChunkingConfig:
    """Chunking parameters.

    Attributes:
        chunk_size: Chunk length in characters (~800 tokens at 3200).
        overlap: Fraction of chunk_size shared by neighbours, in [0, 1).
        min_chunk_chars: Trimmed slices shorter than this end chunking.
    """
    chunk_size: int = 3200
    overlap: float = 0.15
    min_chunk_chars: int = 50

    @property
    def overlap_size(self) -> int:
        return math.floor(self.chunk_size * self.overlap)

    @property
    def step(self) -> int:
        return self.chunk_size - self.overlap_size

    def validate(self) -> None:
        """Raise ConfigError if the parameters cannot make progress."""
        if self.chunk_size < 1:
            raise ConfigError(f"chunk_size must be >= 1, got {self.chunk_size}")
        if not 0 <= self.overlap < 1:
            raise ConfigError(f"overlap must be in [0, 1), got {self.overlap}")
        if self.step <= 0:
            raise ConfigError(
                f"Chunk step is {self.step} for chunk_size={self.chunk_size}, "
                f"overlap={self.overlap}"
            )


DEFAULT_CHUNKING_CONFIG = ChunkingConfig()


def chunk_text(
    text: str,
    source: str = "user_input",
    config: ChunkingConfig = DEFAULT_CHUNKING_CONFIG,
) -> list[Chunk]:
    """Split text into overlapping chunks.

    Slices of ``chunk_size`` characters are taken every ``step`` characters
    and trimmed. Chunking stops at the first slice whose trimmed text is
    shorter than ``min_chunk_chars`` (not emitted), or after the slice that
    reaches the end of the text.

    Args:
        text: Raw document text.
        source: Source label stored with each chunk.
        config: Chunking parameters.

    Returns:
        Chunks in document order.

    Raises:
        ConfigError: If the config yields a non-positive step.
    """
    config.validate()

    chunks: list[Chunk] = []
    text_length = len(text)
    offset = 0

    while offset < text_length:
        end = min(offset + config.chunk_size, text_length)
        piece = text[offset:end].strip()

        if len(piece) < config.min_chunk_chars:
            break

        chunks.append(
            Chunk(
                text=piece,
                source=source,
                position=len(chunks),
                start_char=offset,
                end_char=end,
                chunk_size=len(piece),
            )
        )

        if end >= text_length:
            break
        offset += config.step

    return chunks


def estimate_tokens(text: str) -> int:
    """Rough token count (~3.5 characters per token)."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def get_chunking_stats(chunks: Sequence[Chunk]) -> ChunkingStats | NoChunks:
    """Summarize chunk sizes and token estimates."""
    if not chunks:
        return NoChunks()

    sizes = [len(c.text) for c in chunks]
    tokens = [estimate_tokens(c.text) for c in chunks]
    count = len(chunks)

    return ChunkingStats(
        total_chunks=count,
        avg_chunk_size=round(sum(sizes) / count),
        avg_tokens=round(sum(tokens) / count),
        min_chunk_size=min(sizes),
        max_chunk_size=max(sizes),
        total_tokens=sum(tokens),
    )
