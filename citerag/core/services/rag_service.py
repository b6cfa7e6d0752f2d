"""RAG service - sequences indexing and querying."""

import logging
import time
from typing import Optional

from ..errors import ConfigError, EmptyInputError
from ..models.answer import Answered, InsufficientContext, QueryMetadata, QueryResult
from ..models.document import DocumentStats, IndexStats, NoChunks
from ..protocols.reranker import RerankerProtocol
from .answer_service import AnswerSynthesizer
from .chunking import DEFAULT_CHUNKING_CONFIG, ChunkingConfig, chunk_text, get_chunking_stats
from .retriever import Retriever
from .vector_index import VectorIndexClient

logger = logging.getLogger(__name__)

INSUFFICIENT_CONTEXT_ANSWER = (
    "I don't have enough information to answer your question. "
    "Please provide some relevant context first."
)


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class RAGService:
    """Pipeline orchestrator.

    Index flow: chunk -> embed -> store.
    Query flow: retrieve -> rerank -> synthesize.

    Holds no mutable state of its own; the vector index is the only shared
    resource, and index-mutating calls are not serialized here.
    """

    def __init__(
        self,
        index: VectorIndexClient,
        retriever: Retriever,
        reranker: RerankerProtocol,
        synthesizer: AnswerSynthesizer,
        chunking: ChunkingConfig = DEFAULT_CHUNKING_CONFIG,
        top_k: int = 8,
        rerank_top_k: int = 3,
    ):
        """Initialize RAG service.

        Args:
            index: Vector index client.
            retriever: Candidate retriever.
            reranker: Reranking service.
            synthesizer: Answer synthesizer.
            chunking: Chunking parameters.
            top_k: Default number of retrieved candidates.
            rerank_top_k: Default number of chunks passed to the LLM.
        """
        self._index = index
        self._retriever = retriever
        self._reranker = reranker
        self._synthesizer = synthesizer
        self._chunking = chunking
        self._top_k = top_k
        self._rerank_top_k = rerank_top_k

    def index_document(
        self,
        text: str,
        source: str = "user_input",
        clear_previous: bool = False,
    ) -> DocumentStats:
        """Chunk, embed and store a document.

        Args:
            text: Plain document text.
            source: Source label for citations.
            clear_previous: Drop everything already indexed first.

        Returns:
            Indexing statistics.

        Raises:
            EmptyInputError: If no chunk could be produced.
        """
        start = time.perf_counter()

        chunks = chunk_text(text, source, self._chunking)
        chunk_stats = get_chunking_stats(chunks)
        if isinstance(chunk_stats, NoChunks):
            raise EmptyInputError("No valid chunks created from the provided text")

        if clear_previous:
            self._index.clear()

        vector_ids = self._index.store(chunks)

        elapsed = _elapsed_ms(start)
        logger.info(
            f"Indexed '{source}': {len(chunks)} chunks, "
            f"{len(vector_ids)} vectors in {elapsed}ms"
        )

        return DocumentStats(
            chunks_created=chunk_stats.total_chunks,
            avg_chunk_size=chunk_stats.avg_chunk_size,
            avg_tokens=chunk_stats.avg_tokens,
            total_tokens=chunk_stats.total_tokens,
            vectors_stored=len(vector_ids),
            processing_time_ms=elapsed,
        )

    def query(
        self,
        question: str,
        top_k: Optional[int] = None,
        rerank_top_k: Optional[int] = None,
    ) -> QueryResult:
        """Answer a question from indexed content.

        Returns InsufficientContext when nothing is retrieved; every other
        failure propagates to the caller.

        Raises:
            ConfigError: If top_k or rerank_top_k is negative.
        """
        start = time.perf_counter()
        for name, value in (("top_k", top_k), ("rerank_top_k", rerank_top_k)):
            if value is not None and value < 0:
                raise ConfigError(f"{name} must be >= 0, got {value}")

        top_k = top_k or self._top_k
        rerank_top_k = rerank_top_k or self._rerank_top_k

        results = self._retriever.retrieve(question, top_k=top_k)

        if not results:
            logger.info(f"No context for '{question[:50]}...', skipping generation")
            return InsufficientContext(
                answer=INSUFFICIENT_CONTEXT_ANSWER,
                metadata=QueryMetadata(processing_time_ms=_elapsed_ms(start)),
            )

        reranked = self._reranker.rerank(question, results, top_k=rerank_top_k)
        generated = self._synthesizer.generate(question, reranked)
        total_chunks = self._index.stats().total_vectors

        metadata = QueryMetadata(
            total_chunks=total_chunks,
            retrieved_chunks=len(results),
            reranked_chunks=len(reranked),
            tokens_used=generated.tokens_used,
            model=generated.model_name,
            processing_time_ms=_elapsed_ms(start),
        )
        logger.info(
            f"Query answered: retrieved={metadata.retrieved_chunks} "
            f"reranked={metadata.reranked_chunks} tokens={metadata.tokens_used} "
            f"in {metadata.processing_time_ms}ms"
        )

        return Answered(
            answer=generated.answer,
            citations=generated.citations,
            metadata=metadata,
        )

    def get_stats(self) -> IndexStats:
        return self._index.stats()

    def clear_all(self) -> None:
        self._index.clear()
