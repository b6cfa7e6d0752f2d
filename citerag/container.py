import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Container:
    _factories: dict[type, Callable[[], Any]] = field(default_factory=dict)
    _singletons: dict[type, Any] = field(default_factory=dict)
    _singleton_flags: set[type] = field(default_factory=set)

    def register(
        self, interface: type[T], factory: Callable[[], T], singleton: bool = False
    ) -> None:
        """Register factory for interface.

        Args:
            interface: Interface type.
            factory: Factory function.
            singleton: Whether to cache instance.
        """
        self._factories[interface] = factory
        if singleton:
            self._singleton_flags.add(interface)

    def resolve(self, interface: type[T]) -> T:
        if interface in self._singletons:
            return self._singletons[interface]

        if interface not in self._factories:
            raise KeyError(f"No factory registered for {interface}")

        instance = self._factories[interface]()

        if interface in self._singleton_flags:
            self._singletons[interface] = instance

        return instance

    def reset(self) -> None:
        """Reset singletons (for testing)."""
        self._singletons.clear()


def _embedder_factory(settings: Settings) -> Callable[[], Any]:
    if settings.embedding_backend == "openai":
        from .infrastructure.embeddings.openai_embedder import OpenAIEmbedder

        return lambda: OpenAIEmbedder(
            base_url=settings.embedding_base_url,
            model=settings.embedding_model,
            api_key=settings.embedding_api_key,
        )

    from .infrastructure.embeddings.sentence_transformer import (
        SentenceTransformerEmbedder,
    )

    return lambda: SentenceTransformerEmbedder(settings.embedding_model)


def _vector_store_factory(settings: Settings) -> Callable[[], Any]:
    if settings.vector_backend == "memory":
        from .infrastructure.vector_stores.memory_store import InMemoryVectorStore

        return lambda: InMemoryVectorStore(capacity=settings.memory_capacity)

    from .infrastructure.vector_stores.chroma_store import ChromaVectorStore

    return lambda: ChromaVectorStore(
        host=settings.chroma_host,
        port=settings.chroma_port,
        collection_name=settings.chroma_collection,
        timeout=settings.chroma_timeout,
    )


def configure_container(settings: Settings) -> Container:
    """Build a container with all dependencies.

    Args:
        settings: Application settings.

    Returns:
        Configured container.
    """
    from .core.models.answer import GenerationParams
    from .core.protocols.embedder import EmbedderProtocol
    from .core.protocols.llm import LLMProtocol
    from .core.protocols.reranker import RerankerProtocol
    from .core.protocols.vector_store import VectorStoreProtocol
    from .core.services.answer_service import AnswerSynthesizer
    from .core.services.chunking import ChunkingConfig
    from .core.services.embedding_service import EmbeddingGateway
    from .core.services.rag_service import RAGService
    from .core.services.reranker import HybridReranker
    from .core.services.retriever import Retriever
    from .core.services.vector_index import VectorIndexClient
    from .core.strategies.scoring import RerankWeights
    from .infrastructure.document_loaders import CompositeLoader
    from .infrastructure.llm.openai_client import OpenAICompatibleClient

    container = Container()

    container.register(EmbedderProtocol, _embedder_factory(settings), singleton=True)

    container.register(
        VectorStoreProtocol, _vector_store_factory(settings), singleton=True
    )

    container.register(
        LLMProtocol,
        lambda: OpenAICompatibleClient(
            base_url=settings.llm_base_url,
            model=settings.llm_model,
            api_key=settings.llm_api_key,
            timeout=settings.llm_timeout,
        ),
        singleton=True,
    )

    container.register(
        RerankerProtocol,
        lambda: HybridReranker(
            RerankWeights(
                similarity=settings.rerank_similarity_weight,
                term_frequency=settings.rerank_term_frequency_weight,
                position=settings.rerank_position_weight,
                position_decay=settings.rerank_position_decay,
                position_floor=settings.rerank_position_floor,
            )
        ),
        singleton=True,
    )

    container.register(
        EmbeddingGateway,
        lambda: EmbeddingGateway(
            embedder=container.resolve(EmbedderProtocol),
            max_workers=settings.embedding_max_workers,
        ),
        singleton=True,
    )

    container.register(
        VectorIndexClient,
        lambda: VectorIndexClient(
            vector_store=container.resolve(VectorStoreProtocol),
            embeddings=container.resolve(EmbeddingGateway),
        ),
        singleton=True,
    )

    container.register(
        Retriever,
        lambda: Retriever(
            index=container.resolve(VectorIndexClient),
            top_k=settings.rag_top_k,
        ),
        singleton=True,
    )

    container.register(
        AnswerSynthesizer,
        lambda: AnswerSynthesizer(
            llm=container.resolve(LLMProtocol),
            params=GenerationParams(
                temperature=settings.llm_temperature,
                top_p=settings.llm_top_p,
                top_k=settings.llm_top_k,
                max_output_tokens=settings.llm_max_tokens,
            ),
            preview_chars=settings.citation_preview_chars,
        ),
        singleton=True,
    )

    container.register(
        RAGService,
        lambda: RAGService(
            index=container.resolve(VectorIndexClient),
            retriever=container.resolve(Retriever),
            reranker=container.resolve(RerankerProtocol),
            synthesizer=container.resolve(AnswerSynthesizer),
            chunking=ChunkingConfig(
                chunk_size=settings.chunk_size,
                overlap=settings.chunk_overlap,
                min_chunk_chars=settings.min_chunk_chars,
            ),
            top_k=settings.rag_top_k,
            rerank_top_k=settings.rag_rerank_top_k,
        ),
        singleton=True,
    )

    container.register(
        CompositeLoader,
        lambda: CompositeLoader(
            max_file_size=settings.max_file_size,
            min_content_chars=settings.min_content_chars,
        ),
        singleton=True,
    )

    logger.info("Container configured")
    return container
