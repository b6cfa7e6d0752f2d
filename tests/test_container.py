import pytest

from citerag.config.settings import Settings
from citerag.container import Container, configure_container
from citerag.core.protocols import (
    EmbedderProtocol,
    LLMProtocol,
    RerankerProtocol,
    VectorStoreProtocol,
)
from citerag.core.services.rag_service import RAGService
from citerag.core.services.reranker import HybridReranker
from citerag.infrastructure.embeddings.openai_embedder import OpenAIEmbedder
from citerag.infrastructure.llm.openai_client import OpenAICompatibleClient
from citerag.infrastructure.vector_stores.chroma_store import ChromaVectorStore
from citerag.infrastructure.vector_stores.memory_store import InMemoryVectorStore


@pytest.fixture
def memory_settings():
    return Settings(
        _env_file=None,
        vector_backend="memory",
        embedding_backend="openai",
        rerank_similarity_weight=0.5,
    )


def test_resolves_pipeline_from_settings(memory_settings):
    container = configure_container(memory_settings)

    assert isinstance(container.resolve(RAGService), RAGService)
    assert isinstance(container.resolve(VectorStoreProtocol), InMemoryVectorStore)
    assert isinstance(container.resolve(EmbedderProtocol), OpenAIEmbedder)
    assert isinstance(container.resolve(LLMProtocol), OpenAICompatibleClient)

    reranker = container.resolve(RerankerProtocol)
    assert isinstance(reranker, HybridReranker)
    assert reranker.weights.similarity == 0.5


def test_adapters_satisfy_protocols(memory_settings):
    container = configure_container(memory_settings)

    assert isinstance(container.resolve(EmbedderProtocol), EmbedderProtocol)
    assert isinstance(container.resolve(VectorStoreProtocol), VectorStoreProtocol)
    assert isinstance(container.resolve(LLMProtocol), LLMProtocol)


def test_chroma_backend():
    container = configure_container(Settings(_env_file=None, embedding_backend="openai"))

    assert isinstance(container.resolve(VectorStoreProtocol), ChromaVectorStore)


def test_singletons_and_separate_containers(memory_settings):
    first = configure_container(memory_settings)
    second = configure_container(memory_settings)

    assert first.resolve(RAGService) is first.resolve(RAGService)
    assert first.resolve(VectorStoreProtocol) is not second.resolve(VectorStoreProtocol)


def test_register_override_and_reset():
    container = Container()
    container.register(list, lambda: [1], singleton=True)
    cached = container.resolve(list)
    assert container.resolve(list) is cached

    container.reset()
    assert container.resolve(list) is not cached

    container.register(dict, dict)
    assert container.resolve(dict) is not container.resolve(dict)


def test_unknown_interface():
    with pytest.raises(KeyError):
        Container().resolve(set)
