"""
Shared fixtures for the citerag test suite.

Every external collaborator (embedding model, LLM, vector index service) is
replaced by a deterministic in-process fake, so no test needs a network or a
model download.
"""
import zlib

import numpy as np
import pytest

from citerag.core.models.document import Chunk, SearchResult
from citerag.core.services.answer_service import AnswerSynthesizer
from citerag.core.services.chunking import ChunkingConfig
from citerag.core.services.embedding_service import EmbeddingGateway
from citerag.core.services.rag_service import RAGService
from citerag.core.services.reranker import HybridReranker
from citerag.core.services.retriever import Retriever
from citerag.core.services.vector_index import VectorIndexClient
from citerag.infrastructure.vector_stores.memory_store import InMemoryVectorStore

DIM = 64


class FakeEmbedder:
    """Bag-of-words hashing embedder; texts sharing words are close."""

    def __init__(self, fail_on: str | None = None):
        self.calls: list[str] = []
        self._fail_on = fail_on

    def warmup(self) -> None:
        pass

    def _vector(self, text: str) -> np.ndarray:
        if self._fail_on and self._fail_on in text:
            raise RuntimeError("provider down")
        vec = np.zeros(DIM)
        for word in text.lower().split():
            vec[zlib.crc32(word.strip(".,?!").encode()) % DIM] += 1.0
        if not vec.any():
            vec[0] = 1.0
        return vec

    def encode(self, texts):
        if isinstance(texts, str):
            self.calls.append(texts)
            return self._vector(texts)
        return np.stack([self.encode(t) for t in texts])


class FakeLLM:
    model_name = "fake-llm"

    def __init__(self, answer: str = "Paris is the capital of France [Source 1].",
                 error: Exception | None = None):
        self.answer = answer
        self.error = error
        self.prompts: list[str] = []
        self.params: list = []

    def generate(self, prompt, params):
        self.prompts.append(prompt)
        self.params.append(params)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def fake_embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def memory_store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


@pytest.fixture
def gateway(fake_embedder) -> EmbeddingGateway:
    return EmbeddingGateway(fake_embedder, max_workers=4)


@pytest.fixture
def index_client(memory_store, gateway) -> VectorIndexClient:
    return VectorIndexClient(memory_store, gateway)


@pytest.fixture
def rag_service(index_client, fake_llm) -> RAGService:
    return RAGService(
        index=index_client,
        retriever=Retriever(index_client, top_k=8),
        reranker=HybridReranker(),
        synthesizer=AnswerSynthesizer(fake_llm),
        chunking=ChunkingConfig(),
    )


@pytest.fixture
def make_result():
    """Factory for SearchResult candidates."""

    def _make(text: str, score: float = 0.5, position: int = 0,
              id: str | None = None, source: str = "doc.txt") -> SearchResult:
        chunk = Chunk(
            text=text,
            source=source,
            position=position,
            start_char=0,
            end_char=len(text),
            chunk_size=len(text),
        )
        return SearchResult(id=id or f"id-{position}-{score}", chunk=chunk,
                            score=score, timestamp=0.0)

    return _make
