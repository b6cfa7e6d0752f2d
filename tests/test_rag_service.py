import pytest

from citerag.core.errors import ConfigError, EmptyInputError, GenerationError
from citerag.core.models.answer import Answered, InsufficientContext
from citerag.core.services.answer_service import AnswerSynthesizer
from citerag.core.services.chunking import ChunkingConfig
from citerag.core.services.rag_service import INSUFFICIENT_CONTEXT_ANSWER, RAGService
from citerag.core.services.reranker import HybridReranker
from citerag.core.services.retriever import Retriever

from conftest import FakeLLM

FRANCE = (
    "France is a country in Western Europe. Paris is the capital of France and "
    "its largest city. The Seine river flows through Paris."
)
BANANAS = (
    "Bananas are an elongated edible fruit. They grow in clusters near the top "
    "of the banana plant and turn yellow when ripe."
)


def test_query_on_empty_index_skips_generation(rag_service, fake_llm):
    result = rag_service.query("What is the capital of France?")

    assert isinstance(result, InsufficientContext)
    assert result.answer == INSUFFICIENT_CONTEXT_ANSWER
    assert result.citations == []
    assert result.metadata.model == "none"
    assert result.metadata.retrieved_chunks == 0
    assert result.metadata.reranked_chunks == 0
    assert result.metadata.tokens_used == 0
    assert result.metadata.total_chunks == 0
    assert fake_llm.prompts == []
    assert result.to_dict()["status"] == "insufficient_context"


def test_index_document_stats(rag_service):
    stats = rag_service.index_document(FRANCE, source="france.txt")

    assert stats.chunks_created == 1
    assert stats.vectors_stored == 1
    assert stats.avg_chunk_size == len(FRANCE)
    assert stats.processing_time_ms >= 0
    assert rag_service.get_stats().total_vectors == 1


def test_query_returns_cited_answer(rag_service, fake_llm):
    rag_service.index_document(FRANCE, source="france.txt")
    rag_service.index_document(BANANAS, source="bananas.txt")

    result = rag_service.query("What is the capital of France?")

    assert isinstance(result, Answered)
    assert result.answer == fake_llm.answer
    assert result.citations[0].source == "france.txt"
    assert result.metadata.total_chunks == 2
    assert result.metadata.retrieved_chunks == 2
    assert result.metadata.reranked_chunks == 2
    assert result.metadata.model == "fake-llm"
    assert result.metadata.tokens_used > 0
    assert "[Source 1]: " + FRANCE in fake_llm.prompts[0]


def test_rerank_top_k_limits_context(index_client, fake_llm):
    service = RAGService(
        index=index_client,
        retriever=Retriever(index_client),
        reranker=HybridReranker(),
        synthesizer=AnswerSynthesizer(fake_llm),
        chunking=ChunkingConfig(chunk_size=100, overlap=0.0),
    )
    service.index_document(FRANCE + " " + BANANAS, source="mixed.txt")

    result = service.query("Paris", top_k=2, rerank_top_k=1)

    assert result.metadata.retrieved_chunks == 2
    assert result.metadata.reranked_chunks == 1
    assert len(result.citations) == 1


def test_short_input_raises_and_keeps_index(rag_service):
    rag_service.index_document(FRANCE, source="france.txt")

    with pytest.raises(EmptyInputError):
        rag_service.index_document("too short", clear_previous=True)

    assert rag_service.get_stats().total_vectors == 1


def test_clear_previous_replaces_documents(rag_service):
    rag_service.index_document(FRANCE, source="france.txt")
    rag_service.index_document(BANANAS, source="bananas.txt", clear_previous=True)

    result = rag_service.query("What is the capital of France?")

    assert rag_service.get_stats().total_vectors == 1
    assert [c.source for c in result.citations] == ["bananas.txt"]


def test_clear_all(rag_service):
    rag_service.index_document(FRANCE)
    rag_service.clear_all()

    assert rag_service.get_stats().total_vectors == 0
    assert isinstance(rag_service.query("Paris?"), InsufficientContext)


def test_generation_failure_propagates(index_client):
    service = RAGService(
        index=index_client,
        retriever=Retriever(index_client),
        reranker=HybridReranker(),
        synthesizer=AnswerSynthesizer(FakeLLM(error=RuntimeError("503"))),
    )
    service.index_document(FRANCE)

    with pytest.raises(GenerationError):
        service.query("What is the capital of France?")


@pytest.mark.parametrize("overrides", [{"top_k": -1}, {"rerank_top_k": -2}])
def test_negative_limits_are_rejected(rag_service, fake_llm, overrides):
    rag_service.index_document(FRANCE)

    with pytest.raises(ConfigError):
        rag_service.query("What is the capital of France?", **overrides)
    assert fake_llm.prompts == []
