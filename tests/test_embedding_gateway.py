"""Tests for the embedding gateway."""
import time

import numpy as np
import pytest

from citerag.core.errors import EmbeddingError
from citerag.core.services.embedding_service import EmbeddingGateway

from conftest import DIM, FakeEmbedder


def test_embed_returns_float_list(gateway):
    vector = gateway.embed("hello world")

    assert isinstance(vector, list)
    assert len(vector) == DIM
    assert all(isinstance(v, float) for v in vector)


def test_embed_batch_preserves_order(gateway):
    texts = [f"text number {i}" for i in range(20)]
    batch = gateway.embed_batch(texts)

    assert batch == [gateway.embed(t) for t in texts]


def test_embed_batch_order_with_uneven_latency():
    class SlowFirst(FakeEmbedder):
        def encode(self, texts):
            if texts.startswith("slow"):
                time.sleep(0.05)
            return super().encode(texts)

    gateway = EmbeddingGateway(SlowFirst(), max_workers=4)
    texts = ["slow alpha", "beta", "gamma", "delta"]

    assert gateway.embed_batch(texts) == [gateway.embed(t) for t in texts]


def test_empty_batch_skips_provider(fake_embedder, gateway):
    assert gateway.embed_batch([]) == []
    assert fake_embedder.calls == []


def test_batch_failure_wraps_cause():
    gateway = EmbeddingGateway(FakeEmbedder(fail_on="boom"), max_workers=2)

    with pytest.raises(EmbeddingError) as exc_info:
        gateway.embed_batch(["fine", "boom here", "also fine"])

    assert isinstance(exc_info.value.cause, RuntimeError)
    assert "provider down" in str(exc_info.value)


def test_single_failure_wraps_cause():
    gateway = EmbeddingGateway(FakeEmbedder(fail_on="boom"))

    with pytest.raises(EmbeddingError):
        gateway.embed("boom")


def test_two_dimensional_single_output_is_flattened():
    class RowEmbedder(FakeEmbedder):
        def encode(self, texts):
            return np.array([[1.0, 2.0, 3.0]])

    assert EmbeddingGateway(RowEmbedder()).embed("x") == [1.0, 2.0, 3.0]
