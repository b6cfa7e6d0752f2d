import logging
from functools import cached_property

import numpy as np
from sentence_transformers import SentenceTransformer

logger = logging.getLogger(__name__)


class SentenceTransformerEmbedder:
    """Local embedding model, loaded lazily on first encode or warmup."""

    def __init__(self, model_name: str = "sentence-transformers/all-MiniLM-L6-v2"):
        self._model_name = model_name

    @cached_property
    def model(self) -> SentenceTransformer:
        logger.info(f"Loading embedding model: {self._model_name}")
        return SentenceTransformer(self._model_name)

    def warmup(self) -> None:
        dims = self.model.get_sentence_embedding_dimension()
        logger.info(f"Embedding model warmed up ({dims} dims)")

    def encode(self, texts: str | list[str]) -> np.ndarray:
        # Unit-length output, so dot product equals cosine similarity in the index.
        return self.model.encode(texts, convert_to_numpy=True, normalize_embeddings=True)
