import logging

import numpy as np
from openai import OpenAI

logger = logging.getLogger(__name__)


class OpenAIEmbedder:
    """Embeddings from an OpenAI-compatible /embeddings endpoint."""

    def __init__(
        self,
        base_url: str = "http://localhost:11434/v1",
        model: str = "nomic-embed-text",
        api_key: str = "ollama",
        timeout: float = 30.0,
    ):
        """Initialize embedder.

        Args:
            base_url: API base URL.
            model: Embedding model name.
            api_key: API key (any value for Ollama).
            timeout: Request timeout in seconds.
        """
        self._client = OpenAI(base_url=base_url, api_key=api_key, timeout=timeout)
        self._model = model

    def warmup(self) -> None:
        self.encode("warmup")
        logger.info(f"Embedding endpoint ready: {self._model}")

    def encode(self, texts: str | list[str]) -> np.ndarray:
        single = isinstance(texts, str)
        response = self._client.embeddings.create(
            model=self._model,
            input=[texts] if single else texts,
        )
        vectors = np.array([item.embedding for item in response.data], dtype=float)
        return vectors[0] if single else vectors
