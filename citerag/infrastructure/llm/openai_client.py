import logging

from openai import OpenAI

from citerag.core.models.answer import GenerationParams

logger = logging.getLogger(__name__)


class OpenAICompatibleClient:
    """LLM client for any OpenAI-compatible chat API (Ollama, vLLM, OpenAI)."""

    def __init__(
        self,
        base_url: str = "http://localhost:11434/v1",
        model: str = "qwen2.5:7b",
        api_key: str = "ollama",
        timeout: float = 120.0,
    ):
        """Initialize client.

        Args:
            base_url: API base URL.
            model: Model name.
            api_key: API key (any value for Ollama).
            timeout: Request timeout in seconds.
        """
        self._client = OpenAI(base_url=base_url, api_key=api_key, timeout=timeout)
        self._model = model

    @property
    def model_name(self) -> str:
        return self._model

    def generate(self, prompt: str, params: GenerationParams) -> str:
        """Single-turn completion.

        Args:
            prompt: Full grounded prompt.
            params: Decoding parameters. ``top_k`` is not part of the OpenAI
                schema and is sent through ``extra_body``.

        Returns:
            Completion text, empty if the model returned no content.
        """
        extra_body = {"top_k": params.top_k} if params.top_k is not None else None

        response = self._client.chat.completions.create(
            model=self._model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=params.max_output_tokens,
            temperature=params.temperature,
            top_p=params.top_p,
            extra_body=extra_body,
        )

        if not response.choices:
            logger.warning(f"[llm] Empty completion from {self._model}")
            return ""
        return response.choices[0].message.content or ""
