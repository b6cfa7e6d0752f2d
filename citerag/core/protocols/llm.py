"""LLM protocol for dependency injection."""
from typing import Protocol, runtime_checkable

from ..models.answer import GenerationParams


@runtime_checkable
class LLMProtocol(Protocol):
    """Protocol for generative model client."""

    @property
    def model_name(self) -> str:
        """Model identifier reported in answer metadata."""
        ...

    def generate(self, prompt: str, params: GenerationParams) -> str:
        """Generate a completion for a single prompt.

        Args:
            prompt: Full prompt text.
            params: Decoding parameters.

        Returns:
            Generated text (empty string if the model returned nothing).
        """
        ...
