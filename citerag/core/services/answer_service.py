"""Answer service - grounded prompt assembly and cited answers."""

import logging

from ..errors import GenerationError
from ..models.answer import Citation, GeneratedAnswer, GenerationParams
from ..models.document import RerankedResult
from ..protocols.llm import LLMProtocol
from .chunking import estimate_tokens

logger = logging.getLogger(__name__)

PROMPT_WITH_CONTEXT = """You are a helpful AI assistant. Answer the user's question based on the provided context.

**Important Instructions:**
1. Answer only based on the provided context
2. If the context doesn't contain enough information, say so
3. Be precise and concise
4. Reference the sources when possible
5. If multiple sources support your answer, mention them

**Context:**
{context}

**Question:** {question}

**Answer:**"""

CITATION_ELLIPSIS = "..."


class AnswerSynthesizer:
    """Builds the grounded prompt, calls the LLM and attaches citations."""

    def __init__(
        self,
        llm: LLMProtocol,
        params: GenerationParams | None = None,
        preview_chars: int = 150,
    ):
        """Initialize synthesizer.

        Args:
            llm: Generative model client.
            params: Decoding parameters.
            preview_chars: Length of citation previews.
        """
        self._llm = llm
        self._params = params or GenerationParams()
        self._preview_chars = preview_chars

    def build_context(self, context: list[RerankedResult]) -> str:
        """Label each chunk ``[Source i]`` (1-based, reranked order)."""
        return "\n\n".join(
            f"[Source {i}]: {item.text}" for i, item in enumerate(context, 1)
        )

    def build_prompt(self, question: str, context_text: str) -> str:
        return PROMPT_WITH_CONTEXT.format(context=context_text, question=question)

    def build_citations(self, context: list[RerankedResult]) -> list[Citation]:
        return [
            Citation(
                source=item.source,
                position=item.position,
                text=item.text[: self._preview_chars] + CITATION_ELLIPSIS,
                relevance_score=item.rerank_score,
            )
            for item in context
        ]

    def generate(self, question: str, context: list[RerankedResult]) -> GeneratedAnswer:
        """Answer the question from the reranked context.

        Raises:
            GenerationError: If the model call fails.
        """
        prompt = self.build_prompt(question, self.build_context(context))

        try:
            answer = self._llm.generate(prompt, self._params)
        except Exception as e:
            logger.error(f"Generation failed: {e}")
            raise GenerationError("Failed to generate answer", cause=e) from e

        tokens_used = estimate_tokens(prompt + answer)
        logger.info(
            f"Generated answer: {len(answer)} chars, ~{tokens_used} tokens, "
            f"{len(context)} sources"
        )

        return GeneratedAnswer(
            answer=answer,
            citations=self.build_citations(context),
            tokens_used=tokens_used,
            model_name=self._llm.model_name,
        )
