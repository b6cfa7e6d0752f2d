from typing import Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    vector_backend: Literal["chroma", "memory"] = "chroma"
    chroma_host: str = "localhost"
    chroma_port: int = 8001
    chroma_collection: str = "citerag_chunks"
    chroma_timeout: float = 30.0
    memory_capacity: Optional[int] = None

    embedding_backend: Literal["sentence_transformers", "openai"] = "sentence_transformers"
    embedding_model: str = "sentence-transformers/all-MiniLM-L6-v2"
    embedding_base_url: str = "http://localhost:11434/v1"
    embedding_api_key: str = "ollama"
    embedding_max_workers: int = 8

    llm_base_url: str = "http://localhost:11434/v1"
    llm_api_key: str = "ollama"
    llm_model: str = "qwen2.5:7b"
    llm_timeout: float = 120.0
    llm_max_tokens: int = 1024
    llm_temperature: float = 0.3
    llm_top_p: float = 0.8
    llm_top_k: Optional[int] = 40

    chunk_size: int = 3200
    chunk_overlap: float = 0.15
    min_chunk_chars: int = 50

    rag_top_k: int = 8
    rag_rerank_top_k: int = 3

    # Rerank blend
    rerank_similarity_weight: float = 0.7
    rerank_term_frequency_weight: float = 0.2
    rerank_position_weight: float = 0.1
    rerank_position_decay: float = 0.1
    rerank_position_floor: float = 0.1

    citation_preview_chars: int = 150

    # Extraction
    max_file_size: int = 10 * 1024 * 1024
    min_content_chars: int = 50

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
