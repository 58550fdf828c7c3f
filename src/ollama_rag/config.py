"""Shared configuration loaded from environment / ``.env`` file."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide settings, populated from ``OLLAMA_RAG_*`` env vars or .env file."""

    # Document
    document_path: Path = Field(
        default=Path("data/Blossoms of the Savannah.pdf"),
        description="The single document ingested at startup.",
    )

    # LLM
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = Field(default="llama3.2", description="Ollama chat model name")
    llm_temperature: float = 0.7

    # Embedding
    embedding_provider: str = Field(default="ollama", description="'ollama' or 'huggingface'")
    embedding_model: str = "nomic-embed-text"

    # Vector store
    vector_store: str = Field(default="chroma", description="'chroma' or 'memory'")
    chroma_host: str = Field(
        default="",
        description=(
            "Chroma server hostname. Leave empty to run Chroma in-process "
            "(persistent when chroma_path is set, ephemeral otherwise)."
        ),
    )
    chroma_port: int = 8000
    chroma_path: str = ""
    chroma_collection: str = "ollama_rag"

    # Chunking
    chunk_size: int = 800
    min_chunk_size_chars: int = 350
    min_chunk_length_to_embed: int = 5
    max_num_chunks: int = 10_000
    keep_separator: bool = True
    token_encoding: str = "cl100k_base"

    # Retrieval
    top_k: int = 4
    similarity_threshold: float = 0.0

    # Serving
    serve_host: str = "0.0.0.0"
    serve_port: int = 8080
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="OLLAMA_RAG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Singleton — import `settings` wherever needed.
settings = Settings()
