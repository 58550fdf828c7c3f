"""Embedding-model factory."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ollama_rag.config import settings

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings

logger = logging.getLogger(__name__)


def get_embedding_function(
    provider: str = settings.embedding_provider,
    model: str = settings.embedding_model,
    base_url: str = settings.ollama_base_url,
) -> Embeddings:
    """Return the configured embedding function.

    ``ollama`` embeds through the same local Ollama server that answers
    questions; ``huggingface`` runs a sentence-transformer model in-process.
    """
    if provider == "ollama":
        from langchain_ollama import OllamaEmbeddings

        logger.info("Using Ollama embeddings %r at %s", model, base_url)
        return OllamaEmbeddings(model=model, base_url=base_url)
    if provider == "huggingface":
        from langchain_huggingface import HuggingFaceEmbeddings

        logger.info("Using HuggingFace embeddings %r", model)
        return HuggingFaceEmbeddings(model_name=model)
    raise ValueError(f"Unsupported embedding provider: {provider!r}")
