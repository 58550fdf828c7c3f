"""
Retrieval — vector storage and similarity search.

Public surface
--------------
- :class:`SemanticRetriever` — ``retrieve(query)`` entry point.
- :class:`VectorStoreBase` — abstract backend.
- :class:`ChromaVectorStore` — default Chroma backend.
- :class:`InMemoryVectorStore` — in-process backend.
- :class:`Citation`, :class:`RetrievalResult` — data models.
- :func:`build_vector_store` — backend factory driven by settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ollama_rag.config import Settings, settings
from ollama_rag.retrieval.base import VectorStoreBase
from ollama_rag.retrieval.memory_store import InMemoryVectorStore
from ollama_rag.retrieval.models import Citation, RetrievalResult
from ollama_rag.retrieval.retriever import SemanticRetriever

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings

__all__ = [
    "Citation",
    "ChromaVectorStore",
    "InMemoryVectorStore",
    "RetrievalResult",
    "SemanticRetriever",
    "VectorStoreBase",
    "build_vector_store",
]


def build_vector_store(embedding: Embeddings, config: Settings = settings) -> VectorStoreBase:
    """Return the vector store named by ``config.vector_store`` (``chroma`` or ``memory``)."""
    if config.vector_store == "chroma":
        from ollama_rag.retrieval.chroma_store import ChromaVectorStore, create_client

        client = create_client(config.chroma_host, config.chroma_port, config.chroma_path)
        return ChromaVectorStore(embedding, config.chroma_collection, client=client)
    if config.vector_store == "memory":
        return InMemoryVectorStore(embedding)
    raise ValueError(f"Unsupported vector store: {config.vector_store!r}")


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import ChromaVectorStore to avoid pulling in chromadb at import time."""
    if name == "ChromaVectorStore":
        from ollama_rag.retrieval.chroma_store import ChromaVectorStore

        return ChromaVectorStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
