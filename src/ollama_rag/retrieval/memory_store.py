"""In-process vector store backed by LangChain's ``InMemoryVectorStore``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import uuid4

from langchain_core.vectorstores import InMemoryVectorStore as _LCInMemoryVectorStore

from ollama_rag.retrieval.base import VectorStoreBase

if TYPE_CHECKING:
    from langchain_core.documents import Document
    from langchain_core.embeddings import Embeddings


class InMemoryVectorStore(VectorStoreBase):
    """Vector store that lives and dies with the process (cosine similarity)."""

    def __init__(self, embedding: Embeddings, collection_name: str = "memory") -> None:
        super().__init__(collection_name)
        self._store = _LCInMemoryVectorStore(embedding=embedding)

    def add_documents(self, documents: list[Document]) -> list[str]:
        if not documents:
            return []
        ids = [uuid4().hex for _ in documents]
        return self._store.add_documents(documents, ids=ids)

    def similarity_search_by_text(self, query: str, *, k: int = 4) -> list[dict[str, Any]]:
        return [
            {
                "id": doc.id,
                "content": doc.page_content,
                "score": score,
                "metadata": dict(doc.metadata),
            }
            for doc, score in self._store.similarity_search_with_score(query, k=k)
        ]

    def count(self) -> int:
        return len(self._store.store)
