"""Chroma implementation of the vector-store abstraction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import chromadb

from ollama_rag.config import settings
from ollama_rag.retrieval.base import VectorStoreBase

if TYPE_CHECKING:
    from langchain_core.documents import Document
    from langchain_core.embeddings import Embeddings

logger = logging.getLogger(__name__)


def create_client(
    host: str = settings.chroma_host,
    port: int = settings.chroma_port,
    path: str = settings.chroma_path,
) -> Any:
    """Return a Chroma client: remote when *host* is set, else in-process."""
    if host:
        return chromadb.HttpClient(host=host, port=port)
    if path:
        return chromadb.PersistentClient(path=path)
    return chromadb.EphemeralClient()


class ChromaVectorStore(VectorStoreBase):
    """Chroma-backed vector store.

    Embeddings are computed client-side with *embedding* so the collection
    never falls back to Chroma's built-in embedding function.

    Parameters
    ----------
    embedding:
        LangChain embedding function used for both chunks and queries.
    collection_name:
        Name of the Chroma collection.
    client:
        Pre-built Chroma client.  When *None*, one is created from settings.
    """

    def __init__(
        self,
        embedding: Embeddings,
        collection_name: str = settings.chroma_collection,
        *,
        client: Any = None,
    ) -> None:
        super().__init__(collection_name)
        self._embedding = embedding
        self._client = client if client is not None else create_client()
        self._collection = self._client.get_or_create_collection(
            collection_name,
            metadata={"hnsw:space": "cosine"},
        )

    def add_documents(self, documents: list[Document]) -> list[str]:
        if not documents:
            return []
        texts = [doc.page_content for doc in documents]
        ids = [uuid4().hex for _ in documents]
        self._collection.add(
            ids=ids,
            documents=texts,
            embeddings=self._embedding.embed_documents(texts),
            metadatas=[_clean_metadata(doc.metadata) for doc in documents],
        )
        logger.info("Added %d chunk(s) to Chroma collection %r", len(ids), self.collection_name)
        return ids

    def similarity_search_by_text(self, query: str, *, k: int = 4) -> list[dict[str, Any]]:
        results = self._collection.query(
            query_embeddings=[self._embedding.embed_query(query)],
            n_results=k,
            include=["documents", "metadatas", "distances"],
        )

        hits: list[dict[str, Any]] = []
        ids = results.get("ids", [[]])[0]
        docs = results.get("documents", [[]])[0]
        metas = results.get("metadatas", [[]])[0]
        distances = results.get("distances", [[]])[0]

        for doc_id, content, meta, dist in zip(ids, docs, metas, distances):
            # Cosine distance → similarity.
            hits.append(
                {
                    "id": doc_id,
                    "content": content or "",
                    "score": 1.0 - dist,
                    "metadata": meta or {},
                }
            )
        return hits

    def count(self) -> int:
        return self._collection.count()

    def health_check(self) -> bool:
        try:
            self._client.heartbeat()
            return True
        except Exception:
            logger.warning("Chroma health-check failed", exc_info=True)
            return False


def _clean_metadata(metadata: dict[str, Any]) -> dict[str, Any]:
    """Keep only the scalar values Chroma accepts as metadata."""
    return {
        key: value
        for key, value in metadata.items()
        if isinstance(value, (str, int, float, bool))
    }
