"""Semantic retriever — the ``retrieve(query)`` step of the RAG pipeline.

Usage::

    from ollama_rag.retrieval.retriever import SemanticRetriever

    retriever = SemanticRetriever(store, default_k=4)
    for r in retriever.retrieve("Who is Resian?"):
        print(r.citation.short_ref(), r.content[:80])
"""

from __future__ import annotations

import logging
from typing import Any

from ollama_rag.config import settings
from ollama_rag.retrieval.base import VectorStoreBase
from ollama_rag.retrieval.models import Citation, RetrievalResult

logger = logging.getLogger(__name__)


class SemanticRetriever:
    """Retriever wrapping any :class:`VectorStoreBase`.

    Parameters
    ----------
    store:
        The vector store populated by the ingestion runner.
    default_k:
        Number of results returned by :meth:`retrieve`.
    score_threshold:
        Minimum similarity score; results below this are discarded.
    """

    def __init__(
        self,
        store: VectorStoreBase,
        *,
        default_k: int = settings.top_k,
        score_threshold: float = settings.similarity_threshold,
    ) -> None:
        self._store = store
        self.default_k = default_k
        self.score_threshold = score_threshold

    def retrieve(self, query: str, *, k: int | None = None) -> list[RetrievalResult]:
        """Return the stored chunks most similar to *query*, best first."""
        k = k or self.default_k
        raw_hits = self._store.similarity_search_by_text(query, k=k)
        results = self._to_results(raw_hits)
        logger.info("Retrieved %d chunk(s) for %r", len(results), query)
        return results

    def _to_results(self, raw_hits: list[dict[str, Any]]) -> list[RetrievalResult]:
        results: list[RetrievalResult] = []
        for hit in raw_hits:
            score = hit.get("score")
            if score is not None and score < self.score_threshold:
                continue

            meta = hit.get("metadata", {})
            citation = Citation(
                document_id=hit.get("id"),
                source=meta.get("source", "unknown"),
                chunk_index=meta.get("chunk_index"),
                score=score,
                metadata=meta,
            )
            results.append(RetrievalResult(content=hit.get("content", ""), citation=citation))
        return results
