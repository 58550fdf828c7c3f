"""Unit tests for the retrieval layer — models, stores, and SemanticRetriever."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

import chromadb
import pytest
from conftest import FakeVectorStore
from langchain_core.documents import Document

from ollama_rag.config import Settings
from ollama_rag.retrieval import build_vector_store
from ollama_rag.retrieval.chroma_store import ChromaVectorStore
from ollama_rag.retrieval.memory_store import InMemoryVectorStore
from ollama_rag.retrieval.models import Citation
from ollama_rag.retrieval.retriever import SemanticRetriever

SAMPLE_HITS: list[dict[str, Any]] = [
    {
        "id": "chunk-001",
        "content": "Resian dreams of attending university.",
        "score": 0.92,
        "metadata": {"source": "savannah.pdf", "chunk_index": 3},
    },
    {
        "id": "chunk-002",
        "content": "Taiyo is a gifted singer.",
        "score": 0.87,
        "metadata": {"source": "savannah.pdf", "chunk_index": 1},
    },
    {
        "id": "chunk-003",
        "content": "The family moves to Nasila.",
        "score": 0.45,
        "metadata": {"source": "savannah.pdf"},
    },
]

CHUNKS = [
    Document(page_content="Elephants migrate seasonally.", metadata={"source": "a.txt", "chunk_index": 0}),
    Document(page_content="Lions hunt at night on the plains.", metadata={"source": "a.txt", "chunk_index": 1}),
    Document(page_content="Acacia trees shade the grassland.", metadata={"source": "a.txt", "chunk_index": 2}),
]


@pytest.fixture()
def retriever() -> SemanticRetriever:
    return SemanticRetriever(FakeVectorStore(hits=SAMPLE_HITS), default_k=5)


# ── Models ─────────────────────────────────────────────────────────────


def test_citation_defaults() -> None:
    citation = Citation()
    assert citation.source == "unknown"
    assert citation.chunk_index is None
    assert citation.metadata == {}


# ── SemanticRetriever ──────────────────────────────────────────────────


class TestSemanticRetriever:
    def test_returns_results_in_store_order(self, retriever: SemanticRetriever) -> None:
        results = retriever.retrieve("Who is Resian?")
        assert [r.citation.document_id for r in results] == ["chunk-001", "chunk-002", "chunk-003"]

    def test_maps_metadata_onto_citation(self, retriever: SemanticRetriever) -> None:
        first = retriever.retrieve("Who is Resian?")[0]
        assert first.content == "Resian dreams of attending university."
        assert first.citation.source == "savannah.pdf"
        assert first.citation.chunk_index == 3
        assert first.citation.score == pytest.approx(0.92)

    def test_explicit_k_overrides_default(self, retriever: SemanticRetriever) -> None:
        assert len(retriever.retrieve("q", k=1)) == 1

    def test_default_k_is_forwarded(self) -> None:
        store = FakeVectorStore(hits=SAMPLE_HITS)
        SemanticRetriever(store, default_k=2).retrieve("q")
        assert store.last_k == 2

    def test_score_threshold_filters(self) -> None:
        retriever = SemanticRetriever(FakeVectorStore(hits=SAMPLE_HITS), score_threshold=0.5)
        assert len(retriever.retrieve("q")) == 2

    def test_missing_metadata_defaults(self, retriever: SemanticRetriever) -> None:
        last = retriever.retrieve("q")[-1]
        assert last.citation.chunk_index is None

    def test_empty_store_returns_nothing(self) -> None:
        assert SemanticRetriever(FakeVectorStore()).retrieve("q") == []


# ── Backends ───────────────────────────────────────────────────────────


class TestInMemoryVectorStore:
    def test_exact_match_is_top_result(self, keyword_embeddings) -> None:
        store = InMemoryVectorStore(keyword_embeddings)
        store.add_documents(CHUNKS)

        results = SemanticRetriever(store).retrieve("Lions hunt at night on the plains.")

        assert results[0].content == "Lions hunt at night on the plains."
        assert results[0].citation.chunk_index == 1

    def test_add_returns_fresh_ids(self, keyword_embeddings) -> None:
        store = InMemoryVectorStore(keyword_embeddings)
        first = store.add_documents(CHUNKS)
        second = store.add_documents(CHUNKS)
        assert len(set(first + second)) == 6
        assert store.count() == 6

    def test_add_nothing(self, keyword_embeddings) -> None:
        store = InMemoryVectorStore(keyword_embeddings)
        assert store.add_documents([]) == []
        assert store.count() == 0


class TestChromaVectorStore:
    @pytest.fixture()
    def store(self, keyword_embeddings) -> ChromaVectorStore:
        return ChromaVectorStore(
            keyword_embeddings,
            collection_name=f"test-{uuid4().hex[:8]}",
            client=chromadb.EphemeralClient(),
        )

    def test_exact_match_is_top_result(self, store: ChromaVectorStore) -> None:
        store.add_documents(CHUNKS)

        hits = store.similarity_search_by_text("Acacia trees shade the grassland.", k=1)

        assert hits[0]["content"] == "Acacia trees shade the grassland."
        assert hits[0]["metadata"]["chunk_index"] == 2
        assert hits[0]["score"] == pytest.approx(1.0, abs=1e-3)

    def test_insert_only(self, store: ChromaVectorStore) -> None:
        store.add_documents(CHUNKS)
        store.add_documents(CHUNKS)
        assert store.count() == 6

    def test_health_check(self, store: ChromaVectorStore) -> None:
        assert store.health_check() is True


def test_build_vector_store_memory(keyword_embeddings) -> None:
    config = Settings(_env_file=None, vector_store="memory")
    assert isinstance(build_vector_store(keyword_embeddings, config), InMemoryVectorStore)


def test_build_vector_store_chroma_uses_config(keyword_embeddings, tmp_path) -> None:
    config = Settings(
        _env_file=None,
        vector_store="chroma",
        chroma_path=str(tmp_path / "chroma"),
        chroma_collection="savannah",
    )

    store = build_vector_store(keyword_embeddings, config)

    assert isinstance(store, ChromaVectorStore)
    assert store.collection_name == "savannah"
    assert (tmp_path / "chroma").exists()


def test_build_vector_store_rejects_unknown(keyword_embeddings) -> None:
    with pytest.raises(ValueError):
        build_vector_store(keyword_embeddings, Settings(_env_file=None, vector_store="faiss"))
