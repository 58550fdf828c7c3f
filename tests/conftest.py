"""Shared pytest configuration and fixtures."""

from __future__ import annotations

import math
import re
import zlib
from typing import Any

import pytest
from langchain_core.embeddings import Embeddings

from ollama_rag.ingestion.chunker import TokenChunker
from ollama_rag.retrieval.base import VectorStoreBase


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


# ── Tokenizer / embedding fakes ────────────────────────────────────────


def char_encode(text: str) -> list[int]:
    """One token per character — keeps token arithmetic obvious in tests."""
    return [ord(c) for c in text]


def char_decode(tokens: list[int]) -> str:
    return "".join(chr(t) for t in tokens)


def make_chunker(chunk_size: int = 100, **kwargs: Any) -> TokenChunker:
    kwargs.setdefault("min_chunk_size_chars", 20)
    return TokenChunker(chunk_size, encode=char_encode, decode=char_decode, **kwargs)


class KeywordEmbeddings(Embeddings):
    """Bag-of-words embedding: texts sharing words are similar."""

    def __init__(self, size: int = 256) -> None:
        self.size = size

    def _embed(self, text: str) -> list[float]:
        vector = [0.0] * self.size
        for word in re.findall(r"[a-z]+", text.lower()):
            vector[zlib.crc32(word.encode()) % self.size] += 1.0
        norm = math.sqrt(sum(v * v for v in vector)) or 1.0
        return [v / norm for v in vector]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self._embed(t) for t in texts]

    def embed_query(self, text: str) -> list[float]:
        return self._embed(text)


class FakeVectorStore(VectorStoreBase):
    """In-memory fake that records what was added and returns canned hits."""

    def __init__(self, hits: list[dict[str, Any]] | None = None) -> None:
        super().__init__("test-collection")
        self._hits: list[dict[str, Any]] = hits or []
        self.added: list[Any] = []
        self.last_k: int | None = None

    def add_documents(self, documents: list[Any]) -> list[str]:
        start = len(self.added)
        self.added.extend(documents)
        return [f"id-{i}" for i in range(start, len(self.added))]

    def similarity_search_by_text(self, query: str, *, k: int = 4) -> list[dict[str, Any]]:
        self.last_k = k
        return self._hits[:k]

    def count(self) -> int:
        return len(self.added)


@pytest.fixture()
def chunker() -> TokenChunker:
    return make_chunker()


@pytest.fixture()
def keyword_embeddings() -> KeywordEmbeddings:
    return KeywordEmbeddings()


@pytest.fixture()
def fake_store() -> FakeVectorStore:
    return FakeVectorStore()
