"""Domain models for retrieval results."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Citation(BaseModel):
    """Provenance record linking a retrieved chunk back to the ingested document.

    Attributes
    ----------
    document_id:
        The vector-store ID of the chunk (``None`` when unknown).
    source:
        Path of the document the chunk came from.
    chunk_index:
        Ordinal position of the chunk within the document.
    score:
        Similarity score returned by the vector store.
    metadata:
        Remaining metadata stored with the chunk.
    """

    document_id: str | None = None
    source: str = "unknown"
    chunk_index: int | None = None
    score: float | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class RetrievalResult(BaseModel):
    """A single retrieved passage together with its citation."""

    content: str
    citation: Citation
