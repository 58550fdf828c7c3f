"""Abstract base class for vector-store backends.

Adding a new backend only requires subclassing :class:`VectorStoreBase`
and implementing the abstract methods.  The ingestion runner and the
retriever are backend-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from langchain_core.documents import Document


class VectorStoreBase(ABC):
    """Backend-agnostic vector-store interface.

    Parameters
    ----------
    collection_name:
        Logical name of the collection / index / namespace.
    """

    def __init__(self, collection_name: str) -> None:
        self.collection_name = collection_name

    @abstractmethod
    def add_documents(self, documents: list[Document]) -> list[str]:
        """Embed and persist *documents* in one batch; return their new ids.

        Insert-only: every call creates fresh entries, even for content that
        is already stored.
        """
        ...

    @abstractmethod
    def similarity_search_by_text(self, query: str, *, k: int = 4) -> list[dict[str, Any]]:
        """Return the top-*k* entries most similar to *query*.

        Each result dict **must** contain at least:

        * ``"id"`` – chunk identifier
        * ``"content"`` – the textual content
        * ``"score"`` – similarity score (higher = more similar)
        * ``"metadata"`` – associated metadata dict
        """
        ...

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored entries."""
        ...

    def health_check(self) -> bool:
        """Return ``True`` when the backend is reachable and ready."""
        return True
