"""Ingestion runner — populate the vector store from the fixed document once."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ollama_rag.ingestion.chunker import chunk_documents
from ollama_rag.ingestion.loader import load_document

if TYPE_CHECKING:
    from langchain_text_splitters import TextSplitter

    from ollama_rag.retrieval.base import VectorStoreBase

logger = logging.getLogger(__name__)


class IngestionError(RuntimeError):
    """Raised when the document cannot be turned into stored chunks."""


class IngestionRunner:
    """Read → split → store, executed once before queries are served.

    Parameters
    ----------
    store:
        Vector store receiving the chunks.  The same handle is shared with
        the query side.
    document_path:
        The document to ingest.
    splitter:
        Text splitter; defaults to :class:`~ollama_rag.ingestion.chunker.TokenChunker`.
    """

    def __init__(
        self,
        store: VectorStoreBase,
        document_path: str | Path,
        splitter: TextSplitter | None = None,
    ) -> None:
        self.store = store
        self.document_path = Path(document_path)
        self._splitter = splitter
        self.ready = False
        self.chunk_ids: list[str] = []

    def run(self) -> list[str]:
        """Ingest the document and return the ids of the stored chunks.

        Every failure propagates to the caller; nothing is retried and a
        partially written batch is not rolled back.
        """
        try:
            logger.info("Reading document %s", self.document_path)
            document = load_document(self.document_path)

            if not document.page_content.strip():
                raise IngestionError(f"No text could be extracted from {self.document_path}")

            logger.info("Splitting document (%d characters)", len(document.page_content))
            chunks = chunk_documents([document], self._splitter)
            if not chunks:
                raise IngestionError(f"Splitting {self.document_path} produced no chunks")

            ids = self.store.add_documents(chunks)
        except Exception:
            logger.exception("Ingestion of %s failed", self.document_path)
            raise

        self.chunk_ids.extend(ids)
        self.ready = True
        logger.info("Document read and split: %d chunk(s) stored", len(ids))
        return ids
