"""Document loaders — thin wrappers around LangChain document loaders."""

from __future__ import annotations

import logging
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader, TextLoader
from langchain_core.documents import Document

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


def load_pdf(path: str | Path) -> list[Document]:
    """Load a single PDF file, one ``Document`` per page."""
    return PyPDFLoader(str(path)).load()


def load_text(path: str | Path) -> list[Document]:
    """Load a plain-text or Markdown file as a single ``Document``."""
    return TextLoader(str(path), encoding="utf-8").load()


_LOADERS = {
    ".pdf": load_pdf,
    ".txt": load_text,
    ".md": load_text,
}


def load_document(path: str | Path) -> Document:
    """Read *path* and return its extracted plain text as one ``Document``.

    Pages produced by the underlying loader are joined in order, so the
    splitter sees the document as a single continuous text.

    Raises
    ------
    FileNotFoundError
        When *path* does not exist.
    ValueError
        When the file extension has no registered loader.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Document not found: {path}")

    loader = _LOADERS.get(path.suffix.lower())
    if loader is None:
        raise ValueError(f"Unsupported document type: {path.suffix!r}")

    pages = loader(path)
    logger.debug("Loaded %d page(s) from %s", len(pages), path)
    text = PAGE_SEPARATOR.join(page.page_content for page in pages)
    return Document(
        page_content=text,
        metadata={"source": str(path), "page_count": len(pages)},
    )
