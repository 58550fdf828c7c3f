"""Token-bounded text chunking.

:class:`TokenChunker` cuts text into windows of at most ``chunk_size``
tokens, then pulls each window back to its last sentence break so chunks
end on whole sentences wherever the window is long enough to allow it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from langchain_text_splitters import TextSplitter

from ollama_rag.config import settings

if TYPE_CHECKING:
    from langchain_core.documents import Document

logger = logging.getLogger(__name__)

SENTENCE_BREAKS = (".", "?", "!", "\n")


class TokenChunker(TextSplitter):
    """Split text along token-count boundaries.

    Parameters
    ----------
    chunk_size:
        Maximum number of tokens per chunk.
    min_chunk_size_chars:
        A window is only cut back to its last sentence break when that break
        lies beyond this many characters.
    min_chunk_length_to_embed:
        Chunks of this many characters or fewer are dropped.
    max_num_chunks:
        Upper bound on the number of windows; any remaining text becomes one
        final chunk.
    keep_separator:
        Keep newlines inside chunks. When ``False`` they are replaced by spaces.
    encoding_name:
        tiktoken encoding used when *encode* / *decode* are not supplied.
    encode, decode:
        Optional tokenizer callables (text → token ids, token ids → text).
    """

    def __init__(
        self,
        chunk_size: int = settings.chunk_size,
        *,
        min_chunk_size_chars: int = settings.min_chunk_size_chars,
        min_chunk_length_to_embed: int = settings.min_chunk_length_to_embed,
        max_num_chunks: int = settings.max_num_chunks,
        keep_separator: bool = settings.keep_separator,
        encoding_name: str = settings.token_encoding,
        encode: Callable[[str], list[int]] | None = None,
        decode: Callable[[list[int]], str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(chunk_size=chunk_size, chunk_overlap=0, keep_separator=keep_separator, **kwargs)
        if (encode is None) != (decode is None):
            raise ValueError("encode and decode must be supplied together")
        if encode is None:
            import tiktoken

            encoding = tiktoken.get_encoding(encoding_name)
            encode = encoding.encode_ordinary
            decode = encoding.decode
        self._encode = encode
        self._decode = decode
        self.min_chunk_size_chars = min_chunk_size_chars
        self.min_chunk_length_to_embed = min_chunk_length_to_embed
        self.max_num_chunks = max_num_chunks

    def split_text(self, text: str) -> list[str]:
        if not text or not text.strip():
            return []

        tokens = self._encode(text)
        chunks: list[str] = []
        windows = 0

        while tokens and windows < self.max_num_chunks:
            window = tokens[: self._chunk_size]
            chunk_text = self._decode(window)
            if not chunk_text.strip():
                tokens = tokens[len(window):]
                continue

            last_break = max(chunk_text.rfind(mark) for mark in SENTENCE_BREAKS)
            if last_break != -1 and last_break > self.min_chunk_size_chars:
                chunk_text = chunk_text[: last_break + 1]

            cleaned = chunk_text.strip() if self._keep_separator else chunk_text.replace("\n", " ").strip()
            if len(cleaned) > self.min_chunk_length_to_embed:
                chunks.append(cleaned)

            consumed = max(1, min(len(window), len(self._encode(chunk_text))))
            tokens = tokens[consumed:]
            windows += 1

        if tokens:
            tail = self._decode(tokens).replace("\n", " ").strip()
            if len(tail) > self.min_chunk_length_to_embed:
                chunks.append(tail)

        if not chunks:
            # Every piece fell under the embed minimum; keep the text whole.
            chunks.append(text.strip() if self._keep_separator else text.replace("\n", " ").strip())

        return chunks


def chunk_documents(
    documents: list[Document],
    splitter: TextSplitter | None = None,
) -> list[Document]:
    """Split *documents* into chunks ready for embedding.

    Each chunk inherits its parent's metadata and gains ``chunk_index`` and
    ``chunk_count`` counted per source document.
    """
    splitter = splitter or TokenChunker()
    chunks: list[Document] = []
    for document in documents:
        pieces = splitter.split_documents([document])
        for index, piece in enumerate(pieces):
            piece.metadata["chunk_index"] = index
            piece.metadata["chunk_count"] = len(pieces)
        chunks.extend(pieces)
    logger.debug("Split %d document(s) into %d chunk(s)", len(documents), len(chunks))
    return chunks
