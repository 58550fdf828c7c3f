"""Retrieval-augmented question answering."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ollama_rag.chat.prompts import build_rag_prompt

if TYPE_CHECKING:
    from ollama_rag.chat.llm import Generator
    from ollama_rag.retrieval.retriever import SemanticRetriever

logger = logging.getLogger(__name__)


class RAGChatService:
    """One request → one retrieval → one generation.

    Failures in either step propagate unchanged.
    """

    def __init__(self, retriever: SemanticRetriever, generator: Generator) -> None:
        self._retriever = retriever
        self._generator = generator

    def answer(self, message: str) -> str:
        results = self._retriever.retrieve(message)
        messages = build_rag_prompt(message, results)
        answer = self._generator.generate(messages)
        logger.info("Answered %r using %d context chunk(s)", message, len(results))
        return answer
