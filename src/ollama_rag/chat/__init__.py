"""
Chat — prompt construction and the locally hosted language model.

Public API
----------
- :class:`RAGChatService` — answer a question from retrieved context.
- :class:`ChatModelGenerator` — ``generate(messages) -> str`` over a chat model.
- :func:`get_llm` — the configured Ollama chat model.
"""

from ollama_rag.chat.llm import ChatModelGenerator, get_llm
from ollama_rag.chat.service import RAGChatService

__all__ = ["ChatModelGenerator", "RAGChatService", "get_llm"]
