"""LLM initialisation — single place to configure the Ollama backend."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from langchain_ollama import ChatOllama

from ollama_rag.config import settings

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel
    from langchain_core.messages import BaseMessage

logger = logging.getLogger(__name__)


class Generator(Protocol):
    """Anything that turns a prompt into answer text."""

    def generate(self, messages: list[BaseMessage]) -> str: ...


def get_llm(
    temperature: float = settings.llm_temperature,
    *,
    model: str = settings.ollama_model,
    base_url: str = settings.ollama_base_url,
) -> ChatOllama:
    """Return the chat model served by the local Ollama instance."""
    logger.info("Using Ollama model %r at %s", model, base_url)
    return ChatOllama(model=model, base_url=base_url, temperature=temperature)


class ChatModelGenerator:
    """Adapt a LangChain chat model to the :class:`Generator` protocol."""

    def __init__(self, llm: BaseChatModel | None = None) -> None:
        self._llm = llm if llm is not None else get_llm()

    def generate(self, messages: list[BaseMessage]) -> str:
        response = self._llm.invoke(messages)
        return response.content if isinstance(response.content, str) else str(response.content)
