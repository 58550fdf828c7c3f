"""Prompt templates for question answering over retrieved context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from langchain_core.messages import HumanMessage

if TYPE_CHECKING:
    from langchain_core.messages import BaseMessage

    from ollama_rag.retrieval.models import RetrievalResult

CONTEXT_DELIMITER = "---------------------"

QUESTION_ANSWER_ADVICE = """\
Context information is below, surrounded by {delimiter}

{delimiter}
{context}
{delimiter}

Given the context and provided history information and not prior knowledge,
reply to the user comment. If the answer is not in the context, inform
the user that you can't answer the question.
"""


def format_context(results: list[RetrievalResult]) -> str:
    """Join retrieved chunks, best match first, one per line."""
    return "\n".join(result.content for result in results)


def build_rag_prompt(query: str, results: list[RetrievalResult]) -> list[BaseMessage]:
    """Assemble the augmented prompt: the user message followed by the context advice.

    Parameters
    ----------
    query:
        The user question, passed through unchanged.
    results:
        Retrieved context chunks.

    Returns
    -------
    list[BaseMessage]
        A list of LangChain message objects ready for ``.invoke()``.
    """
    advice = QUESTION_ANSWER_ADVICE.format(
        delimiter=CONTEXT_DELIMITER,
        context=format_context(results),
    )
    return [HumanMessage(content=f"{query}\n\n{advice}")]
