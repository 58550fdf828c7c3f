"""FastAPI application exposing retrieval-augmented chat as a REST API."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from ollama_rag import __version__
from ollama_rag.chat import ChatModelGenerator, RAGChatService, get_llm
from ollama_rag.config import Settings, settings
from ollama_rag.ingestion.chunker import TokenChunker
from ollama_rag.ingestion.embedder import get_embedding_function
from ollama_rag.ingestion.runner import IngestionRunner
from ollama_rag.retrieval import SemanticRetriever, build_vector_store

logger = logging.getLogger(__name__)

NOT_READY_DETAIL = "Document ingestion has not completed"

router = APIRouter()


def build_components(config: Settings = settings) -> tuple[IngestionRunner, RAGChatService]:
    """Wire the runner and chat service around one shared vector store."""
    embedding = get_embedding_function(
        config.embedding_provider,
        config.embedding_model,
        base_url=config.ollama_base_url,
    )
    store = build_vector_store(embedding, config)
    splitter = TokenChunker(
        config.chunk_size,
        min_chunk_size_chars=config.min_chunk_size_chars,
        min_chunk_length_to_embed=config.min_chunk_length_to_embed,
        max_num_chunks=config.max_num_chunks,
        keep_separator=config.keep_separator,
        encoding_name=config.token_encoding,
    )
    runner = IngestionRunner(store, config.document_path, splitter)
    llm = get_llm(
        config.llm_temperature,
        model=config.ollama_model,
        base_url=config.ollama_base_url,
    )
    retriever = SemanticRetriever(
        store,
        default_k=config.top_k,
        score_threshold=config.similarity_threshold,
    )
    return runner, RAGChatService(retriever, ChatModelGenerator(llm))


def create_app(
    runner: IngestionRunner | None = None,
    service: RAGChatService | None = None,
) -> FastAPI:
    """Build the application.

    When *runner* and *service* are omitted they are built from settings at
    startup.  Ingestion runs inside the lifespan, so a failure aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app.state.runner is None or app.state.service is None:
            app.state.runner, app.state.service = build_components()
        app.state.runner.run()
        yield

    app = FastAPI(
        title="Ollama RAG API",
        version=__version__,
        description="Answers questions about a single ingested document.",
        lifespan=lifespan,
    )
    app.state.runner = runner
    app.state.service = service
    app.include_router(router)
    return app


# ── Dependencies ──────────────────────────────────────────────────────
def _is_ready(request: Request) -> bool:
    runner: IngestionRunner | None = request.app.state.runner
    return runner is not None and runner.ready


def require_service(request: Request) -> RAGChatService:
    """Resolve the chat service, refusing with 503 until ingestion is done."""
    if not _is_ready(request):
        raise HTTPException(status_code=503, detail=NOT_READY_DETAIL)
    return request.app.state.service


# ── Routes ────────────────────────────────────────────────────────────
@router.get("/health")
def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@router.get("/ready")
def ready(request: Request) -> JSONResponse:
    """Readiness probe — 200 once the document is ingested and the store is reachable."""
    runner: IngestionRunner | None = request.app.state.runner
    if runner is None:
        return JSONResponse(status_code=503, content={"ready": False, "documents": 0})

    store_healthy = runner.store.health_check()
    is_ready = runner.ready and store_healthy
    return JSONResponse(
        status_code=200 if is_ready else 503,
        content={
            "ready": is_ready,
            "store_healthy": store_healthy,
            "documents": runner.store.count() if store_healthy else 0,
        },
    )


@router.get("/chat/rag", response_class=PlainTextResponse)
def rag(message: str, service: RAGChatService = Depends(require_service)) -> str:
    """Answer *message* from the ingested document."""
    return service.answer(message)


app = create_app()
