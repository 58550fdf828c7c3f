"""
Serving — FastAPI application exposing the RAG chat endpoint.

The document is ingested during application startup; ``GET /chat/rag``
answers questions once ingestion has completed.
"""
