"""
Ingestion — document loading, token-bounded chunking, and embedding into the
vector store.

The :class:`~ollama_rag.ingestion.runner.IngestionRunner` executes once at
process startup, before the query endpoint reports ready.
"""
