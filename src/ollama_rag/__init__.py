"""Single-document retrieval-augmented generation served over HTTP with Ollama."""

__version__ = "0.1.0"
