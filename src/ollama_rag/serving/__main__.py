"""Run the API with uvicorn: ``python -m ollama_rag.serving``."""

from __future__ import annotations

import uvicorn

from ollama_rag.config import settings
from ollama_rag.logging_config import setup_logging


def main() -> None:
    setup_logging(settings.log_level)
    uvicorn.run(
        "ollama_rag.serving.app:app",
        host=settings.serve_host,
        port=settings.serve_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
