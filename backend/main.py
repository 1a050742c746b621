from __future__ import annotations

# ASGI entrypoint: `uvicorn main:app` from this directory.
from llmplatform.main import app


__all__ = ["app"]
