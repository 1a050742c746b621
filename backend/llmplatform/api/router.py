from __future__ import annotations

from fastapi import APIRouter

from llmplatform.api.health import router as health_router
from llmplatform.api.pages import router as pages_router


api_router = APIRouter()
api_router.include_router(pages_router)
api_router.include_router(health_router)
