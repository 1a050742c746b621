from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi import Depends
from fastapi.responses import JSONResponse

from llmplatform.core.settings import Settings
from llmplatform.core.settings import get_settings
from llmplatform.services import health as health_service


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health(settings: Settings = Depends(get_settings)) -> JSONResponse:
    # Liveness: process metrics plus placeholder dependency checks.
    try:
        report = health_service.build_health_report(settings)
    except Exception:
        logger.exception("Health check failed")
        failure = health_service.health_failure()
        return JSONResponse(status_code=500, content=failure.model_dump())

    return JSONResponse(status_code=200, content=report.model_dump())


@router.get("/ready")
def ready() -> JSONResponse:
    try:
        report = health_service.build_readiness_report()
    except Exception:
        logger.exception("Readiness check failed")
        failure = health_service.readiness_failure()
        return JSONResponse(status_code=503, content=failure.model_dump())

    return JSONResponse(status_code=200, content=report.model_dump())
