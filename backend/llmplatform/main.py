from __future__ import annotations

import logging
import uuid

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from llmplatform.api.router import api_router
from llmplatform.core.errors import make_error_payload
from llmplatform.core.errors import make_method_not_allowed_payload
from llmplatform.core.logging import setup_logging
from llmplatform.core.settings import get_settings


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings)

    app = FastAPI(title=settings.app_name, version=settings.version)

    def _with_trace_id_header(
        headers: dict[str, str] | None, trace_id: str | None
    ) -> dict[str, str] | None:
        """Return headers merged with X-Trace-Id when trace_id is present."""

        if not trace_id:
            return headers
        merged: dict[str, str] = dict(headers or {})
        merged["X-Trace-Id"] = trace_id
        return merged

    @app.middleware("http")
    async def _trace_id_middleware(request, call_next):
        trace_id = request.headers.get("X-Trace-Id") or str(uuid.uuid4())
        request.state.trace_id = trace_id
        response = await call_next(request)
        response.headers["X-Trace-Id"] = trace_id
        return response

    @app.exception_handler(StarletteHTTPException)
    async def _http_error_handler(request, exc: StarletteHTTPException):
        trace_id = getattr(request.state, "trace_id", None)
        headers = _with_trace_id_header(getattr(exc, "headers", None), trace_id)

        # Method mismatches get the fixed rejection body, not the envelope.
        if exc.status_code == 405:
            return JSONResponse(
                status_code=405,
                headers=headers,
                content=make_method_not_allowed_payload(),
            )

        return JSONResponse(
            status_code=exc.status_code,
            headers=headers,
            content=make_error_payload(
                code="HTTP_ERROR",
                message=exc.detail if isinstance(exc.detail, str) else "HTTP error",
                trace_id=trace_id,
                details=None,
            ),
        )

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request, exc: Exception):
        trace_id = getattr(request.state, "trace_id", None)
        method = getattr(request, "method", None)
        path = getattr(getattr(request, "url", None), "path", None)

        headers = None
        if isinstance(method, str) and isinstance(path, str) and method and path:
            headers = {"X-Error-Path": f"{method} {path}"}
        headers = _with_trace_id_header(headers, trace_id)
        logger.error(
            "Unhandled exception (trace_id=%s method=%s path=%s)",
            trace_id,
            method,
            path,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return JSONResponse(
            status_code=500,
            headers=headers,
            content=make_error_payload(
                code="INTERNAL_ERROR",
                message="Internal error",
                trace_id=trace_id,
                details=None,
            ),
        )

    app.include_router(api_router)

    logger.info(
        "Application configured",
        extra={"environment": settings.environment, "version": settings.version},
    )

    return app


app = create_app()
