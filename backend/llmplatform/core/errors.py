from __future__ import annotations

from typing import Any


METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"


def make_error_payload(
    *, code: str, message: str, trace_id: str | None, details: Any | None
) -> dict[str, Any]:
    return {
        "code": code,
        "message": message,
        "details": details,
        "trace_id": trace_id,
    }


def make_method_not_allowed_payload() -> dict[str, str]:
    # Fixed rejection body shared by every endpoint.
    return {"message": METHOD_NOT_ALLOWED_MESSAGE}
