"""
Shopfloor HTTP API - Error Mapping
==================================
Stable transport error mapping for record errors and bad requests.

    ValidationError    -> 400 VALIDATION_FAILED (details.fields, details.rejections)
    RecordNotFound     -> 404 NOT_FOUND
    InvariantViolation -> 409 INVARIANT_VIOLATION
    malformed input    -> 400 INVALID_REQUEST
    wrong method       -> 405 METHOD_NOT_ALLOWED
"""

from __future__ import annotations

from typing import Any, Optional

from core.http_api.contracts import HttpApiErrorBody, HttpApiResponse
from core.records.errors import (
    InvariantViolation,
    RecordError,
    RecordNotFound,
    ValidationError,
)

VALIDATION_FAILED = "VALIDATION_FAILED"
NOT_FOUND = "NOT_FOUND"
INVARIANT_VIOLATION = "INVARIANT_VIOLATION"
INVALID_REQUEST = "INVALID_REQUEST"
METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

HTTP_STATUS_BY_CODE = {
    VALIDATION_FAILED: 400,
    INVALID_REQUEST: 400,
    NOT_FOUND: 404,
    METHOD_NOT_ALLOWED: 405,
    INVARIANT_VIOLATION: 409,
}


def error_response(
    *,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return HttpApiResponse(
        ok=False,
        error=HttpApiErrorBody(
            code=code,
            message=message,
            details=details or {},
        ),
    ).to_dict()


def success_response(data: Any) -> dict[str, Any]:
    return HttpApiResponse(ok=True, data=data).to_dict()


def map_record_error(exc: RecordError) -> HttpApiErrorBody:
    if isinstance(exc, ValidationError):
        return HttpApiErrorBody(
            code=VALIDATION_FAILED,
            message=str(exc),
            details=exc.to_dict(),
        )
    if isinstance(exc, RecordNotFound):
        return HttpApiErrorBody(
            code=NOT_FOUND,
            message=str(exc),
            details={"entity": exc.entity, "record_id": exc.record_id},
        )
    if isinstance(exc, InvariantViolation):
        return HttpApiErrorBody(
            code=INVARIANT_VIOLATION,
            message=str(exc),
            details={"invariant": exc.invariant},
        )
    raise TypeError(f"unmapped record error: {type(exc).__name__}")


def record_error_response(exc: RecordError) -> dict[str, Any]:
    mapped = map_record_error(exc)
    return error_response(
        code=mapped.code,
        message=mapped.message,
        details=mapped.details,
    )


def http_status_for(payload: dict[str, Any]) -> int:
    if payload.get("ok"):
        return 200
    code = payload.get("error", {}).get("code")
    return HTTP_STATUS_BY_CODE.get(code, 400)
