"""
Shopfloor HTTP API - Public API
===============================
"""

from core.http_api.contracts import (
    SCREENS,
    AttendanceHttpRequest,
    HttpApiErrorBody,
    HttpApiResponse,
    RecordCreateHttpRequest,
    RecordUpdateHttpRequest,
    ScreenReadRequest,
)
from core.http_api.dependencies import HttpApiDependencies
from core.http_api.errors import (
    error_response,
    http_status_for,
    map_record_error,
    record_error_response,
    success_response,
)
from core.http_api.handlers import (
    get_bill_draft,
    get_choices,
    list_records,
    post_attendance,
    post_attendance_preview,
    post_record_create,
    post_record_update,
)

__all__ = [
    "SCREENS",
    "ScreenReadRequest",
    "RecordCreateHttpRequest",
    "RecordUpdateHttpRequest",
    "AttendanceHttpRequest",
    "HttpApiErrorBody",
    "HttpApiResponse",
    "HttpApiDependencies",
    "error_response",
    "success_response",
    "map_record_error",
    "record_error_response",
    "http_status_for",
    "list_records",
    "get_choices",
    "get_bill_draft",
    "post_record_create",
    "post_record_update",
    "post_attendance_preview",
    "post_attendance",
]
