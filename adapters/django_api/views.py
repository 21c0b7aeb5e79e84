"""
Shopfloor Django Adapter Views
==============================
Pass-through HTTP views over core/http_api handlers.
"""

from __future__ import annotations

import json
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from adapters.django_api.wiring import build_dependencies
from core.http_api.contracts import (
    SCREEN_BILLS,
    SCREEN_EXPENSES,
    SCREEN_MATERIALS,
    SCREEN_STOCK,
    SCREEN_WORKERS,
    AttendanceHttpRequest,
    RecordCreateHttpRequest,
    RecordUpdateHttpRequest,
    ScreenReadRequest,
)
from core.http_api.errors import (
    INVALID_REQUEST,
    METHOD_NOT_ALLOWED,
    error_response,
    http_status_for,
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


def _json_error(code: str, message: str, status: int = 400) -> JsonResponse:
    return JsonResponse(
        error_response(code=code, message=message, details={}),
        status=status,
    )


def _json_payload(payload: dict[str, Any]) -> JsonResponse:
    return JsonResponse(payload, status=http_status_for(payload))


def _parse_json_body(request: HttpRequest) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        parsed = json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object.")
    return parsed


def _method_not_allowed() -> JsonResponse:
    return _json_error(
        METHOD_NOT_ALLOWED,
        "Method not allowed for this endpoint.",
        status=405,
    )


# ══════════════════════════════════════════════════════════════
# DISPATCH
# ══════════════════════════════════════════════════════════════

def _dispatch_list(screen: str, request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    criteria = {key: request.GET.get(key) for key in request.GET}
    contract = ScreenReadRequest(screen=screen, criteria=criteria)
    return _json_payload(list_records(contract, build_dependencies()))


def _dispatch_create(screen: str, request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    try:
        body = _parse_json_body(request)
        contract = RecordCreateHttpRequest(screen=screen, values=body)
    except ValueError as exc:
        return _json_error(INVALID_REQUEST, str(exc), status=400)
    return _json_payload(post_record_create(contract, build_dependencies()))


def _dispatch_update(screen: str, request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    try:
        body = _parse_json_body(request)
        record_id = body.pop("record_id", None)
        if record_id is None:
            raise ValueError("record_id is required.")
        contract = RecordUpdateHttpRequest(
            screen=screen,
            record_id=str(record_id),
            values=body,
        )
    except ValueError as exc:
        return _json_error(INVALID_REQUEST, str(exc), status=400)
    return _json_payload(post_record_update(contract, build_dependencies()))


def _dispatch_attendance(handler, request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    try:
        body = _parse_json_body(request)
        worker_id = body.get("worker_id")
        if worker_id is None:
            raise ValueError("worker_id is required.")
        contract = AttendanceHttpRequest(
            worker_id=str(worker_id),
            days_worked=body.get("days_worked", 0),
            salary_paid=body.get("salary_paid", 0),
            advance=body.get("advance", 0),
        )
    except ValueError as exc:
        return _json_error(INVALID_REQUEST, str(exc), status=400)
    return _json_payload(handler(contract, build_dependencies()))


# ══════════════════════════════════════════════════════════════
# STOCK
# ══════════════════════════════════════════════════════════════

@csrf_exempt
def stock_list_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_list(SCREEN_STOCK, request)


@csrf_exempt
def stock_create_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_create(SCREEN_STOCK, request)


@csrf_exempt
def stock_update_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_update(SCREEN_STOCK, request)


# ══════════════════════════════════════════════════════════════
# WORKERS
# ══════════════════════════════════════════════════════════════

@csrf_exempt
def workers_list_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_list(SCREEN_WORKERS, request)


@csrf_exempt
def workers_create_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_create(SCREEN_WORKERS, request)


@csrf_exempt
def workers_update_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_update(SCREEN_WORKERS, request)


@csrf_exempt
def workers_attendance_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_attendance(post_attendance, request)


@csrf_exempt
def workers_attendance_preview_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_attendance(post_attendance_preview, request)


# ══════════════════════════════════════════════════════════════
# RAW MATERIALS
# ══════════════════════════════════════════════════════════════

@csrf_exempt
def materials_list_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_list(SCREEN_MATERIALS, request)


@csrf_exempt
def materials_create_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_create(SCREEN_MATERIALS, request)


@csrf_exempt
def materials_update_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_update(SCREEN_MATERIALS, request)


# ══════════════════════════════════════════════════════════════
# EXPENSES
# ══════════════════════════════════════════════════════════════

@csrf_exempt
def expenses_list_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_list(SCREEN_EXPENSES, request)


@csrf_exempt
def expenses_create_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_create(SCREEN_EXPENSES, request)


@csrf_exempt
def expenses_update_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_update(SCREEN_EXPENSES, request)


# ══════════════════════════════════════════════════════════════
# BILLS
# ══════════════════════════════════════════════════════════════

@csrf_exempt
def bills_list_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_list(SCREEN_BILLS, request)


@csrf_exempt
def bills_create_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_create(SCREEN_BILLS, request)


@csrf_exempt
def bills_update_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_update(SCREEN_BILLS, request)


@csrf_exempt
def bills_draft_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    return _json_payload(get_bill_draft(build_dependencies()))


# ══════════════════════════════════════════════════════════════
# CONFIGURATION
# ══════════════════════════════════════════════════════════════

@csrf_exempt
def choices_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    return _json_payload(get_choices(build_dependencies()))
