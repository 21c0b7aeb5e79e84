"""
Shopfloor HTTP API - Framework-Agnostic Handlers
================================================
Pure handler functions over contracts and injected dependencies.

Handlers never raise for domain failures: every RecordError is
mapped to an error envelope. Programming errors propagate.
"""

from __future__ import annotations

import logging
from typing import Any

from core.http_api.contracts import (
    SCREEN_MATERIALS,
    AttendanceHttpRequest,
    RecordCreateHttpRequest,
    RecordUpdateHttpRequest,
    ScreenReadRequest,
)
from core.http_api.errors import record_error_response, success_response
from core.records.errors import RecordError
from engines.billing.models import BillStatus

logger = logging.getLogger("shopfloor.http")


def _serialize(record) -> dict[str, Any]:
    return record.to_dict()


def _summary_for(screen: str, service, criteria: dict[str, Any]):
    # material totals always span the whole store
    if screen == SCREEN_MATERIALS:
        return service.summary()
    return service.summary(criteria)


def _run(call, *, operation: str) -> dict[str, Any]:
    try:
        data = call()
    except RecordError as exc:
        logger.info(f"{operation} failed: {type(exc).__name__}: {exc}")
        return record_error_response(exc)
    return success_response(data)


# ══════════════════════════════════════════════════════════════
# READS
# ══════════════════════════════════════════════════════════════

def list_records(request: ScreenReadRequest, dependencies) -> dict[str, Any]:
    service = dependencies.service_for(request.screen)

    def _call():
        records = service.records(request.criteria)
        summary = _summary_for(request.screen, service, request.criteria)
        return {
            "items": [_serialize(record) for record in records],
            "count": len(records),
            "summary": summary.to_dict(),
        }

    return _run(_call, operation=f"list {request.screen}")


def get_choices(dependencies) -> dict[str, Any]:
    choices = dependencies.config_store.get_config().choices()
    choices["bill_statuses"] = [status.value for status in BillStatus]
    return success_response(choices)


def get_bill_draft(dependencies) -> dict[str, Any]:
    draft = dependencies.bills.blank_draft()
    return success_response(draft.to_dict())


# ══════════════════════════════════════════════════════════════
# WRITES
# ══════════════════════════════════════════════════════════════

def post_record_create(request: RecordCreateHttpRequest, dependencies) -> dict[str, Any]:
    service = dependencies.service_for(request.screen)
    return _run(
        lambda: _serialize(service.create(request.values)),
        operation=f"create {request.screen}",
    )


def post_record_update(request: RecordUpdateHttpRequest, dependencies) -> dict[str, Any]:
    service = dependencies.service_for(request.screen)
    return _run(
        lambda: _serialize(service.update(request.record_id, request.values)),
        operation=f"update {request.screen}",
    )


def post_attendance_preview(request: AttendanceHttpRequest, dependencies) -> dict[str, Any]:
    return _run(
        lambda: dependencies.workers.preview_attendance(request.values()),
        operation="preview attendance",
    )


def post_attendance(request: AttendanceHttpRequest, dependencies) -> dict[str, Any]:
    return _run(
        lambda: _serialize(dependencies.workers.record_attendance(request.values())),
        operation="record attendance",
    )
