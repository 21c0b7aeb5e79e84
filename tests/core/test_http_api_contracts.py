from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.config.rules import InMemoryConfigStore
from core.http_api.contracts import (
    AttendanceHttpRequest,
    HttpApiResponse,
    RecordCreateHttpRequest,
    RecordUpdateHttpRequest,
    ScreenReadRequest,
)
from core.http_api.dependencies import HttpApiDependencies
from core.http_api.errors import http_status_for, map_record_error
from core.http_api.handlers import (
    get_bill_draft,
    get_choices,
    list_records,
    post_attendance,
    post_attendance_preview,
    post_record_create,
    post_record_update,
)
from core.records.errors import InvariantViolation, RecordNotFound
from core.records.identity import SequentialIdProvider
from core.time.clock import FixedClock
from engines.billing.services import BillingService
from engines.cash.services import ExpenseService
from engines.hr.services import WorkerService
from engines.inventory.services import StockService
from engines.procurement.services import RawMaterialService


FIXED_NOW = datetime(2024, 12, 26, 9, 30, tzinfo=timezone.utc)


def _dependencies() -> HttpApiDependencies:
    clock = FixedClock(FIXED_NOW)
    config_store = InMemoryConfigStore()
    return HttpApiDependencies(
        stock=StockService(
            clock=clock, config_store=config_store,
            id_provider=SequentialIdProvider(prefix="stock-"),
        ),
        workers=WorkerService(id_provider=SequentialIdProvider(prefix="worker-")),
        materials=RawMaterialService(
            config_store=config_store,
            id_provider=SequentialIdProvider(prefix="material-"),
        ),
        expenses=ExpenseService(
            clock=clock, config_store=config_store,
            id_provider=SequentialIdProvider(prefix="expense-"),
        ),
        bills=BillingService(
            clock=clock, config_store=config_store,
            id_provider=SequentialIdProvider(prefix="bill-"),
            item_id_provider=SequentialIdProvider(prefix="item-"),
        ),
        config_store=config_store,
        clock=clock,
    )


WORKER_VALUES = {
    "name": "Rajesh Kumar",
    "position": "Machine Operator",
    "daily_wage": 500,
    "phone_number": "9876543210",
    "join_date": "2024-01-15",
}


def test_contracts_reject_unknown_screen():
    with pytest.raises(ValueError, match="screen must be one of"):
        ScreenReadRequest(screen="payroll")
    with pytest.raises(ValueError):
        RecordUpdateHttpRequest(screen="stock", record_id="", values={})
    with pytest.raises(ValueError):
        AttendanceHttpRequest(worker_id="")


def test_error_response_requires_error_body():
    with pytest.raises(ValueError):
        HttpApiResponse(ok=False).to_dict()


def test_create_then_list_with_summary():
    dependencies = _dependencies()
    created = post_record_create(
        RecordCreateHttpRequest(screen="stock", values={
            "name": "Raw Cotton", "category": "Materials", "quantity": "500",
            "unit": "kg", "price": "120", "min_stock": "100",
        }),
        dependencies,
    )
    assert created["ok"] is True
    assert created["data"]["record_id"] == "stock-1"
    assert created["data"]["last_updated"] == "2024-12-26"

    listed = list_records(ScreenReadRequest(screen="stock"), dependencies)
    assert listed["ok"] is True
    assert listed["data"]["count"] == 1
    assert listed["data"]["summary"]["total_value"] == 60000


def test_validation_failure_maps_to_400():
    dependencies = _dependencies()
    payload = post_record_create(
        RecordCreateHttpRequest(screen="workers", values={"daily_wage": "x"}),
        dependencies,
    )
    assert payload["ok"] is False
    assert payload["error"]["code"] == "VALIDATION_FAILED"
    assert payload["error"]["details"]["fields"] == ["daily_wage"]
    assert http_status_for(payload) == 400


def test_update_unknown_record_maps_to_404():
    dependencies = _dependencies()
    payload = post_record_update(
        RecordUpdateHttpRequest(screen="bills", record_id="bill-9", values={}),
        dependencies,
    )
    assert payload["error"]["code"] == "NOT_FOUND"
    assert payload["error"]["details"] == {"entity": "Bill", "record_id": "bill-9"}
    assert http_status_for(payload) == 404


def test_unknown_filter_is_rejected():
    dependencies = _dependencies()
    payload = list_records(
        ScreenReadRequest(screen="expenses", criteria={"colour": "red"}),
        dependencies,
    )
    assert payload["error"]["code"] == "VALIDATION_FAILED"
    assert payload["error"]["details"]["fields"] == ["colour"]


def test_materials_summary_ignores_filter():
    dependencies = _dependencies()
    post_record_create(
        RecordCreateHttpRequest(screen="materials", values={
            "name": "Cotton Fabric", "supplier": "ABC Textiles",
            "purchase_date": "2024-12-20", "quantity": 1000, "unit": "meters",
            "total_amount": 50000, "amount_paid": 30000, "category": "Fabric",
        }),
        dependencies,
    )
    payload = list_records(
        ScreenReadRequest(screen="materials", criteria={"category": "Thread"}),
        dependencies,
    )
    assert payload["data"]["count"] == 0
    assert payload["data"]["summary"]["total_pending"] == 20000


def test_attendance_flow():
    dependencies = _dependencies()
    worker = post_record_create(
        RecordCreateHttpRequest(screen="workers", values=WORKER_VALUES),
        dependencies,
    )["data"]

    request = AttendanceHttpRequest(
        worker_id=worker["record_id"], days_worked="22",
        salary_paid="8000", advance="2000",
    )
    preview = post_attendance_preview(request, dependencies)
    assert preview["data"]["remaining_salary"] == 3000

    recorded = post_attendance(request, dependencies)
    assert recorded["data"]["total_salary_earned"] == 11000
    assert recorded["data"]["remaining_salary"] == 3000

    missing = post_attendance(AttendanceHttpRequest(worker_id="worker-99"), dependencies)
    assert missing["error"]["code"] == "NOT_FOUND"


def test_bill_draft_and_choices():
    dependencies = _dependencies()
    draft = get_bill_draft(dependencies)["data"]
    assert draft["bill_number"].startswith("INV-")
    assert draft["date"] == "2024-12-26"
    assert draft["gst_rate"] == 18
    assert draft["status"] == "Draft"
    assert len(draft["items"]) == 1

    choices = get_choices(dependencies)["data"]
    assert choices["bill_statuses"] == ["Draft", "Sent", "Paid", "Overdue"]
    assert "UPI" in choices["payment_methods"]


def test_map_record_error_invariant():
    body = map_record_error(InvariantViolation("BILL_HAS_LINE_ITEMS", "keep one"))
    assert body.code == "INVARIANT_VIOLATION"
    assert body.details == {"invariant": "BILL_HAS_LINE_ITEMS"}

    body = map_record_error(RecordNotFound("Worker", "w-1"))
    assert body.code == "NOT_FOUND"
