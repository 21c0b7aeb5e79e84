"""Shopfloor Django adapter tests (end-to-end through config.urls)."""

import json

import pytest

from adapters.django_api.wiring import reset_dependencies


@pytest.fixture(autouse=True)
def fresh_dependencies():
    reset_dependencies()
    yield
    reset_dependencies()


def _post(client, path, body):
    return client.post(path, data=json.dumps(body), content_type="application/json")


class TestDemoData:
    def test_every_screen_is_seeded(self, client):
        counts = {}
        for screen in ("stock", "workers", "materials", "expenses", "bills"):
            response = client.get(f"/v1/{screen}")
            assert response.status_code == 200
            counts[screen] = response.json()["data"]["count"]
        assert counts == {
            "stock": 2, "workers": 2, "materials": 2, "expenses": 3, "bills": 1,
        }

    def test_demo_bill_totals(self, client):
        bill = client.get("/v1/bills").json()["data"]["items"][0]
        assert bill["bill_number"] == "INV-001"
        assert bill["subtotal"] == 55000
        assert bill["gst_amount"] == 9900
        assert bill["total_amount"] == 64900

    def test_seed_can_be_disabled(self, client, settings):
        settings.SHOPFLOOR_SEED_DEMO_DATA = False
        reset_dependencies()
        assert client.get("/v1/stock").json()["data"]["count"] == 0


class TestListing:
    def test_search_query(self, client):
        response = client.get("/v1/workers", {"search": "priya"})
        data = response.json()["data"]
        assert [w["name"] for w in data["items"]] == ["Priya Sharma"]
        assert data["summary"]["headcount"] == 1

    def test_unknown_filter_is_400(self, client):
        response = client.get("/v1/stock", {"supplier": "ABC"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_FAILED"

    def test_wrong_method(self, client):
        response = client.post("/v1/stock")
        assert response.status_code == 405
        assert response.json()["error"]["code"] == "METHOD_NOT_ALLOWED"


class TestWrites:
    def test_create_expense(self, client):
        response = _post(client, "/v1/expenses/create", {
            "category": "Office Supplies",
            "description": "Printer paper",
            "amount": "350",
        })
        assert response.status_code == 200
        expense = response.json()["data"]
        assert expense["payment_method"] == "Cash"
        assert expense["amount"] == 350

    def test_update_stock_item(self, client):
        item = client.get("/v1/stock", {"search": "cotton"}).json()["data"]["items"][0]
        response = _post(client, "/v1/stock/update", {
            "record_id": item["record_id"],
            "quantity": "50",
        })
        assert response.status_code == 200
        updated = response.json()["data"]
        assert updated["record_id"] == item["record_id"]
        assert updated["low_stock"] is True

    def test_update_requires_record_id(self, client):
        response = _post(client, "/v1/stock/update", {"quantity": "50"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_REQUEST"

    def test_update_unknown_record(self, client):
        response = _post(client, "/v1/bills/update", {"record_id": "missing"})
        assert response.status_code == 404

    def test_invalid_json(self, client):
        response = client.post(
            "/v1/bills/create", data="{not json", content_type="application/json",
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_REQUEST"

    def test_nan_amounts_rejected(self, client):
        response = client.post(
            "/v1/materials/create",
            data=(
                '{"name": "Cotton Fabric", "supplier": "ABC Textiles",'
                ' "purchase_date": "2024-12-20", "quantity": 10, "unit": "meters",'
                ' "total_amount": NaN, "amount_paid": 5000, "category": "Fabric"}'
            ),
            content_type="application/json",
        )
        assert response.status_code == 400
        assert response.json()["error"]["details"]["fields"] == ["total_amount"]
        assert client.get("/v1/materials").json()["data"]["count"] == 2

    def test_create_bill_with_items(self, client):
        draft = client.get("/v1/bills/draft").json()["data"]
        response = _post(client, "/v1/bills/create", {
            "bill_number": draft["bill_number"],
            "customer_name": "XYZ Retail",
            "customer_address": "Pune",
            "customer_gstn": "27XYZAB1234C1Z9",
            "due_date": "2025-02-01",
            "items": [{"name": "Cotton Shirts", "quantity": 100, "unit": "pieces", "rate": 450}],
        })
        assert response.status_code == 200
        bill = response.json()["data"]
        assert bill["total_amount"] == 53100
        assert bill["status"] == "Draft"

    def test_bill_item_errors(self, client):
        response = _post(client, "/v1/bills/create", {
            "customer_name": "XYZ Retail",
            "customer_address": "Pune",
            "customer_gstn": "27XYZAB1234C1Z9",
            "due_date": "2025-02-01",
            "items": [{"name": "", "quantity": 1, "unit": "pieces", "rate": 10}],
        })
        assert response.status_code == 400
        assert response.json()["error"]["details"]["fields"] == ["items[0].name"]


class TestAttendance:
    def test_record_attendance(self, client):
        worker = client.get("/v1/workers", {"search": "rajesh"}).json()["data"]["items"][0]
        preview = _post(client, "/v1/workers/attendance/preview", {
            "worker_id": worker["record_id"], "days_worked": 10, "salary_paid": 1000,
        })
        assert preview.json()["data"]["remaining_salary"] == 4000

        response = _post(client, "/v1/workers/attendance", {
            "worker_id": worker["record_id"], "days_worked": 24,
            "salary_paid": 9000, "advance": 0,
        })
        assert response.status_code == 200
        assert response.json()["data"]["remaining_salary"] == 3000

    def test_unknown_worker(self, client):
        response = _post(client, "/v1/workers/attendance", {"worker_id": "ghost"})
        assert response.status_code == 404


class TestChoices:
    def test_choices(self, client):
        data = client.get("/v1/choices").json()["data"]
        assert [slab["rate"] for slab in data["gst_slabs"]] == [0, 5, 12, 18, 28]
        assert "Overdue" in data["bill_statuses"]
