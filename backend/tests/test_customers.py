from fastapi.testclient import TestClient

from repairdesk.main import app
from repairdesk.models.transaction import TransactionType
from repairdesk.services.repair_service import RepairService
from repairdesk.services.transaction_service import TransactionService

client = TestClient(app)


def _create(**overrides):
    payload = {"name": "Jane Doe", "phone": "555-0100", "email": "jane@example.com", "address": "1 Main St"}
    payload.update(overrides)
    res = client.post("/api/customers", json=payload)
    assert res.status_code == 200, res.text
    return res.json()


def test_create_and_list_customers():
    c = _create()
    assert c["id"] > 0
    assert c["email"] == "jane@example.com"
    _create(name="Walk-in", phone=None, email=None, address=None)

    names = [it["name"] for it in client.get("/api/customers").json()]
    assert set(names) == {"Jane Doe", "Walk-in"}


def test_list_is_empty_array_when_no_rows():
    res = client.get("/api/customers")
    assert res.status_code == 200
    assert res.json() == []


def test_get_missing_customer_returns_null():
    res = client.get("/api/customers/999")
    assert res.status_code == 200
    assert res.json() is None


def test_invalid_email_rejected():
    res = client.post("/api/customers", json={"name": "X", "email": "not-an-email"})
    assert res.status_code == 422


def test_partial_update_touches_only_given_fields():
    c = _create()
    res = client.patch(f"/api/customers/{c['id']}", json={"phone": None, "address": "2 Side St"})
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Jane Doe"
    assert body["email"] == "jane@example.com"
    assert body["phone"] is None
    assert body["address"] == "2 Side St"


def test_update_missing_customer_is_404():
    res = client.patch("/api/customers/999", json={"name": "Ghost"})
    assert res.status_code == 404
    assert "Customer with id 999 not found" in res.json()["detail"]


def test_customer_history(db, customer):
    other = _create(name="Someone Else")
    RepairService(db).create(customer_id=customer.id, device_type="Laptop",
                             problem_description="No power")
    RepairService(db).create(customer_id=other["id"], device_type="Phone",
                             problem_description="Cracked screen")
    TransactionService(db).create(customer_id=customer.id, type=TransactionType.SALE,
                                  total_amount="10.00", paid_amount="10.00", created_by=1)

    body = client.get(f"/api/customers/{customer.id}/history").json()
    assert [s["device_type"] for s in body["services"]] == ["Laptop"]
    assert len(body["transactions"]) == 1
    assert body["transactions"][0]["total_amount"] == 10.0

    empty = client.get("/api/customers/999/history").json()
    assert empty == {"services": [], "transactions": []}


def test_update_rejects_null_name():
    c = _create()
    res = client.patch(f"/api/customers/{c['id']}", json={"name": None})
    assert res.status_code == 422
    assert client.get(f"/api/customers/{c['id']}").json()["name"] == "Jane Doe"
