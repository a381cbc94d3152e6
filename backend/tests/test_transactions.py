from decimal import Decimal

from fastapi.testclient import TestClient

from repairdesk.main import app
from repairdesk.models.product import Product

client = TestClient(app)


def _transaction(customer_id, **overrides):
    payload = {
        "customer_id": customer_id,
        "type": "sale",
        "service_id": None,
        "total_amount": 59.98,
        "paid_amount": 59.98,
        "payment_method": "cash",
        "notes": None,
    }
    payload.update(overrides)
    return client.post("/api/transactions", json=payload)


def test_create_transaction(customer):
    res = _transaction(customer.id, paid_amount=50)
    assert res.status_code == 200, res.text
    body = res.json()
    assert body["total_amount"] == 59.98
    assert body["paid_amount"] == 50.0
    assert body["created_by"] == 1
    assert client.get(f"/api/transactions/{body['id']}").json()["id"] == body["id"]
    assert len(client.get("/api/transactions").json()) == 1


def test_created_by_comes_from_caller(customer):
    res = client.post(
        "/api/transactions",
        json={"customer_id": customer.id, "type": "sale", "total_amount": 5, "paid_amount": 5},
        headers={"X-User-Id": "3"},
    )
    assert res.json()["created_by"] == 3


def test_transaction_requires_existing_customer_and_service(customer):
    res = _transaction(999)
    assert res.status_code == 404
    assert "Customer with id 999 not found" in res.json()["detail"]

    res = _transaction(customer.id, type="service", service_id=999)
    assert res.status_code == 404
    assert "Service with id 999 not found" in res.json()["detail"]


def test_transaction_amount_validation(customer):
    assert _transaction(customer.id, total_amount=0).status_code == 422
    assert _transaction(customer.id, paid_amount=-1).status_code == 422
    assert _transaction(customer.id, type="refund").status_code == 422


def test_get_missing_transaction_returns_null():
    assert client.get("/api/transactions/999").json() is None


def test_transaction_item_via_api(db, customer, product_factory):
    p = product_factory(stock_quantity=10, price="12.99")
    tid = _transaction(customer.id).json()["id"]

    res = client.post(
        "/api/transaction-items",
        json={"transaction_id": tid, "product_id": p.id, "quantity": 3, "unit_price": 0.1},
    )
    assert res.status_code == 200, res.text
    body = res.json()
    assert body["total_price"] == 0.3
    db.expire_all()
    assert db.get(Product, p.id).stock_quantity == 7


def test_transaction_item_insufficient_stock_leaves_stock(db, customer, product_factory):
    p = product_factory(stock_quantity=2)
    tid = _transaction(customer.id).json()["id"]

    res = client.post(
        "/api/transaction-items",
        json={"transaction_id": tid, "product_id": p.id, "quantity": 3, "unit_price": 1},
    )
    assert res.status_code == 400
    assert res.json()["detail"] == "Insufficient stock. Available: 2, Requested: 3"
    db.expire_all()
    assert db.get(Product, p.id).stock_quantity == 2


def test_transaction_item_total_is_exact(db, customer, product_factory):
    from repairdesk.services.transaction_service import TransactionService

    p = product_factory(stock_quantity=100)
    tid = _transaction(customer.id).json()["id"]
    item = TransactionService(db).add_item(tid, p.id, 3, Decimal("19.99"))
    assert item.total_price == Decimal("59.97")


def test_amounts_below_one_cent_rejected(db, customer, product_factory):
    assert _transaction(customer.id, total_amount=0.001).status_code == 422
    assert _transaction(customer.id, paid_amount=1.005).status_code == 422

    p = product_factory(stock_quantity=5)
    tid = _transaction(customer.id).json()["id"]
    res = client.post(
        "/api/transaction-items",
        json={"transaction_id": tid, "product_id": p.id, "quantity": 1, "unit_price": 0.001},
    )
    assert res.status_code == 422
    db.expire_all()
    assert db.get(Product, p.id).stock_quantity == 5
