from datetime import datetime, timedelta
from decimal import Decimal

from fastapi.testclient import TestClient

from repairdesk.main import app
from repairdesk.models.transaction import Transaction, TransactionType
from repairdesk.services.inventory_service import InventoryService
from repairdesk.services.repair_service import RepairService
from repairdesk.services.report_service import ReportService

client = TestClient(app)


def _insert_tx(db, customer_id, type, total, paid, created_at):
    db.add(Transaction(customer_id=customer_id, type=type, total_amount=Decimal(total),
                       paid_amount=Decimal(paid), created_by=1, created_at=created_at))
    db.commit()


def test_stock_report_rollup(db, product_factory):
    a = product_factory(name="Product A", price="25.50", stock_quantity=100, minimum_stock=20)
    b = product_factory(name="Product B", price="15.00", stock_quantity=5, minimum_stock=10)
    inv = InventoryService(db)
    inv.apply_stock_movement(b.id, "in", 30, created_by=1)
    inv.apply_stock_movement(b.id, "in", 20, created_by=1)
    inv.apply_stock_movement(b.id, "out", 15, created_by=1)

    rows = {r["product_name"]: r for r in client.get("/api/reports/stock").json()}
    assert set(rows) == {"Product A", "Product B"}

    assert rows["Product A"]["stock_in"] == 0
    assert rows["Product A"]["stock_out"] == 0
    assert rows["Product A"]["stock_value"] == 2550
    assert rows["Product A"]["is_low_stock"] is False

    assert rows["Product B"]["current_stock"] == 40
    assert rows["Product B"]["stock_in"] == 50
    assert rows["Product B"]["stock_out"] == 15
    assert rows["Product B"]["stock_value"] == 600
    assert rows["Product B"]["is_low_stock"] is False
    assert a.id != b.id


def test_stock_value_decimal_precision(db, product_factory):
    product_factory(name="Decimal Product", price="12.99", stock_quantity=7, minimum_stock=5)
    row = ReportService(db).stock_report()[0]
    assert row["stock_value"] == Decimal("90.93")
    assert client.get("/api/reports/stock").json()[0]["stock_value"] == 90.93


def test_stock_report_low_stock_flags(product_factory):
    product_factory(name="At Minimum", stock_quantity=10, minimum_stock=10)
    product_factory(name="Below Minimum", stock_quantity=3, minimum_stock=15)
    product_factory(name="Normal", stock_quantity=25, minimum_stock=20)
    flags = {r["product_name"]: r["is_low_stock"] for r in client.get("/api/reports/stock").json()}
    assert flags == {"At Minimum": True, "Below Minimum": True, "Normal": False}


def test_financial_report_partitions_by_type(db, customer):
    _insert_tx(db, customer.id, TransactionType.SALE, "100.10", "100.10", datetime(2024, 1, 5, 10, 0))
    _insert_tx(db, customer.id, TransactionType.SERVICE, "200.20", "150.00", datetime(2024, 1, 20, 18, 30))
    _insert_tx(db, customer.id, TransactionType.SALE, "0.30", "0.30", datetime(2024, 1, 31, 23, 0))
    # outside the window
    _insert_tx(db, customer.id, TransactionType.SALE, "999.00", "999.00", datetime(2024, 2, 1, 0, 0, 1))

    res = client.get(
        "/api/reports/financial",
        params={"period": "monthly", "start_date": "2024-01-01", "end_date": "2024-01-31"},
    )
    assert res.status_code == 200, res.text
    body = res.json()
    assert body["period"] == "monthly"
    assert body["total_transactions"] == 3
    assert body["sales_revenue"] == 100.4
    assert body["service_revenue"] == 200.2
    assert body["total_revenue"] == 300.6

    report = ReportService(db).financial_report("monthly", datetime(2024, 1, 1), datetime(2024, 1, 31, 23, 59, 59))
    assert report["total_revenue"] == report["service_revenue"] + report["sales_revenue"]


def test_financial_report_empty_window(db, customer):
    _insert_tx(db, customer.id, TransactionType.SALE, "10.00", "10.00", datetime(2024, 1, 5))
    body = client.get(
        "/api/reports/financial",
        params={"period": "daily", "start_date": "2023-06-01", "end_date": "2023-06-01"},
    ).json()
    assert body["total_revenue"] == 0
    assert body["service_revenue"] == 0
    assert body["sales_revenue"] == 0
    assert body["total_transactions"] == 0


def test_financial_report_bad_input():
    base = {"period": "weekly", "start_date": "2024-01-01", "end_date": "2024-01-31"}
    assert client.get("/api/reports/financial", params=dict(base, period="yearly")).status_code == 422
    assert client.get("/api/reports/financial", params=dict(base, start_date="yesterday")).status_code == 422
    assert client.get("/api/reports/financial", params=dict(base, start_date="2024-02-01")).status_code == 422


def test_dashboard_empty():
    body = client.get("/api/dashboard/stats").json()
    assert body == {
        "total_customers": 0,
        "pending_services": 0,
        "completed_services_today": 0,
        "low_stock_items": 0,
        "today_revenue": 0,
        "this_month_revenue": 0,
    }


def test_dashboard_counters(db, customer, product_factory):
    now = datetime(2026, 3, 15, 12, 0)
    tickets = RepairService(db)
    done = tickets.create(customer_id=customer.id, device_type="Phone", problem_description="Camera")
    tickets.create(customer_id=customer.id, device_type="Laptop", problem_description="Battery")
    tickets.create(customer_id=customer.id, device_type="Tablet", problem_description="Screen")
    done = tickets.update(done.id, {"status": "completed"})
    done.completed_at = now
    db.commit()

    product_factory(name="low", stock_quantity=2, minimum_stock=5)
    product_factory(name="ok", stock_quantity=20, minimum_stock=5)

    _insert_tx(db, customer.id, TransactionType.SALE, "80.00", "60.25", now)
    # earlier this month: counts for the month only
    _insert_tx(db, customer.id, TransactionType.SALE, "10.00", "10.00", now - timedelta(days=3))
    # last year's sale counts for neither window
    _insert_tx(db, customer.id, TransactionType.SALE, "500.00", "500.00",
               now - timedelta(days=400))

    stats = ReportService(db).dashboard_stats(now=now)
    assert stats["total_customers"] == 1
    assert stats["pending_services"] == 2
    assert stats["completed_services_today"] == 1
    assert stats["low_stock_items"] == 1
    assert stats["today_revenue"] == Decimal("60.25")
    assert stats["this_month_revenue"] == Decimal("70.25")
