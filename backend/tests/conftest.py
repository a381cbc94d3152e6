import os
import tempfile

# must be set before repairdesk.config is imported anywhere
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite:///" + os.path.join(tempfile.gettempdir(), "repairdesk_test.db"),
)

import pytest

from repairdesk.db import SessionLocal, init_db
from repairdesk.services.customer_service import CustomerService
from repairdesk.services.product_service import ProductService


@pytest.fixture(autouse=True)
def fresh_db():
    # every test starts from an empty schema
    init_db(reset=True)
    yield


@pytest.fixture
def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def customer(db):
    return CustomerService(db).create(name="Test Customer", phone="123456789",
                                      email="test@example.com", address="Test Address")


@pytest.fixture
def product_factory(db):
    def _make(name="Test Product", price="29.99", stock_quantity=50, minimum_stock=10,
              type="sparepart"):
        return ProductService(db).create(name=name, type=type, price=price,
                                         stock_quantity=stock_quantity,
                                         minimum_stock=minimum_stock,
                                         description="A product for testing")
    return _make
