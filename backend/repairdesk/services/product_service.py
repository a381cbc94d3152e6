import logging
from decimal import Decimal
from typing import Dict, List, Optional

from repairdesk.models.product import Product, ProductType
from repairdesk.repositories.product_repo import ProductRepository
from repairdesk.services.exceptions import NotFoundError
from repairdesk.utils.clock import utcnow
from repairdesk.utils.money import to_money
from repairdesk.utils.transactions import smart_transaction
from sqlalchemy.orm import Session

log = logging.getLogger("repairdesk.products")

UPDATABLE_FIELDS = ("name", "description", "type", "price", "stock_quantity", "minimum_stock")


class ProductService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepository(db)

    def create(
        self,
        name: str,
        type: ProductType,
        price: Decimal,
        stock_quantity: int = 0,
        minimum_stock: int = 0,
        description: Optional[str] = None,
    ) -> Product:
        with smart_transaction(self.db):
            p = Product(
                name=name,
                description=description,
                type=ProductType(type),
                price=to_money(price),
                stock_quantity=stock_quantity,
                minimum_stock=minimum_stock,
            )
            self.db.add(p)
            self.db.flush()
        log.info("product %s created with stock=%s", p.id, stock_quantity)
        return p

    def update(self, product_id: int, changes: Dict) -> Product:
        with smart_transaction(self.db):
            p = self.repo.get(product_id)
            if not p:
                raise NotFoundError("Product", product_id)
            for field in UPDATABLE_FIELDS:
                if field not in changes:
                    continue
                value = changes[field]
                if field == "price":
                    value = to_money(value)
                setattr(p, field, value)
            p.updated_at = utcnow()
        log.info("product %s updated: %s", product_id, sorted(changes))
        return p

    def get(self, product_id: int) -> Optional[Product]:
        return self.repo.get(product_id)

    def list(self) -> List[Product]:
        return self.repo.list()

    def low_stock(self) -> List[Product]:
        return self.repo.list_low_stock()
