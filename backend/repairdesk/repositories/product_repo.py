from typing import List, Optional

from repairdesk.models.product import Product
from repairdesk.utils.clock import utcnow
from sqlalchemy import update
from sqlalchemy.orm import Session


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def list(self) -> List[Product]:
        return self.db.query(Product).order_by(Product.name, Product.id).all()

    def list_low_stock(self) -> List[Product]:
        return (
            self.db.query(Product)
            .filter(Product.is_low_stock)
            .order_by(Product.stock_quantity, Product.id)
            .all()
        )

    def count_low_stock(self) -> int:
        return self.db.query(Product).filter(Product.is_low_stock).count()

    def add_stock(self, product_id: int, delta: int) -> int:
        """
        Unbounded single-statement adjustment: stock_quantity += delta.
        Returns the number of rows touched (0 when the product does not exist).
        """
        res = self.db.execute(
            update(Product)
            .where(Product.id == product_id)
            .values(stock_quantity=Product.stock_quantity + delta, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        return res.rowcount

    def take_stock(self, product_id: int, qty: int) -> bool:
        """
        Conditional decrement: only succeeds while stock_quantity >= qty.
        Check and write happen in one statement so concurrent sellers cannot both pass.
        """
        res = self.db.execute(
            update(Product)
            .where(Product.id == product_id, Product.stock_quantity >= qty)
            .values(stock_quantity=Product.stock_quantity - qty, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        return res.rowcount == 1

    def current_stock(self, product_id: int) -> Optional[int]:
        return (
            self.db.query(Product.stock_quantity)
            .filter(Product.id == product_id)
            .scalar()
        )
