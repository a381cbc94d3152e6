import logging
from decimal import Decimal
from typing import List, Optional

from repairdesk.models.product import Product
from repairdesk.models.stock_movement import StockMovement, StockMovementType
from repairdesk.models.transaction import TransactionItem
from repairdesk.repositories.product_repo import ProductRepository
from repairdesk.repositories.stock_movement_repo import StockMovementRepository
from repairdesk.repositories.transaction_repo import TransactionRepository
from repairdesk.services.exceptions import InsufficientStockError, NotFoundError
from repairdesk.utils.money import to_money
from repairdesk.utils.transactions import smart_transaction
from sqlalchemy.orm import Session

log = logging.getLogger("repairdesk.inventory")


def is_low_stock(product: Product) -> bool:
    """
    stock at or below the minimum is low; a product with minimum 0 and stock 0
    has no threshold configured and is not reported.
    """
    return bool(product.is_low_stock)


class InventoryService:
    """
    Keeps product.stock_quantity consistent with the applied history of
    stock movements and transaction items.
    """

    def __init__(self, db: Session):
        self.db = db
        self.products = ProductRepository(db)
        self.movements = StockMovementRepository(db)
        self.transactions = TransactionRepository(db)

    def apply_stock_movement(
        self,
        product_id: int,
        type: StockMovementType,
        quantity: int,
        created_by: int,
        price_per_unit: Optional[Decimal] = None,
        notes: Optional[str] = None,
    ) -> StockMovement:
        """
        Record a manual in/out adjustment and shift stock by +/-quantity.
        No lower bound: an "out" larger than the current stock drives it negative.
        """
        type = StockMovementType(type)
        delta = quantity if type == StockMovementType.IN else -quantity
        with smart_transaction(self.db):
            if self.products.add_stock(product_id, delta) == 0:
                log.warning("stock movement rejected: product %s not found", product_id)
                raise NotFoundError("Product", product_id)
            movement = self.movements.add(
                StockMovement(
                    product_id=product_id,
                    type=type,
                    quantity=quantity,
                    price_per_unit=to_money(price_per_unit) if price_per_unit is not None else None,
                    notes=notes,
                    created_by=created_by,
                )
            )
        log.info(
            "stock movement %s: product=%s type=%s delta=%+d by user=%s",
            movement.id, product_id, type.value, delta, created_by,
        )
        return movement

    def apply_transaction_item(
        self,
        transaction_id: int,
        product_id: int,
        quantity: int,
        unit_price: Decimal,
    ) -> TransactionItem:
        """
        Sell ``quantity`` units as a line of an existing transaction.
        Unlike stock movements this path never takes stock below zero: the
        decrement is a conditional update and a miss is reported as InsufficientStockError.
        """
        unit_price = to_money(unit_price)
        with smart_transaction(self.db):
            if self.transactions.get(transaction_id) is None:
                log.warning("transaction item rejected: transaction %s not found", transaction_id)
                raise NotFoundError("Transaction", transaction_id)
            if self.products.get(product_id) is None:
                log.warning("transaction item rejected: product %s not found", product_id)
                raise NotFoundError("Product", product_id)

            if not self.products.take_stock(product_id, quantity):
                available = self.products.current_stock(product_id)
                log.warning(
                    "transaction item rejected: product=%s available=%s requested=%s",
                    product_id, available, quantity,
                )
                raise InsufficientStockError(product_id, available, quantity)

            item = self.transactions.add_item(
                TransactionItem(
                    transaction_id=transaction_id,
                    product_id=product_id,
                    quantity=quantity,
                    unit_price=unit_price,
                    total_price=to_money(unit_price * quantity),
                )
            )
        log.info(
            "transaction item %s: transaction=%s product=%s delta=-%d",
            item.id, transaction_id, product_id, quantity,
        )
        return item

    def list_movements(self, product_id: Optional[int] = None) -> List[StockMovement]:
        return self.movements.list(product_id=product_id)
