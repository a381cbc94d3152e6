import logging
from decimal import Decimal
from typing import List, Optional

from repairdesk.models.transaction import Transaction, TransactionItem, TransactionType
from repairdesk.repositories.customer_repo import CustomerRepository
from repairdesk.repositories.service_repo import ServiceRepository
from repairdesk.repositories.transaction_repo import TransactionRepository
from repairdesk.services.exceptions import NotFoundError
from repairdesk.services.inventory_service import InventoryService
from repairdesk.utils.money import to_money
from repairdesk.utils.transactions import smart_transaction
from sqlalchemy.orm import Session

log = logging.getLogger("repairdesk.transactions")


class TransactionService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = TransactionRepository(db)
        self.inventory = InventoryService(db)

    def create(
        self,
        customer_id: int,
        type: TransactionType,
        total_amount: Decimal,
        paid_amount: Decimal,
        created_by: int,
        service_id: Optional[int] = None,
        payment_method: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Transaction:
        with smart_transaction(self.db):
            if CustomerRepository(self.db).get(customer_id) is None:
                raise NotFoundError("Customer", customer_id)
            if service_id is not None and ServiceRepository(self.db).get(service_id) is None:
                raise NotFoundError("Service", service_id)
            t = self.repo.add(
                Transaction(
                    customer_id=customer_id,
                    type=TransactionType(type),
                    service_id=service_id,
                    total_amount=to_money(total_amount),
                    paid_amount=to_money(paid_amount),
                    payment_method=payment_method,
                    notes=notes,
                    created_by=created_by,
                )
            )
        log.info(
            "transaction %s (%s) recorded for customer %s by user %s",
            t.id, t.type.value, customer_id, created_by,
        )
        return t

    def add_item(self, transaction_id: int, product_id: int, quantity: int,
                 unit_price: Decimal) -> TransactionItem:
        return self.inventory.apply_transaction_item(
            transaction_id, product_id, quantity, unit_price
        )

    def get(self, transaction_id: int) -> Optional[Transaction]:
        return self.repo.get(transaction_id)

    def list(self) -> List[Transaction]:
        return self.repo.list()
