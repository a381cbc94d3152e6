import logging
from typing import Dict, List, Optional

from repairdesk.models.customer import Customer
from repairdesk.repositories.customer_repo import CustomerRepository
from repairdesk.repositories.service_repo import ServiceRepository
from repairdesk.repositories.transaction_repo import TransactionRepository
from repairdesk.services.exceptions import NotFoundError
from repairdesk.utils.clock import utcnow
from repairdesk.utils.transactions import smart_transaction
from sqlalchemy.orm import Session

log = logging.getLogger("repairdesk.customers")

UPDATABLE_FIELDS = ("name", "phone", "email", "address")


class CustomerService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = CustomerRepository(db)

    def create(self, name: str, phone: Optional[str] = None, email: Optional[str] = None,
               address: Optional[str] = None) -> Customer:
        with smart_transaction(self.db):
            c = self.repo.add(Customer(name=name, phone=phone, email=email, address=address))
        log.info("customer %s created", c.id)
        return c

    def update(self, customer_id: int, changes: Dict) -> Customer:
        """Apply only the keys present in ``changes``; updated_at always moves."""
        with smart_transaction(self.db):
            c = self.repo.get(customer_id)
            if not c:
                raise NotFoundError("Customer", customer_id)
            for field in UPDATABLE_FIELDS:
                if field in changes:
                    setattr(c, field, changes[field])
            c.updated_at = utcnow()
        log.info("customer %s updated: %s", customer_id, sorted(changes))
        return c

    def get(self, customer_id: int) -> Optional[Customer]:
        return self.repo.get(customer_id)

    def list(self) -> List[Customer]:
        return self.repo.list()

    def history(self, customer_id: int) -> Dict[str, list]:
        """All services and transactions for one customer, newest first. Unknown ids give empty lists."""
        return {
            "services": ServiceRepository(self.db).list(customer_id=customer_id),
            "transactions": TransactionRepository(self.db).list(customer_id=customer_id),
        }
