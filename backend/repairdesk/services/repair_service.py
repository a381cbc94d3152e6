import logging
from decimal import Decimal
from typing import Dict, List, Optional

from repairdesk.models.service import Service, ServiceStatus
from repairdesk.repositories.customer_repo import CustomerRepository
from repairdesk.repositories.service_repo import ServiceRepository
from repairdesk.services.exceptions import NotFoundError
from repairdesk.utils.clock import utcnow
from repairdesk.utils.money import to_money
from repairdesk.utils.transactions import smart_transaction
from sqlalchemy.orm import Session

log = logging.getLogger("repairdesk.services")

UPDATABLE_FIELDS = ("diagnosis", "repair_actions", "status", "actual_cost", "technician_id")


class RepairService:
    """Repair tickets (the ``services`` table)."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ServiceRepository(db)

    def create(
        self,
        customer_id: int,
        device_type: str,
        problem_description: str,
        device_brand: Optional[str] = None,
        device_model: Optional[str] = None,
        estimated_cost: Optional[Decimal] = None,
    ) -> Service:
        with smart_transaction(self.db):
            if CustomerRepository(self.db).get(customer_id) is None:
                raise NotFoundError("Customer", customer_id)
            s = self.repo.add(
                Service(
                    customer_id=customer_id,
                    device_type=device_type,
                    device_brand=device_brand,
                    device_model=device_model,
                    problem_description=problem_description,
                    estimated_cost=to_money(estimated_cost) if estimated_cost is not None else None,
                    status=ServiceStatus.PENDING,
                )
            )
        log.info("service %s opened for customer %s", s.id, customer_id)
        return s

    def update(self, service_id: int, changes: Dict) -> Service:
        """
        Partial update. Any status may follow any other; moving to ``completed``
        stamps completed_at, and no transition ever clears it.
        """
        now = utcnow()
        with smart_transaction(self.db):
            s = self.repo.get(service_id)
            if not s:
                raise NotFoundError("Service", service_id)
            for field in UPDATABLE_FIELDS:
                if field not in changes:
                    continue
                value = changes[field]
                if field == "status":
                    value = ServiceStatus(value)
                    if value == ServiceStatus.COMPLETED:
                        s.completed_at = now
                elif field == "actual_cost" and value is not None:
                    value = to_money(value)
                setattr(s, field, value)
            s.updated_at = now
        log.info("service %s updated: %s", service_id, sorted(changes))
        return s

    def get(self, service_id: int) -> Optional[Service]:
        return self.repo.get(service_id)

    def list(self) -> List[Service]:
        return self.repo.list()
