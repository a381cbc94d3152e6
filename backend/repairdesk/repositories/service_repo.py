from datetime import datetime
from typing import List, Optional

from repairdesk.models.service import Service, ServiceStatus
from sqlalchemy.orm import Session


class ServiceRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, service_id: int) -> Optional[Service]:
        return self.db.get(Service, service_id)

    def list(self, customer_id: int = None) -> List[Service]:
        query = self.db.query(Service)
        if customer_id is not None:
            query = query.filter(Service.customer_id == customer_id)
        return query.order_by(Service.created_at.desc(), Service.id.desc()).all()

    def add(self, service: Service) -> Service:
        self.db.add(service)
        self.db.flush()
        return service

    def count_by_status(self, status: ServiceStatus) -> int:
        return self.db.query(Service).filter(Service.status == status).count()

    def count_completed_between(self, start: datetime, end: datetime) -> int:
        """completed_at in [start, end)"""
        return (
            self.db.query(Service)
            .filter(Service.completed_at >= start, Service.completed_at < end)
            .count()
        )
