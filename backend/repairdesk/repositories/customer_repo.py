from typing import List, Optional

from repairdesk.models.customer import Customer
from sqlalchemy.orm import Session


class CustomerRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, customer_id: int) -> Optional[Customer]:
        return self.db.get(Customer, customer_id)

    def list(self) -> List[Customer]:
        return self.db.query(Customer).order_by(Customer.name, Customer.id).all()

    def count(self) -> int:
        return self.db.query(Customer).count()

    def add(self, customer: Customer) -> Customer:
        self.db.add(customer)
        self.db.flush()
        return customer
