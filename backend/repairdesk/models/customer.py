from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from repairdesk.db import Base
from repairdesk.utils.clock import utcnow


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    phone = Column(String(64), nullable=True)
    email = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    services = relationship("Service", back_populates="customer")
    transactions = relationship("Transaction", back_populates="customer")

    def __repr__(self):
        return f"<Customer id={self.id} name={self.name}>"
