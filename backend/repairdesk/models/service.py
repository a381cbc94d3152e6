import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from repairdesk.db import Base
from repairdesk.utils.clock import utcnow
from repairdesk.utils.money import DecimalText


class ServiceStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Service(Base):
    """A repair ticket for one customer device."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    device_type = Column(String(128), nullable=False)
    device_brand = Column(String(128), nullable=True)
    device_model = Column(String(128), nullable=True)
    problem_description = Column(Text, nullable=False)
    diagnosis = Column(Text, nullable=True)
    repair_actions = Column(Text, nullable=True)
    status = Column(
        Enum(ServiceStatus, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
        default=ServiceStatus.PENDING,
    )  # pending, in_progress, completed, cancelled
    estimated_cost = Column(DecimalText, nullable=True)
    actual_cost = Column(DecimalText, nullable=True)
    technician_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
    completed_at = Column(DateTime, nullable=True)

    customer = relationship("Customer", back_populates="services")
    technician = relationship("User")
