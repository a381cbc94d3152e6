import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from repairdesk.db import Base
from repairdesk.utils.clock import utcnow
from repairdesk.utils.money import DecimalText


class StockMovementType(str, enum.Enum):
    IN = "in"
    OUT = "out"


class StockMovement(Base):
    """Manual inventory adjustment. Rows are append-only."""

    __tablename__ = "stock_movements"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    type = Column(
        Enum(StockMovementType, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
    )
    quantity = Column(Integer, nullable=False)
    price_per_unit = Column(DecimalText, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False)

    product = relationship("Product")
