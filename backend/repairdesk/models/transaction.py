import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from repairdesk.db import Base
from repairdesk.utils.clock import utcnow
from repairdesk.utils.money import DecimalText


class TransactionType(str, enum.Enum):
    SALE = "sale"
    SERVICE = "service"


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    type = Column(
        Enum(TransactionType, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
    )
    service_id = Column(Integer, ForeignKey("services.id"), nullable=True)
    total_amount = Column(DecimalText, nullable=False)
    paid_amount = Column(DecimalText, nullable=False)
    payment_method = Column(String(64), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False)

    customer = relationship("Customer", back_populates="transactions")
    service = relationship("Service")
    items = relationship("TransactionItem", back_populates="transaction")


class TransactionItem(Base):
    __tablename__ = "transaction_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = Column(Integer, ForeignKey("transactions.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(DecimalText, nullable=False)
    total_price = Column(DecimalText, nullable=False)

    transaction = relationship("Transaction", back_populates="items")
    product = relationship("Product")
