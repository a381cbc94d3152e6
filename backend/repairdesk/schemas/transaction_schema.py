from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from repairdesk.models.transaction import TransactionType
from repairdesk.schemas.common import Money, ORMOut


class TransactionCreate(BaseModel):
    customer_id: int
    type: TransactionType
    service_id: Optional[int] = None
    total_amount: Decimal = Field(gt=0, decimal_places=2)
    paid_amount: Decimal = Field(ge=0, decimal_places=2)
    payment_method: Optional[str] = None
    notes: Optional[str] = None


class TransactionOut(ORMOut):
    id: int
    customer_id: int
    type: TransactionType
    service_id: Optional[int] = None
    total_amount: Money
    paid_amount: Money
    payment_method: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    created_by: int


class TransactionItemCreate(BaseModel):
    transaction_id: int
    product_id: int
    quantity: int = Field(gt=0)
    unit_price: Decimal = Field(gt=0, decimal_places=2)


class TransactionItemOut(ORMOut):
    id: int
    transaction_id: int
    product_id: int
    quantity: int
    unit_price: Money
    total_price: Money
