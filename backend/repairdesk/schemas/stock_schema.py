from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from repairdesk.models.stock_movement import StockMovementType
from repairdesk.schemas.common import Money, ORMOut


class StockMovementCreate(BaseModel):
    product_id: int
    type: StockMovementType
    quantity: int = Field(gt=0)
    price_per_unit: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2)
    notes: Optional[str] = None


class StockMovementOut(ORMOut):
    id: int
    product_id: int
    type: StockMovementType
    quantity: int
    price_per_unit: Optional[Money] = None
    notes: Optional[str] = None
    created_at: datetime
    created_by: int
