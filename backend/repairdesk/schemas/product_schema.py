from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from repairdesk.models.product import ProductType
from repairdesk.schemas.common import Money, ORMOut, reject_null


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    type: ProductType
    price: Decimal = Field(gt=0, decimal_places=2)
    stock_quantity: int = Field(default=0, ge=0)
    minimum_stock: int = Field(default=0, ge=0)


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    type: Optional[ProductType] = None
    price: Optional[Decimal] = Field(default=None, gt=0, decimal_places=2)
    stock_quantity: Optional[int] = Field(default=None, ge=0)
    minimum_stock: Optional[int] = Field(default=None, ge=0)

    check_not_null = field_validator(
        "name", "type", "price", "stock_quantity", "minimum_stock"
    )(reject_null)


class ProductOut(ORMOut):
    id: int
    name: str
    description: Optional[str] = None
    type: ProductType
    price: Money
    stock_quantity: int
    minimum_stock: int
    created_at: datetime
    updated_at: datetime
