from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from repairdesk.schemas.common import ORMOut, reject_null


class CustomerCreate(BaseModel):
    name: str = Field(min_length=1)
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    address: Optional[str] = None


class CustomerUpdate(BaseModel):
    """Only fields present in the request body are written."""

    name: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    address: Optional[str] = None

    check_not_null = field_validator("name")(reject_null)


class CustomerOut(ORMOut):
    id: int
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime
    updated_at: datetime
