from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from repairdesk.models.service import ServiceStatus
from repairdesk.schemas.common import Money, ORMOut, reject_null


class ServiceCreate(BaseModel):
    customer_id: int
    device_type: str = Field(min_length=1)
    device_brand: Optional[str] = None
    device_model: Optional[str] = None
    problem_description: str = Field(min_length=1)
    estimated_cost: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2)


class ServiceUpdate(BaseModel):
    diagnosis: Optional[str] = None
    repair_actions: Optional[str] = None
    status: Optional[ServiceStatus] = None
    actual_cost: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2)
    technician_id: Optional[int] = None

    check_not_null = field_validator(
        "diagnosis", "repair_actions", "status", "actual_cost", "technician_id"
    )(reject_null)


class ServiceOut(ORMOut):
    id: int
    customer_id: int
    device_type: str
    device_brand: Optional[str] = None
    device_model: Optional[str] = None
    problem_description: str
    diagnosis: Optional[str] = None
    repair_actions: Optional[str] = None
    status: ServiceStatus
    estimated_cost: Optional[Money] = None
    actual_cost: Optional[Money] = None
    technician_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime
    completed_at: Optional[datetime] = None
