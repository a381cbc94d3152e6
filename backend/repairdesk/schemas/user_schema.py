from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from repairdesk.models.user import UserRole
from repairdesk.schemas.common import ORMOut


class UserCreate(BaseModel):
    username: str = Field(min_length=3)
    email: EmailStr
    password: str = Field(min_length=6)
    full_name: str
    role: UserRole


class UserOut(ORMOut):
    # password_hash never leaves the service layer
    id: int
    username: str
    email: str
    full_name: str
    role: UserRole
    is_active: bool
    created_at: datetime
    updated_at: datetime
