from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer

# Decimal everywhere inside the app; rendered as a JSON number only on the way out
Money = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class ORMOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)


def reject_null(value):
    """Partial updates may omit a column but may not null out a required one."""
    if value is None:
        raise ValueError("field may be omitted but not set to null")
    return value
