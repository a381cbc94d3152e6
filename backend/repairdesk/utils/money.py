from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Union

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

MONEY_DECIMAL_PLACES = 2
_QUANT = Decimal(1).scaleb(-MONEY_DECIMAL_PLACES)

Numberish = Union[Decimal, int, float, str]


def to_money(value: Numberish) -> Decimal:
    """
    Normalize to a Decimal rounded to cents. Floats go through str() first so
    12.99 becomes Decimal("12.99") rather than its binary expansion.
    """
    if isinstance(value, float):
        value = str(value)
    return Decimal(value).quantize(_QUANT, rounding=ROUND_HALF_UP)


def sum_money(values: Iterable[Optional[Decimal]]) -> Decimal:
    total = Decimal("0")
    for v in values:
        if v is not None:
            total += v
    return to_money(total)


class DecimalText(TypeDecorator):
    """
    Money column stored as exact decimal text ("12.99") and loaded as Decimal.
    Keeps values exact on backends without a native decimal type (SQLite).
    """

    impl = String(32)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(to_money(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)
