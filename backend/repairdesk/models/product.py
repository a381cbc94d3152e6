import enum

from sqlalchemy import Column, DateTime, Enum, Integer, String, Text, and_, or_
from sqlalchemy.ext.hybrid import hybrid_property

from repairdesk.db import Base
from repairdesk.utils.clock import utcnow
from repairdesk.utils.money import DecimalText


class ProductType(str, enum.Enum):
    SPAREPART = "sparepart"
    ACCESSORY = "accessory"
    OTHER = "other"


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(256), nullable=False)
    description = Column(Text, nullable=True)
    type = Column(
        Enum(ProductType, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
    )
    price = Column(DecimalText, nullable=False)
    # may go negative: outbound stock movements are not floored
    stock_quantity = Column(Integer, default=0, nullable=False)
    minimum_stock = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    @hybrid_property
    def is_low_stock(self):
        # at/below threshold is low; a 0/0 product has no threshold configured
        return self.stock_quantity < self.minimum_stock or (
            self.stock_quantity == self.minimum_stock and self.minimum_stock > 0
        )

    @is_low_stock.expression
    def is_low_stock(cls):
        return or_(
            cls.stock_quantity < cls.minimum_stock,
            and_(cls.stock_quantity == cls.minimum_stock, cls.minimum_stock > 0),
        )

    def __repr__(self):
        return f"<Product id={self.id} name={self.name} stock={self.stock_quantity}>"
