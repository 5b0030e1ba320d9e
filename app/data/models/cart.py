#app/data/models/cart.py
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Column, Integer, ForeignKey, DateTime, Numeric
from sqlalchemy.orm import relationship

from app.data.database import Base


class CartModel(Base):
    __tablename__ = "carts"

    #jeden koszyk na klienta, id koszyka == id klienta
    id = Column(Integer, ForeignKey("users.id"), primary_key=True, autoincrement=False)

    total_price = Column(Numeric(10, 2), nullable=False, default=Decimal("0.00"))
    quantity = Column(Integer, nullable=False, default=0)
    vendor_id = Column(Integer, ForeignKey("vendors.id"), nullable=True)
    version = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    items = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
    )
