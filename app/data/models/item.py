#app/data/models/item.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, ForeignKey, String, DateTime, Numeric
from sqlalchemy.orm import relationship

from app.data.database import Base


class ItemModel(Base):
    """Pozycja z katalogu (menu) vendora."""

    __tablename__ = "items"

    id = Column(Integer, primary_key=True)
    vendor_id = Column(Integer, ForeignKey("vendors.id"), nullable=False, index=True)

    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    img = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    vendor = relationship("VendorModel", back_populates="items")
