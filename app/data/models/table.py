from sqlalchemy import Boolean, Column, Integer, ForeignKey, String
from sqlalchemy.orm import relationship

from app.data.database import Base


class TableModel(Base):
    """Stolik w lokalu vendora, opcjonalnie zajety przez klienta."""

    __tablename__ = "tables"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    vendor_id = Column(Integer, ForeignKey("vendors.id"), nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("users.id"), nullable=True)

    is_available = Column(Boolean, nullable=False, default=True)
    is_needs_service = Column(Boolean, nullable=False, default=False)

    vendor = relationship("VendorModel")
