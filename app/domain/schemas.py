# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime


class UserCreate(BaseModel):
    """Schema dla tworzenia użytkownika."""

    name: str = Field(..., min_length=1, max_length=100, description="Imię użytkownika")
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")


class UserUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")


class UserRead(BaseModel):
    """Schema dla użytkownika (response)."""

    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class VendorCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class VendorUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class VendorOut(BaseModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ItemCreate(BaseModel):
    """Schema dla nowej pozycji w menu vendora."""

    vendor_id: int = Field(..., gt=0, description="ID vendora (musi być > 0)")
    name: str = Field(..., min_length=1, max_length=200)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)


class ItemUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    price: Decimal | None = Field(None, gt=0, max_digits=10, decimal_places=2)


class ItemOut(BaseModel):
    id: int
    vendor_id: int
    name: str
    price: Decimal
    img: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CartLineIn(BaseModel):
    """Schema dla dodawania/aktualizacji produktu w koszyku."""

    item_id: int = Field(..., gt=0, description="ID produktu (musi być > 0)")
    quantity: int = Field(..., gt=0, description="Ilość produktu, nadpisuje poprzednią (musi być > 0)")


class CartLineOut(BaseModel):
    item_id: int
    quantity: int
    price: Decimal


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    id: int
    vendor_id: int | None = None
    total_price: Decimal
    quantity: int
    items: List[CartLineOut]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderLineOut(BaseModel):
    item_id: int
    quantity: int
    price: Decimal


class OrderOut(BaseModel):
    """Schema dla zamówienia (response)."""

    id: int
    total_order_cost: Decimal
    vendor_id: int
    customer_id: int
    status: str
    items: List[OrderLineOut]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderStatusIn(BaseModel):
    status: str = Field(..., min_length=1, description="preparing, ready, delivered, cancelled")



class TableCreate(BaseModel):
    """Schema dla nowego stolika w lokalu."""

    name: str = Field(..., min_length=1, max_length=100)
    vendor_id: int = Field(..., gt=0)
    customer_id: int | None = Field(None, gt=0, description="Klient przy stoliku, brak = wolny")
    is_available: bool = True
    is_needs_service: bool = False


class TableUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    customer_id: int | None = Field(None, gt=0)
    is_available: bool | None = None
    is_needs_service: bool | None = None


class TableOut(BaseModel):
    id: int
    name: str
    vendor_id: int
    customer_id: int | None = None
    is_available: bool
    is_needs_service: bool

    model_config = ConfigDict(from_attributes=True)
