# app/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.errors import to_http
from app.data.database import get_db
from app.domain.errors import ServiceError
from app.domain.schemas import OrderOut, OrderStatusIn
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.get("", response_model=List[OrderOut])
def list_orders(
    user_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    return svc.list_orders(user_id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int,
    user_id: int | None = Query(None, gt=0),
    db: Session = Depends(get_db),
):
    """
    Pobiera szczegóły zamówienia razem z liniami.
    """
    svc = get_service(db)
    try:
        return svc.get_order(order_id, user_id)
    except ServiceError as e:
        raise to_http(e)


@router.put("/{order_id}/status", response_model=OrderOut)
def update_order_status(
    order_id: int,
    payload: OrderStatusIn,
    db: Session = Depends(get_db),
):
    """
    Zmiana statusu przez obsługę restauracji (preparing -> ready -> delivered).
    """
    svc = get_service(db)
    try:
        return svc.update_status(order_id, payload.status)
    except ServiceError as e:
        raise to_http(e)
