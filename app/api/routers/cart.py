#app/api/routers/cart.py
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from app.api.errors import to_http
from app.data.database import get_db
from app.domain.errors import ServiceError
from app.domain.schemas import CartLineIn, CartOut, OrderOut
from app.services.cart_service import CartService
from app.services.checkout_service import CheckoutService

router = APIRouter(prefix="/cart", tags=["cart"])

#user_id przychodzi z zewnetrznej warstwy auth, tutaj tylko jako query param


def get_service(db: Session):
    return CartService(db=db)


@router.get("", response_model=CartOut)
def get_cart(
    user_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.get_cart(user_id)
    except ServiceError as e:
        raise to_http(e)


@router.post("/items", response_model=CartOut)
def add_or_update_item(
    payload: CartLineIn,
    user_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.add_or_update_line(
            customer_id=user_id,
            item_id=payload.item_id,
            quantity=payload.quantity,
        )
    except ServiceError as e:
        raise to_http(e)


@router.delete("/items/{item_id}", response_model=CartOut)
def remove_item(
    item_id: int,
    user_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.remove_line(user_id, item_id)
    except ServiceError as e:
        raise to_http(e)


@router.delete("", response_model=CartOut)
def empty_cart(
    user_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.empty_cart(user_id)
    except ServiceError as e:
        raise to_http(e)


@router.post("/checkout", response_model=OrderOut, status_code=201)
def checkout(
    request: Request,
    user_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
):
    """
    Zamienia koszyk klienta w zamówienie.
    Powiadomienie wysyłane asynchronicznie po commicie.
    """
    svc = get_service(db)
    checkout_svc = CheckoutService(db, notifier=request.app.state.notifier)
    try:
        cart = svc.load_cart(user_id)
        return checkout_svc.checkout(cart)
    except ServiceError as e:
        raise to_http(e)
