# app/api/routers/items.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.errors import to_http
from app.data.database import get_db
from app.domain.errors import ServiceError
from app.domain.schemas import ItemCreate, ItemOut, ItemUpdate
from app.services.catalog_service import CatalogService

router = APIRouter(prefix="/items", tags=["items"])


@router.post("/", response_model=ItemOut, status_code=201)
def create_item(payload: ItemCreate, db: Session = Depends(get_db)):
    svc = CatalogService(db)
    try:
        return svc.create_item(payload.vendor_id, payload.name, payload.price)
    except ServiceError as e:
        raise to_http(e)


@router.get("/{item_id}", response_model=ItemOut)
def get_item(item_id: int, db: Session = Depends(get_db)):
    svc = CatalogService(db)
    try:
        return svc.get_item(item_id)
    except ServiceError as e:
        raise to_http(e)


@router.put("/{item_id}", response_model=ItemOut)
def update_item(item_id: int, payload: ItemUpdate, db: Session = Depends(get_db)):
    svc = CatalogService(db)
    try:
        return svc.update_item(item_id, name=payload.name, price=payload.price)
    except ServiceError as e:
        raise to_http(e)


@router.delete("/{item_id}", status_code=204)
def delete_item(item_id: int, db: Session = Depends(get_db)):
    svc = CatalogService(db)
    try:
        svc.delete_item(item_id)
    except ServiceError as e:
        raise to_http(e)
