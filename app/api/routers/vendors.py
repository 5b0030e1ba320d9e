# app/api/routers/vendors.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.errors import to_http
from app.data.database import get_db
from app.domain.errors import ServiceError
from app.domain.schemas import ItemOut, VendorCreate, VendorOut, VendorUpdate
from app.services.catalog_service import CatalogService

router = APIRouter(prefix="/vendors", tags=["vendors"])


@router.post("/", response_model=VendorOut, status_code=201)
def create_vendor(payload: VendorCreate, db: Session = Depends(get_db)):
    svc = CatalogService(db)
    try:
        return svc.create_vendor(payload.name)
    except ServiceError as e:
        raise to_http(e)


@router.get("/{vendor_id}", response_model=VendorOut)
def get_vendor(vendor_id: int, db: Session = Depends(get_db)):
    svc = CatalogService(db)
    try:
        return svc.get_vendor(vendor_id)
    except ServiceError as e:
        raise to_http(e)


@router.get("/{vendor_id}/items", response_model=List[ItemOut])
def list_vendor_items(vendor_id: int, db: Session = Depends(get_db)):
    svc = CatalogService(db)
    try:
        return svc.list_vendor_items(vendor_id)
    except ServiceError as e:
        raise to_http(e)


@router.put("/{vendor_id}", response_model=VendorOut)
def update_vendor(vendor_id: int, payload: VendorUpdate, db: Session = Depends(get_db)):
    svc = CatalogService(db)
    try:
        return svc.update_vendor(vendor_id, payload.name)
    except ServiceError as e:
        raise to_http(e)


@router.delete("/{vendor_id}", status_code=204)
def delete_vendor(vendor_id: int, db: Session = Depends(get_db)):
    svc = CatalogService(db)
    try:
        svc.delete_vendor(vendor_id)
    except ServiceError as e:
        raise to_http(e)
