# app/api/routers/tables.py
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.errors import to_http
from app.data.database import get_db
from app.domain.errors import ServiceError
from app.domain.schemas import TableCreate, TableOut, TableUpdate
from app.services.table_service import TableService

router = APIRouter(prefix="/tables", tags=["tables"])


@router.get("/", response_model=List[TableOut])
def list_tables(vendor_id: int | None = Query(None, gt=0), db: Session = Depends(get_db)):
    svc = TableService(db)
    try:
        return svc.list_tables(vendor_id)
    except ServiceError as e:
        raise to_http(e)


@router.post("/", response_model=TableOut, status_code=201)
def create_table(payload: TableCreate, db: Session = Depends(get_db)):
    svc = TableService(db)
    try:
        return svc.create_table(
            vendor_id=payload.vendor_id,
            name=payload.name,
            customer_id=payload.customer_id,
            is_available=payload.is_available,
            is_needs_service=payload.is_needs_service,
        )
    except ServiceError as e:
        raise to_http(e)


@router.get("/{table_id}", response_model=TableOut)
def get_table(table_id: int, db: Session = Depends(get_db)):
    svc = TableService(db)
    try:
        return svc.get_table(table_id)
    except ServiceError as e:
        raise to_http(e)


@router.put("/{table_id}", response_model=TableOut)
def update_table(table_id: int, payload: TableUpdate, db: Session = Depends(get_db)):
    svc = TableService(db)
    try:
        #tylko pola przyslane w body, jawny null w customer_id zwalnia stolik
        return svc.update_table(table_id, payload.model_dump(exclude_unset=True))
    except ServiceError as e:
        raise to_http(e)


@router.delete("/{table_id}", status_code=204)
def delete_table(table_id: int, db: Session = Depends(get_db)):
    svc = TableService(db)
    try:
        svc.delete_table(table_id)
    except ServiceError as e:
        raise to_http(e)
